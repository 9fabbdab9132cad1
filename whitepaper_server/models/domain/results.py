"""Result values returned by the search and lookup services.

Lookups never raise for a missing match or a missing input; they return one
of the tagged variants below and callers branch on ``kind``.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from whitepaper_server.models.domain.document import Section, Subsection


class SearchResult(BaseModel):
    """A scored section or subsection for one query."""

    model_config = ConfigDict(frozen=True)

    label: str
    content: str
    score: int = Field(ge=1)


class SectionMatch(BaseModel):
    """A top-level section matched by heading."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["section"] = "section"
    section: Section


class SubsectionMatch(BaseModel):
    """A subsection matched by heading, with its parent section heading."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["subsection"] = "subsection"
    parent_heading: str
    subsection: Subsection


class ConceptMatch(BaseModel):
    """Exact glossary hit."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["concept"] = "concept"
    name: str
    explanation: str


class ConceptSuggestions(BaseModel):
    """Glossary keys that partially match the query."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["suggestions"] = "suggestions"
    query: str
    suggestions: tuple[str, ...] = Field(min_length=1)


class NotFound(BaseModel):
    """Nothing matched ``query``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"
    query: str


class MissingParameter(BaseModel):
    """A required input was absent or empty."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["missing_parameter"] = "missing_parameter"
    parameter: str


SectionLookupResult = SectionMatch | SubsectionMatch | NotFound
ConceptLookupResult = ConceptMatch | ConceptSuggestions | NotFound | MissingParameter


__all__ = [
    "SearchResult",
    "SectionMatch",
    "SubsectionMatch",
    "ConceptMatch",
    "ConceptSuggestions",
    "NotFound",
    "MissingParameter",
    "SectionLookupResult",
    "ConceptLookupResult",
]
