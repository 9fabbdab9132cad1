"""Document-related domain models."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _ensure_unique_headings(headings: list[str], scope: str) -> None:
    seen: set[str] = set()
    for heading in headings:
        key = heading.lower()
        if key in seen:
            raise ValueError(f"Duplicate heading '{heading}' in {scope}")
        seen.add(key)


class Subsection(BaseModel):
    """A titled block of text nested one level under a section."""

    model_config = ConfigDict(frozen=True)

    heading: str = Field(min_length=1)
    content: str = Field(min_length=1)


class Section(BaseModel):
    """A top-level titled block of the whitepaper."""

    model_config = ConfigDict(frozen=True)

    heading: str = Field(min_length=1)
    content: str = Field(min_length=1)
    subsections: tuple[Subsection, ...] = ()

    @model_validator(mode="after")
    def validate_subsection_headings(self):
        """Subsection headings are unique within their section, ignoring case."""
        _ensure_unique_headings(
            [sub.heading for sub in self.subsections], f"section '{self.heading}'"
        )
        return self


class Document(BaseModel):
    """The whitepaper: ordered sections with their subsections."""

    model_config = ConfigDict(frozen=True)

    title: str
    name: str
    authors: tuple[str, ...] = ()
    sections: tuple[Section, ...]

    @model_validator(mode="after")
    def validate_section_headings(self):
        """Section headings are unique within the document, ignoring case."""
        _ensure_unique_headings([s.heading for s in self.sections], "document")
        return self


class ConceptGlossary(BaseModel):
    """Flat mapping from concept name to explanation."""

    model_config = ConfigDict(frozen=True)

    concepts: Mapping[str, str]

    @field_validator("concepts")
    @classmethod
    def validate_concepts(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        """Keys must be unique case-insensitively and explanations non-empty.

        The validated mapping is wrapped read-only so the glossary cannot be
        edited in place after construction.
        """
        seen: set[str] = set()
        for name, explanation in v.items():
            if name.lower() in seen:
                raise ValueError(f"Duplicate concept '{name}'")
            if not explanation:
                raise ValueError(f"Concept '{name}' has no explanation")
            seen.add(name.lower())
        return MappingProxyType(dict(v))

    def names(self) -> list[str]:
        return list(self.concepts)

    def explain(self, name: str) -> str:
        return self.concepts[name]


__all__ = ["Subsection", "Section", "Document", "ConceptGlossary"]
