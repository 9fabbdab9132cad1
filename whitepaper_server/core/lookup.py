"""Section and concept lookup services."""

from whitepaper_server.core.store import DocumentStore
from whitepaper_server.models.domain.results import (
    ConceptLookupResult,
    ConceptMatch,
    ConceptSuggestions,
    MissingParameter,
    NotFound,
    SectionLookupResult,
    SectionMatch,
    SubsectionMatch,
)


class SectionLookupService:
    """Case-insensitive retrieval of a section or subsection by heading."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def get_section(self, name: str) -> SectionLookupResult:
        """Find a section by heading, then fall back to subsections.

        The first subsection match in document order wins.
        """
        wanted = name.lower()
        sections = self.store.document.sections

        for section in sections:
            if section.heading.lower() == wanted:
                return SectionMatch(section=section)

        for section in sections:
            for subsection in section.subsections:
                if subsection.heading.lower() == wanted:
                    return SubsectionMatch(
                        parent_heading=section.heading, subsection=subsection
                    )

        return NotFound(query=name)


class ConceptLookupService:
    """Exact and partial lookup over the concept glossary."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def get_concept(self, name: str | None) -> ConceptLookupResult:
        """Look up a concept.

        An exact (case-insensitive) key wins. Otherwise every key that
        contains the query, or is contained in it, is offered as a
        suggestion; very short queries can therefore match many keys.
        """
        if not name:
            return MissingParameter(parameter="concept")

        glossary = self.store.glossary
        wanted = name.lower()
        keys = glossary.names()

        for key in keys:
            if key.lower() == wanted:
                return ConceptMatch(name=key, explanation=glossary.explain(key))

        similar = [key for key in keys if wanted in key.lower() or key.lower() in wanted]
        if similar:
            return ConceptSuggestions(query=name, suggestions=tuple(similar))

        return NotFound(query=name)
