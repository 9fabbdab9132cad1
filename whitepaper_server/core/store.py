"""Read-only document store for the whitepaper and its glossary."""

from typing import Any, Mapping

from whitepaper_server.models.domain.document import ConceptGlossary, Document


class DocumentStore:
    """Holds the whitepaper and concept glossary for the process lifetime.

    Both are frozen models built once; services receive the store instead of
    reaching for module globals, so tests can hand in small fixtures.
    """

    def __init__(self, document: Document, glossary: ConceptGlossary):
        self.document = document
        self.glossary = glossary

    @classmethod
    def from_content(
        cls, content: Mapping[str, Any], concepts: Mapping[str, str]
    ) -> "DocumentStore":
        """Validate raw content mappings into a store."""
        return cls(
            document=Document.model_validate(content),
            glossary=ConceptGlossary(concepts=dict(concepts)),
        )

    @classmethod
    def default(cls) -> "DocumentStore":
        """Store backed by the bundled Succinct Network whitepaper."""
        from whitepaper_server.data import KEY_CONCEPTS, WHITEPAPER_CONTENT

        return cls.from_content(WHITEPAPER_CONTENT, KEY_CONCEPTS)

    def __repr__(self) -> str:
        return (
            f"DocumentStore(title='{self.document.title}', "
            f"sections={len(self.document.sections)}, "
            f"concepts={len(self.glossary.concepts)})"
        )
