"""Core domain models."""

from whitepaper_server.models.domain.document import *
from whitepaper_server.models.domain.results import *

__all__ = [
    "Subsection",
    "Section",
    "Document",
    "ConceptGlossary",
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
