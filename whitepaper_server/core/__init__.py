"""Core services: scoring, search, lookups and request routing."""

from whitepaper_server.core.lookup import ConceptLookupService, SectionLookupService
from whitepaper_server.core.router import WhitepaperRouter
from whitepaper_server.core.scoring import calculate_relevance
from whitepaper_server.core.search import SearchService
from whitepaper_server.core.store import DocumentStore

__all__ = [
    "ConceptLookupService",
    "DocumentStore",
    "SearchService",
    "SectionLookupService",
    "WhitepaperRouter",
    "calculate_relevance",
]
