"""Keyword search over whitepaper sections and subsections."""

from whitepaper_server.core.logging import get_logger
from whitepaper_server.core.scoring import calculate_relevance
from whitepaper_server.core.store import DocumentStore
from whitepaper_server.models.domain.results import SearchResult

logger = get_logger(__name__)


class SearchService:
    """Scores every section and subsection against a query."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def search(self, query: str) -> list[SearchResult]:
        """Return matching blocks, best first.

        Candidates are produced in document order (each section followed by
        its subsections) and sorted stably, so equal scores keep that order.
        """
        results: list[SearchResult] = []

        for section in self.store.document.sections:
            score = calculate_relevance(f"{section.heading} {section.content}", query)
            if score > 0:
                results.append(
                    SearchResult(label=section.heading, content=section.content, score=score)
                )

            for subsection in section.subsections:
                score = calculate_relevance(
                    f"{subsection.heading} {subsection.content}", query
                )
                if score > 0:
                    results.append(
                        SearchResult(
                            label=f"{section.heading} > {subsection.heading}",
                            content=subsection.content,
                            score=score,
                        )
                    )

        results.sort(key=lambda r: r.score, reverse=True)
        logger.debug("Search completed", query=query, results=len(results))
        return results
