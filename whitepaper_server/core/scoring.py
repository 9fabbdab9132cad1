"""Keyword relevance scoring for whitepaper search."""

import re

PHRASE_MATCH_SCORE = 10
TERM_MATCH_SCORE = 2
WHOLE_WORD_BONUS = 3
MIN_TERM_LENGTH = 3


def extract_terms(query: str) -> list[str]:
    """Split a query on whitespace, dropping terms shorter than three characters."""
    return [term for term in query.lower().split() if len(term) >= MIN_TERM_LENGTH]


def calculate_relevance(text: str, query: str) -> int:
    """Score how well ``text`` matches ``query``.

    Matching is case-insensitive. The whole query found verbatim earns
    ``PHRASE_MATCH_SCORE``; each kept term found anywhere earns
    ``TERM_MATCH_SCORE``, plus ``WHOLE_WORD_BONUS`` when it also appears as a
    whole word. Repeated terms count once per occurrence in the query.

    Args:
        text: Text block to score
        query: Raw user query

    Returns:
        Non-negative integer score; 0 means no match
    """
    text = text.lower()
    query = query.lower()
    score = 0

    if query.strip() and query in text:
        score += PHRASE_MATCH_SCORE

    for term in extract_terms(query):
        if term in text:
            score += TERM_MATCH_SCORE
            if re.search(rf"\b{re.escape(term)}\b", text):
                score += WHOLE_WORD_BONUS

    return score
