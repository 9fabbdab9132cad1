"""Text rendering for tool responses."""

from whitepaper_server.models.domain.document import Document, Section
from whitepaper_server.models.domain.results import (
    ConceptMatch,
    ConceptSuggestions,
    SearchResult,
    SubsectionMatch,
)

ELLIPSIS = "..."


def clip(content: str, max_chars: int) -> str:
    """Truncate ``content`` to ``max_chars``, marking the cut with an ellipsis."""
    if len(content) <= max_chars:
        return content
    return content[:max_chars] + ELLIPSIS


def format_search_results(
    query: str, results: list[SearchResult], limit: int = 5, max_chars: int = 1000
) -> str:
    """Render the result count plus the top ``limit`` results."""
    if not results:
        return (
            f'No results found for "{query}". '
            "Try a different search term or browse the sections."
        )

    blocks = [f"**{r.label}**\n{clip(r.content, max_chars)}" for r in results[:limit]]
    return f'Found {len(results)} result(s) for "{query}":\n\n' + "\n\n".join(blocks)


def format_section(section: Section) -> str:
    """Render a section with all of its subsections beneath it."""
    text = f"**{section.heading}**\n\n{section.content}"
    if section.subsections:
        text += "\n\n" + "\n\n".join(
            f"### {sub.heading}\n\n{sub.content}" for sub in section.subsections
        )
    return text


def format_subsection(match: SubsectionMatch) -> str:
    return (
        f"**{match.parent_heading} > {match.subsection.heading}**\n\n"
        f"{match.subsection.content}"
    )


def format_section_tree(document: Document) -> str:
    """Render every section heading with its subsection headings indented."""
    lines = []
    for section in document.sections:
        lines.append(f"- **{section.heading}**")
        lines.extend(f"  - {sub.heading}" for sub in section.subsections)
    return f"# {document.name} Whitepaper Sections\n\n" + "\n".join(lines)


def format_concept(match: ConceptMatch) -> str:
    return f"**{match.name}**\n\n{match.explanation}"


def format_concept_suggestions(result: ConceptSuggestions) -> str:
    options = "\n".join(f"- {name}" for name in result.suggestions)
    return (
        f'Concept "{result.query}" not found exactly. Did you mean one of these?\n\n'
        f"{options}\n\n"
        "Use the get_key_concepts tool with one of these exact terms."
    )
