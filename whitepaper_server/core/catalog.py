"""Tool schemas and canned prompts advertised by the server."""

import mcp.types as types

TOOLS: list[types.Tool] = [
    types.Tool(
        name="search_whitepaper",
        description="Search for information in the Succinct Network whitepaper",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to find relevant information in the whitepaper",
                },
            },
            "required": ["query"],
        },
    ),
    types.Tool(
        name="get_section",
        description="Get a specific section of the whitepaper",
        inputSchema={
            "type": "object",
            "properties": {
                "section": {
                    "type": "string",
                    "description": "Name of the section to retrieve",
                },
            },
            "required": ["section"],
        },
    ),
    types.Tool(
        name="list_sections",
        description="List all sections and subsections in the whitepaper",
        inputSchema={"type": "object", "properties": {}, "required": []},
    ),
    types.Tool(
        name="get_key_concepts",
        description="Get an explanation of key concepts in the Succinct Network",
        inputSchema={
            "type": "object",
            "properties": {
                "concept": {
                    "type": "string",
                    "description": "Name of the concept to explain",
                },
            },
            "required": ["concept"],
        },
    ),
]

PROMPTS: list[types.Prompt] = [
    types.Prompt(
        name="whitepaper_summary",
        description="Get a summary of the entire Succinct Network whitepaper",
    ),
    types.Prompt(
        name="proof_contests_explained",
        description="Get a detailed explanation of how proof contests work",
    ),
    types.Prompt(
        name="network_architecture",
        description="Get an overview of the Succinct Network architecture",
    ),
    types.Prompt(
        name="applications",
        description="Learn about potential applications of the Succinct Network",
    ),
]

# Prompt name -> fixed instruction sent as a single user message
PROMPT_TEXTS: dict[str, str] = {
    "whitepaper_summary": (
        "Provide a concise summary of the Succinct Network whitepaper, "
        "highlighting its key innovations and main components."
    ),
    "proof_contests_explained": (
        "Explain in detail how proof contests work in the Succinct Network, "
        "including the mechanism design, incentives, and how they balance "
        "cost-effectiveness with decentralization."
    ),
    "network_architecture": (
        "Describe the architecture of the Succinct Network, including how users "
        "and provers interact with the system, and how the application-specific "
        "blockchain is designed."
    ),
    "applications": (
        "What are the potential applications of the Succinct Network? How can it "
        "be used to enhance existing systems or enable new use cases?"
    ),
}


def build_prompt(name: str) -> types.GetPromptResult | None:
    """Expand a canned prompt, or return None for an unknown name."""
    text = PROMPT_TEXTS.get(name)
    if text is None:
        return None
    return types.GetPromptResult(
        messages=[
            types.PromptMessage(
                role="user",
                content=types.TextContent(type="text", text=text),
            )
        ]
    )
