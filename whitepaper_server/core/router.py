"""Request routing for whitepaper tools and prompts.

The router is transport-agnostic: the HTTP API, the JSON-RPC endpoint and
the MCP stdio server all call into it and get MCP result models back.
Failures are raised as ``McpError`` with a JSON-RPC error code.
"""

from typing import Any

import mcp.types as types
from pydantic import BaseModel, ValidationError

from whitepaper_server.core.catalog import PROMPTS, TOOLS, build_prompt
from whitepaper_server.core.errors import (
    McpError,
    internal_error,
    invalid_params,
    method_not_found,
)
from whitepaper_server.core.formatting import (
    format_concept,
    format_concept_suggestions,
    format_search_results,
    format_section,
    format_section_tree,
    format_subsection,
)
from whitepaper_server.core.logging import get_logger
from whitepaper_server.core.lookup import ConceptLookupService, SectionLookupService
from whitepaper_server.core.search import SearchService
from whitepaper_server.core.store import DocumentStore
from whitepaper_server.models.api.tools import (
    TOOL_ARGUMENTS,
    GetKeyConceptsArguments,
    GetKeyConceptsCall,
    GetSectionCall,
    ListSectionsCall,
    SearchWhitepaperCall,
    ToolCall,
    tool_call_adapter,
)
from whitepaper_server.models.config.server import ServerSettings
from whitepaper_server.models.domain.results import (
    ConceptMatch,
    ConceptSuggestions,
    MissingParameter,
    SectionMatch,
    SubsectionMatch,
)

logger = get_logger(__name__)


class WhitepaperRouter:
    """Dispatches tool calls, prompt requests and protocol methods."""

    def __init__(self, store: DocumentStore, settings: ServerSettings | None = None):
        self.store = store
        self.settings = settings or ServerSettings()
        self.search_service = SearchService(store)
        self.section_lookup = SectionLookupService(store)
        self.concept_lookup = ConceptLookupService(store)

    # Tools

    def list_tools(self) -> types.ListToolsResult:
        return types.ListToolsResult(tools=TOOLS)

    def parse_tool_call(self, name: str | None, arguments: Any) -> ToolCall:
        """Validate a raw tool name and argument bag into a typed call.

        Raises:
            McpError: METHOD_NOT_FOUND for an unknown tool, INVALID_PARAMS
                when a required argument is missing or empty
        """
        if not isinstance(name, str) or name not in TOOL_ARGUMENTS:
            raise method_not_found(f"Unknown tool: {name}")
        argument_model = TOOL_ARGUMENTS[name]

        try:
            return tool_call_adapter.validate_python(
                {"name": name, "arguments": arguments or {}}
            )
        except ValidationError:
            raise invalid_params(argument_model.missing_message)

    def call_tool(self, name: str | None, arguments: Any = None) -> types.CallToolResult:
        """Run a tool and wrap its text in a ``CallToolResult``."""
        call = self.parse_tool_call(name, arguments)
        logger.debug("Tool call", tool=call.name)

        try:
            text = self._run_tool(call)
        except McpError:
            raise
        except Exception as e:
            logger.error(f"Tool execution failed: {e}", exc_info=True, tool=call.name)
            raise internal_error(str(e))

        return types.CallToolResult(content=[types.TextContent(type="text", text=text)])

    def _run_tool(self, call: ToolCall) -> str:
        if isinstance(call, SearchWhitepaperCall):
            return self.search(call.arguments.query)
        if isinstance(call, GetSectionCall):
            return self.get_section(call.arguments.section)
        if isinstance(call, ListSectionsCall):
            return self.list_sections()
        if isinstance(call, GetKeyConceptsCall):
            return self.get_key_concept(call.arguments.concept)
        raise method_not_found(f"Unknown tool: {call.name}")

    def search(self, query: str) -> str:
        results = self.search_service.search(query)
        return format_search_results(
            query,
            results,
            limit=self.settings.search_result_limit,
            max_chars=self.settings.search_content_chars,
        )

    def get_section(self, name: str) -> str:
        result = self.section_lookup.get_section(name)
        if isinstance(result, SectionMatch):
            return format_section(result.section)
        if isinstance(result, SubsectionMatch):
            return format_subsection(result)
        raise invalid_params(f'Section "{name}" not found')

    def list_sections(self) -> str:
        return format_section_tree(self.store.document)

    def get_key_concept(self, name: str) -> str:
        result = self.concept_lookup.get_concept(name)
        if isinstance(result, ConceptMatch):
            return format_concept(result)
        if isinstance(result, ConceptSuggestions):
            return format_concept_suggestions(result)
        if isinstance(result, MissingParameter):
            raise invalid_params(GetKeyConceptsArguments.missing_message)
        raise invalid_params(
            f'Concept "{name}" not found. Try searching the whitepaper instead.'
        )

    # Prompts

    def list_prompts(self) -> types.ListPromptsResult:
        return types.ListPromptsResult(prompts=PROMPTS)

    def get_prompt(self, name: str | None) -> types.GetPromptResult:
        prompt = build_prompt(name) if isinstance(name, str) else None
        if prompt is None:
            raise invalid_params(f"Unknown prompt: {name}")
        return prompt

    # JSON-RPC style method dispatch

    def dispatch(self, method: str, params: dict[str, Any] | None = None) -> BaseModel:
        """Route a protocol method name to the matching operation."""
        params = params or {}

        if method == "tools/list":
            return self.list_tools()
        elif method == "tools/call":
            return self.call_tool(params.get("name"), params.get("arguments"))
        elif method == "prompts/list":
            return self.list_prompts()
        elif method == "prompts/get":
            return self.get_prompt(params.get("name"))

        raise method_not_found(f"Unknown method: {method}")
