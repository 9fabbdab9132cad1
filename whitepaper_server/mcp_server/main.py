"""MCP stdio server exposing the whitepaper tools and prompts."""

import asyncio
import logging
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from whitepaper_server.core.logging import setup_logging
from whitepaper_server.core.router import WhitepaperRouter
from whitepaper_server.core.store import DocumentStore
from whitepaper_server.models.config.server import ServerSettings

logger = logging.getLogger(__name__)


def create_server(router: WhitepaperRouter, name: str = "succinct-whitepaper-agent") -> Server:
    """Register the router's tools and prompts on a low-level MCP server."""
    server = Server(name)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available MCP tools."""
        return router.list_tools().tools

    # Arguments are validated by the router so every transport reports the
    # same missing-parameter messages.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        """Handle MCP tool calls.

        Router errors are raised as ``McpError``; the SDK returns them to the
        client as a ``CallToolResult`` with ``isError`` set and the error
        message as its text.
        """
        return router.call_tool(name, arguments).content

    @server.list_prompts()
    async def handle_list_prompts() -> list[types.Prompt]:
        return router.list_prompts().prompts

    @server.get_prompt()
    async def handle_get_prompt(
        name: str, arguments: dict[str, str] | None
    ) -> types.GetPromptResult:
        return router.get_prompt(name)

    return server


async def main(settings: ServerSettings | None = None):
    """Main entry point for the MCP server."""
    settings = settings or ServerSettings()
    setup_logging(settings.log_level, settings.log_file)

    store = DocumentStore.default()
    router = WhitepaperRouter(store, settings)
    server = create_server(router, settings.server_name)
    logger.info(f"Starting MCP server {settings.server_name} with {store!r}")

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=settings.server_name,
                server_version=settings.server_version,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def cli_main():
    """Synchronous entry point for script generation."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
