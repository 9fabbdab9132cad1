"""Server commands for the Whitepaper Server CLI."""

import asyncio

import click
from rich.console import Console
from rich.table import Table

from whitepaper_server.cli.utils import APIClient, echo_error, echo_info, echo_success
from whitepaper_server.core.logging import setup_logging

console = Console()


@click.command()
@click.option("--host", default=None, help="Interface to bind")
@click.option("--port", type=int, default=None, help="Port to listen on")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level",
)
@click.pass_context
def serve(ctx, host, port, log_level):
    """Run the HTTP API.

    Examples:
        whitepaper-server serve
        whitepaper-server serve --port 8080 --log-level debug
    """
    from whitepaper_server.api.main import run

    overrides = {
        "host": host,
        "port": port,
        "log_level": log_level.upper() if log_level else None,
    }
    settings = ctx.obj["settings"].model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    setup_logging(settings.log_level, settings.log_file)
    echo_info(f"Serving on http://{settings.host}:{settings.port}")
    run(settings)


@click.command()
@click.pass_context
def mcp(ctx):
    """Run the MCP server over stdio."""
    from whitepaper_server.mcp_server.main import main

    asyncio.run(main(ctx.obj["settings"]))


@click.command()
@click.pass_context
def status(ctx):
    """Check that a server is reachable."""
    client = APIClient(ctx.obj["settings"].api_url)
    success, response = asyncio.run(client.get("/health"))

    if not success:
        echo_error(f"Server not reachable at {client.base_url}: {response}")
        ctx.exit(1)

    echo_success(f"Server is up at {client.base_url}")
    table = Table(show_header=False)
    for key in ("status", "message", "version", "timestamp"):
        table.add_row(key, str(response.get(key, "")))
    console.print(table)
