"""Query commands for the Whitepaper Server CLI.

Each command calls a running server's HTTP API and renders the tool text as
markdown.
"""

import asyncio

import click
from rich.console import Console
from rich.markdown import Markdown

from whitepaper_server.cli.utils import APIClient, echo_error

console = Console()


def _run_tool(ctx: click.Context, name: str, arguments: dict | None = None) -> None:
    client = APIClient(ctx.obj["settings"].api_url)
    success, text = asyncio.run(client.call_tool(name, arguments))
    if not success:
        echo_error(text)
        ctx.exit(1)
    console.print(Markdown(text))


@click.command()
@click.argument("query")
@click.pass_context
def search(ctx, query):
    """Keyword search across sections and subsections.

    Examples:
        whitepaper-server search "proof contests"
        whitepaper-server search zkvm
    """
    _run_tool(ctx, "search_whitepaper", {"query": query})


@click.command()
@click.argument("name")
@click.pass_context
def section(ctx, name):
    """Show a section (with its subsections) or a single subsection."""
    _run_tool(ctx, "get_section", {"section": name})


@click.command()
@click.pass_context
def sections(ctx):
    """List every section and subsection heading."""
    _run_tool(ctx, "list_sections")


@click.command()
@click.argument("name")
@click.pass_context
def concept(ctx, name):
    """Explain a key concept, or suggest close matches."""
    _run_tool(ctx, "get_key_concepts", {"concept": name})


@click.command()
@click.argument("name")
@click.pass_context
def prompt(ctx, name):
    """Print a canned prompt."""
    client = APIClient(ctx.obj["settings"].api_url)
    success, response = asyncio.run(client.post("/prompts/get", {"name": name}))
    if not success:
        echo_error(response)
        ctx.exit(1)
    for message in response["messages"]:
        console.print(message["content"]["text"])
