"""Main CLI entry point for Whitepaper Server."""

from pathlib import Path

import click
from rich.console import Console

from whitepaper_server.models.config.server import ServerSettings

from .utils import echo_error

console = Console()


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="YAML settings file",
)
@click.option("--url", default=None, help="Base URL of a running server")
@click.pass_context
def cli(ctx, version, config_path, url):
    """Whitepaper Server - search and browse the Succinct Network whitepaper.

    Examples:
        whitepaper-server serve --port 3000          # Run the HTTP API
        whitepaper-server mcp                        # Run the MCP stdio server
        whitepaper-server search "proof contests"    # Query a running server
        whitepaper-server section Abstract
        whitepaper-server concept sp1
    """
    if version:
        from whitepaper_server import __version__

        console.print(f"Whitepaper Server v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)
    overrides = {"api_url": url} if url else {}
    ctx.obj["settings"] = ServerSettings.load_from_file(config_path, **overrides)


def register_commands():
    """Register all commands."""
    try:
        from .commands.server import mcp, serve, status

        cli.add_command(serve)
        cli.add_command(mcp)
        cli.add_command(status)
    except ImportError as e:
        echo_error(f"Failed to load server commands: {e}")

    try:
        from .commands.query import concept, prompt, search, section, sections

        cli.add_command(search)
        cli.add_command(section)
        cli.add_command(sections)
        cli.add_command(concept)
        cli.add_command(prompt)
    except ImportError as e:
        echo_error(f"Failed to load query commands: {e}")


register_commands()


if __name__ == "__main__":
    cli()
