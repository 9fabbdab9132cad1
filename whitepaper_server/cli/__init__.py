"""Command line interface for Whitepaper Server."""

from whitepaper_server import __version__

__all__ = ["__version__"]
