"""Configuration models for Whitepaper Server."""

from whitepaper_server.models.config.server import *

__all__ = ["ServerSettings"]
