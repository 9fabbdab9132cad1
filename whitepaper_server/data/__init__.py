"""Bundled whitepaper content and key concept glossary."""

from whitepaper_server.data.key_concepts import KEY_CONCEPTS
from whitepaper_server.data.whitepaper import WHITEPAPER_CONTENT

__all__ = ["KEY_CONCEPTS", "WHITEPAPER_CONTENT"]
