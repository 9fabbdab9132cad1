"""
Whitepaper Server: MCP-style tools and prompts over the Succinct Network whitepaper.

Serves keyword search, section and glossary lookups over HTTP (FastAPI) and
over the Model Context Protocol stdio transport.
"""

__version__ = "1.0.0"
