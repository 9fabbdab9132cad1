"""MCP Server for the Succinct Network whitepaper.

Exposes the whitepaper search and lookup tools, plus canned prompts, over the
Model Context Protocol stdio transport.
"""
