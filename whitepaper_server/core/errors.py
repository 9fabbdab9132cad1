"""Protocol error constructors.

Errors use the MCP SDK's ``McpError`` so the same exception travels through
the HTTP API, the JSON-RPC endpoint and the stdio server.
"""

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


def invalid_params(message: str) -> McpError:
    """Missing or empty argument, or a lookup that found nothing."""
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


def method_not_found(message: str) -> McpError:
    return McpError(ErrorData(code=METHOD_NOT_FOUND, message=message))


def internal_error(message: str) -> McpError:
    return McpError(ErrorData(code=INTERNAL_ERROR, message=message))


__all__ = [
    "McpError",
    "invalid_params",
    "method_not_found",
    "internal_error",
]
