"""JSON-RPC style endpoint dispatching protocol methods by name."""

import logging
from typing import Any

import mcp.types as types
from fastapi import APIRouter, Depends
from mcp.shared.exceptions import McpError

from whitepaper_server.api.dependencies import get_router, to_payload
from whitepaper_server.core.router import WhitepaperRouter

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/rpc")
async def rpc(
    message: types.JSONRPCRequest,
    whitepaper: WhitepaperRouter = Depends(get_router),
) -> dict[str, Any]:
    """Dispatch ``tools/*`` and ``prompts/*`` methods.

    Errors are reported in-band as JSON-RPC error objects with HTTP 200.
    """
    try:
        result = whitepaper.dispatch(message.method, message.params)
    except McpError as e:
        logger.info(f"RPC {message.method} failed: {e.error.message}")
        return to_payload(
            types.JSONRPCError(jsonrpc="2.0", id=message.id, error=e.error)
        )

    return to_payload(
        types.JSONRPCResponse(jsonrpc="2.0", id=message.id, result=to_payload(result))
    )
