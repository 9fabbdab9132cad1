"""Tool API endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from whitepaper_server.api.dependencies import get_router, to_payload
from whitepaper_server.core.router import WhitepaperRouter
from whitepaper_server.models.api.tools import ToolCallRequest

router = APIRouter()


@router.post("/list")
async def list_tools(
    whitepaper: WhitepaperRouter = Depends(get_router),
) -> dict[str, Any]:
    """List the available tools and their input schemas."""
    return to_payload(whitepaper.list_tools())


@router.post("/call")
async def call_tool(
    request: ToolCallRequest | None = None,
    whitepaper: WhitepaperRouter = Depends(get_router),
) -> dict[str, Any]:
    """Invoke a tool by name."""
    request = request or ToolCallRequest()
    return to_payload(whitepaper.call_tool(request.name, request.arguments))
