"""Shared FastAPI dependencies."""

from typing import Any

from fastapi import Request
from pydantic import BaseModel

from whitepaper_server.core.router import WhitepaperRouter


def get_router(request: Request) -> WhitepaperRouter:
    """Dependency to get the whitepaper router."""
    return request.app.state.router


def to_payload(result: BaseModel) -> dict[str, Any]:
    """Dump an MCP result model the way it goes over the wire."""
    return result.model_dump(mode="json", by_alias=True, exclude_none=True)
