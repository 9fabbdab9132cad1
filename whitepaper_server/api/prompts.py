"""Prompt API endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from whitepaper_server.api.dependencies import get_router, to_payload
from whitepaper_server.core.router import WhitepaperRouter
from whitepaper_server.models.api.tools import PromptGetRequest

router = APIRouter()


@router.post("/list")
async def list_prompts(
    whitepaper: WhitepaperRouter = Depends(get_router),
) -> dict[str, Any]:
    """List the canned prompts."""
    return to_payload(whitepaper.list_prompts())


@router.post("/get")
async def get_prompt(
    request: PromptGetRequest | None = None,
    whitepaper: WhitepaperRouter = Depends(get_router),
) -> dict[str, Any]:
    """Expand a canned prompt by name."""
    request = request or PromptGetRequest()
    return to_payload(whitepaper.get_prompt(request.name))
