"""Utility functions for the Whitepaper Server CLI."""

from typing import Any

import httpx
from rich.console import Console

console = Console()


def echo_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {message}[/green]")


def echo_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗ {message}[/red]")


def echo_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠ {message}[/yellow]")


def echo_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ {message}[/blue]")


def _error_message(response: httpx.Response) -> str:
    """Pull the message out of an error envelope, falling back to raw text."""
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return f"HTTP {response.status_code}: {response.text}"


class APIClient:
    """HTTP client for a running Whitepaper Server."""

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def get(self, endpoint: str) -> tuple[bool, dict[str, Any] | str]:
        """Make GET request to API endpoint.

        Returns:
            tuple: (success: bool, response: dict|str)
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url(endpoint))
        except httpx.RequestError as e:
            return False, f"Connection error: {e}"

        if response.status_code == 200:
            return True, response.json()
        return False, _error_message(response)

    async def post(
        self, endpoint: str, data: dict[str, Any] | None = None
    ) -> tuple[bool, dict[str, Any] | str]:
        """Make POST request to API endpoint.

        Returns:
            tuple: (success: bool, response: dict|str)
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url(endpoint), json=data or {})
        except httpx.RequestError as e:
            return False, f"Connection error: {e}"

        if response.status_code == 200:
            return True, response.json()
        return False, _error_message(response)

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> tuple[bool, str]:
        """Call a tool and return the text of its first content block."""
        success, response = await self.post(
            "/tools/call", {"name": name, "arguments": arguments or {}}
        )
        if not success:
            return False, response
        return True, response["content"][0]["text"]
