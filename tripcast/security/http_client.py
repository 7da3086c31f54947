"""Secure async HTTP client, the single exit point for provider calls.

Responsibilities:
  1. scrub API keys from exception messages
  2. one timeout policy, one attempt per call (no retry)
  3. isolate the httpx dependency
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from tripcast.security.key_manager import get_key_manager
from tripcast.shared.exceptions import ToolError


class AsyncSecureHttpClient:
    """Wraps httpx.AsyncClient; errors come out as scrubbed ToolError."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        tool_name: str = "http",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._timeout = timeout
        self._tool_name = tool_name
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._km = get_key_manager()

    async def __aenter__(self) -> "AsyncSecureHttpClient":
        self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_json(
        self,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Perform a GET and decode JSON. A client is opened per call unless
        the caller entered the async context first."""
        if self._client is not None:
            return await self._get_json(self._client, url, params=params, headers=headers)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            return await self._get_json(client, url, params=params, headers=headers)

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        params: Optional[dict[str, Any]],
        headers: Optional[dict[str, str]],
    ) -> Any:
        try:
            resp = await client.get(url, params=params, headers=headers)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            safe_msg = self._km.scrub_text(str(e))
            raise ToolError(self._tool_name, f"HTTP {e.response.status_code}: {safe_msg}") from None
        except httpx.TimeoutException:
            raise ToolError(self._tool_name, f"request timed out ({self._timeout}s)") from None
        except httpx.HTTPError as e:
            safe_msg = self._km.scrub_text(str(e))
            raise ToolError(self._tool_name, f"request failed: {safe_msg}") from None

        try:
            return resp.json()
        except ValueError as e:
            raise ToolError(self._tool_name, f"invalid JSON response: {self._km.scrub_text(str(e))}") from None
