"""Async JSON-RPC connection to a rippled server."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ledger_balances.api.errors import LedgerConnectionError, RippledError
from ledger_balances.config import Settings

logger = logging.getLogger(__name__)


class LedgerConnection:
    """Thin request/response adapter over the rippled JSON-RPC API."""

    def __init__(self, url: str, *, timeout: float = 20.0, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._url = url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "LedgerConnection":
        return cls(settings.rippled_url, timeout=settings.request_timeout)

    async def request(self, command: str, **params: Any) -> dict[str, Any]:
        """Send one command and return its ``result`` object."""

        payload = {"method": command, "params": [{k: v for k, v in params.items() if v is not None}]}
        logger.debug("rippled request %s %s", command, payload["params"][0])

        try:
            response = await self._client.post(self._url, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as exc:
            raise LedgerConnectionError(f"{command} request failed: {exc}") from exc
        except ValueError as exc:
            raise LedgerConnectionError(f"{command} returned a non-JSON body") from exc

        result = body.get("result") if isinstance(body, dict) else None
        if not isinstance(result, dict):
            raise LedgerConnectionError(f"{command} returned an unexpected response shape")
        if result.get("status") == "error" or "error" in result:
            raise RippledError(result.get("error", "unknownError"), result.get("error_message"))
        return result

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()
