"""
Real Inventory Backend HTTP Client.

Used when INVENTORY_API_BASE is configured (or INTEGRATIONS_MODE=real).
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx

from inventory_console.integrations.contracts.inventory import InventoryBackend

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Base class for failures talking to the inventory backend."""


class BackendTransportError(BackendError):
    pass


class BackendHTTPError(BackendError):
    def __init__(self, status_code: int, text: str) -> None:
        super().__init__(f"HTTP {status_code}: {text}")
        self.status_code = status_code
        self.text = text

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class InventoryBackendClient(InventoryBackend):
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("INVENTORY_API_BASE", "")).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport
        if not self.base_url:
            logger.warning("Inventory backend base URL is not set.")

    def build_url(self, path: str) -> str:
        if path.startswith("http"):
            return path
        return f"{self.base_url}{path}"

    async def fetch_json(self, path: str, method: str = "GET", body: Any = None) -> Any:
        url = self.build_url(path)
        headers: Dict[str, str] = {}
        kwargs: Dict[str, Any] = {}
        if isinstance(body, (dict, list)):
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body
        elif body is not None:
            kwargs["content"] = body

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.request(method, url, headers=headers, **kwargs)
        except httpx.RequestError as e:
            logger.error("Request error contacting inventory backend: %s %s: %s", method, url, e)
            raise BackendTransportError(f"Could not reach inventory backend: {e}") from e

        logger.info("%s %s -> %s", method, url, response.status_code)
        if not response.is_success:
            raise BackendHTTPError(response.status_code, response.text)

        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type and response.content:
            try:
                return response.json()
            except ValueError as e:
                raise BackendError(f"Invalid JSON from inventory backend: {e}") from e
        return None
