# -*- coding: utf-8 -*-
"""HTTP access to the remote configuration endpoint."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..constant import (
    ADMIN_TOKEN,
    BACKEND_URL,
    CONFIG_READ_PATH,
    CONFIG_WRITE_PATH,
    HTTP_TIMEOUT,
)

logger = logging.getLogger(__name__)


class ConfigClient:
    """Reads and writes the configuration document over HTTP.

    A fresh ``httpx.AsyncClient`` is opened per request, so the client
    can be shared by sessions living on different event loops.
    """

    def __init__(
        self,
        base_url: str = BACKEND_URL,
        token: Optional[str] = ADMIN_TOKEN,
        *,
        read_path: str = CONFIG_READ_PATH,
        write_path: str = CONFIG_WRITE_PATH,
        timeout: float = HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.read_path = read_path
        self.write_path = write_path
        self.timeout = timeout
        self._transport = transport

    def _get_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._get_headers(),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def fetch(self) -> Any:
        """GET the persisted document and return the decoded body."""
        async with self._client() as c:
            r = await c.get(self.read_path)
            r.raise_for_status()
            logger.debug("Fetched configuration from %s", self.read_path)
            return r.json()

    async def update(self, payload: dict) -> Any:
        """POST the full document. Returns the decoded body, or None."""
        async with self._client() as c:
            r = await c.post(self.write_path, json=payload)
            r.raise_for_status()
            logger.debug("Saved configuration to %s", self.write_path)
            if not r.content:
                return None
            try:
                return r.json()
            except ValueError:
                logger.warning(
                    "Write endpoint answered with a non-JSON body; "
                    "keeping the submitted configuration",
                )
                return None
