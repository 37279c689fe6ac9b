"""HTTP client for the accounts manager."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from arenahub.status import AccountsServerStatus

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class AccountsManagerClientError(Exception):
    """A request to the accounts manager failed."""


class AccountsManagerClient:
    """Talks to an accounts manager at a given host:port address."""

    def __init__(self, address: str, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = f"http://{address.rstrip('/')}"
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        logger.info("Created client with base_url='%s'.", self.base_url)

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def get_server_status(self) -> AccountsServerStatus:
        """Fetch the overall status of the server."""
        url = f"{self.base_url}/"
        try:
            async with self._get_session().get(url) as resp:
                resp.raise_for_status()
                data = await resp.json()
            return AccountsServerStatus.from_dict(data)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise AccountsManagerClientError(f"request failed, reason = {exc}") from exc

    async def close(self) -> None:
        """Release the underlying HTTP session."""
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "AccountsManagerClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()