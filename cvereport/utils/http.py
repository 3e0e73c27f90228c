"""Async HTTP client — one shared aiohttp session per client."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)


class AsyncHttpClient:
    """Shared async HTTP client with lazy session creation.

    Usage:
        async with AsyncHttpClient(timeout=30) as http:
            resp = await http.post(url, json={"a": 1})
            async with resp:
                body = await resp.json()
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = "cvereport/1.0",
        verify_ssl: bool = True,
    ):
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self.verify_ssl = verify_ssl
        self._session: aiohttp.ClientSession | None = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                connector=aiohttp.TCPConnector(ssl=None if self.verify_ssl else False),
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
        return self._session

    async def post(
        self,
        url: str,
        json: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> aiohttp.ClientResponse:
        session = await self._ensure_session()
        kw: dict[str, Any] = dict(kwargs)
        if headers:
            kw["headers"] = headers
        if timeout:
            kw["timeout"] = aiohttp.ClientTimeout(total=timeout)
        if json is not None:
            kw["json"] = json
        logger.debug("POST %s", url.split("?", 1)[0])
        return await session.post(url, **kw)

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
