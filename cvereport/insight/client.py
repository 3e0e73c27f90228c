"""Text-generation client for AI insights, and its error taxonomy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from cvereport.utils.http import AsyncHttpClient

if TYPE_CHECKING:
    from cvereport.config import InsightSettings

logger = logging.getLogger(__name__)

NO_CONTENT_MESSAGE = "No content received from API."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class InsightError(Exception):
    """Base class for a failed insight request. ``message`` is user-facing."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InsightTransportError(InsightError):
    """The request never completed (network, DNS, TLS, timeout)."""

    @classmethod
    def from_exception(cls, exc: BaseException) -> InsightTransportError:
        return cls(str(exc).strip() or UNKNOWN_ERROR_MESSAGE)


class InsightHTTPError(InsightError):
    """The endpoint answered with a non-success status code."""

    def __init__(self, status: int, reason: str | None = None) -> None:
        self.status = status
        self.reason = reason or ""
        super().__init__(self.reason or f"HTTP {status}")


class InsightEmptyResponseError(InsightError):
    """A success response carried no candidate text."""

    def __init__(self, message: str = NO_CONTENT_MESSAGE) -> None:
        super().__init__(message)


def build_request(prompt: str) -> dict[str, Any]:
    """Request body for a single-turn generation."""
    return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}


def extract_text(body: Any) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a response body."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise InsightEmptyResponseError() from None
    if not isinstance(text, str) or not text:
        raise InsightEmptyResponseError()
    return text


class InsightClient:
    """Posts prompts to a ``generateContent``-style endpoint."""

    def __init__(
        self,
        http: AsyncHttpClient,
        *,
        endpoint: str,
        model: str,
        api_key: str = "",
    ) -> None:
        self._http = http
        self._endpoint = endpoint.rstrip("/")
        self._model = model
        self._api_key = api_key

    @classmethod
    def from_settings(cls, settings: InsightSettings) -> InsightClient:
        http = AsyncHttpClient(timeout=settings.timeout, user_agent=settings.user_agent)
        return cls(
            http,
            endpoint=settings.endpoint,
            model=settings.model,
            api_key=settings.api_key,
        )

    @property
    def url(self) -> str:
        url = f"{self._endpoint}/models/{self._model}:generateContent"
        if self._api_key:
            url += f"?key={self._api_key}"
        return url

    async def generate(self, prompt: str) -> str:
        """Return the generated text or raise an :class:`InsightError`."""
        try:
            resp = await self._http.post(self.url, json=build_request(prompt))
            async with resp:
                if not 200 <= resp.status < 300:
                    logger.info("Insight request failed: %s %s", resp.status, resp.reason)
                    raise InsightHTTPError(resp.status, resp.reason)
                try:
                    body = await resp.json(content_type=None)
                except ValueError:
                    raise InsightEmptyResponseError() from None
        except InsightError:
            raise
        except (aiohttp.ClientError, TimeoutError, OSError) as exc:
            logger.info("Insight transport failure: %r", exc)
            raise InsightTransportError.from_exception(exc) from exc
        return extract_text(body)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> InsightClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
