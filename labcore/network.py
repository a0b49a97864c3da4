"""
CipherLab Async Network Client
===============================

:class:`LabHTTP` is a small GET-only client on top of
``httpx.AsyncClient``. Every failure, whether a transport error, a
timeout, a redirect loop, a body that cannot be decoded, a non-2xx
status or invalid JSON, surfaces as one :class:`LabHTTPError`.

The remote word-list source is the only caller. It makes a single
request per session under its own overall timeout, so there is no
retry loop and no response cache here.

References:
    - HTTPX documentation. https://www.python-httpx.org/
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger("cipherlab.network")


class LabHTTPError(Exception):
    """Any failed request: transport error, timeout, non-2xx status or bad JSON."""


class LabHTTP:
    """Async GET client that reports every failure as :class:`LabHTTPError`.

    Usage::

        async with LabHTTP(timeout=3.0) as http:
            words = await http.fetch_json("https://api.datamuse.com/words?ml=spy")

    Args:
        timeout:    Per-request timeout in seconds.
        user_agent: ``User-Agent`` header sent with every request.
        transport:  Custom httpx transport (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        user_agent: str = "CipherLab/1.0 (Kids Code Club)",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={"User-Agent": user_agent},
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> LabHTTP:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def fetch(
        self, url: str, *, params: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        """GET *url*.

        Raises:
            LabHTTPError: On any httpx error or a non-2xx status.
        """
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.debug("GET %s failed: %r", url, exc)
            raise LabHTTPError(f"GET {url} failed: {exc}") from exc

        if not response.is_success:
            raise LabHTTPError(f"HTTP {response.status_code} from {url}")
        return response

    async def fetch_json(
        self, url: str, *, params: Optional[dict[str, Any]] = None
    ) -> Any:
        """GET *url* and decode the body as JSON.

        Raises:
            LabHTTPError: On any request failure or an undecodable body.
        """
        response = await self.fetch(url, params=params)
        try:
            return response.json()
        except (ValueError, httpx.HTTPError) as exc:
            raise LabHTTPError(f"Invalid JSON from {url}") from exc
