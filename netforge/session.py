import logging
from typing import Any, Optional
from urllib.parse import urljoin

import httpx

from .errors import InvalidResponseError
from .logging import get_logger
from .request import Request
from .response import Response


def default_transport(**kwargs: Any) -> httpx.AsyncClient:
    """
    Build the transport a Session uses when none is supplied.

    Keyword arguments go straight to ``httpx.AsyncClient``.
    """
    return httpx.AsyncClient(**kwargs)


def resolve_url(base_url: Optional[str], request: Request) -> str:
    url = request.prepared_url()
    return urljoin(base_url, url) if base_url else url


class Session:
    """
    Sends Requests through an ``httpx.AsyncClient`` (or any object with a
    compatible async ``request`` method).

    Every ``send`` is exactly one round trip: no retries, timeouts, caching
    or redirect handling are added here. A transport passed in by the caller
    is never closed by the session.

    Example:
        async with Session() as session:
            resp = await session.send(Request("https://api.example.com/users", "GET"))
            users = resp.decode(list)
    """

    def __init__(
        self,
        transport: Optional[Any] = None,
        *,
        base_url: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else default_transport()
        self.base_url = base_url
        self.logger = logger or get_logger()

    async def send(self, request: Request) -> Response:
        url = resolve_url(self.base_url, request)
        method = request.method.value
        self.logger.debug("%s %s", method, url)
        try:
            reply = await self.transport.request(
                method,
                url,
                headers=request.headers,
                content=request.body,
            )
        except httpx.UnsupportedProtocol as exc:
            self.logger.warning("%s %s: not an HTTP address", method, url)
            raise InvalidResponseError(f"Not an HTTP URL: {url}") from exc
        except httpx.TransportError as exc:
            self.logger.debug("%s %s failed: %s", method, url, exc)
            raise
        try:
            response = Response.from_httpx(reply)
        except InvalidResponseError as exc:
            self.logger.warning("%s %s: %s", method, url, exc)
            raise
        self.logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    async def aclose(self) -> None:
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> "Session":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["Session", "default_transport"]
