"""
Blocking counterpart of Session for code that does not run an event loop.
"""
import logging
from typing import Any, Optional

import httpx

from .errors import InvalidResponseError
from .logging import get_logger
from .request import Request
from .response import Response
from .session import resolve_url


def default_sync_transport(**kwargs: Any) -> httpx.Client:
    return httpx.Client(**kwargs)


class SyncSession:
    """
    Same contract as Session, but ``send`` blocks the calling thread until the
    ``httpx.Client`` round trip finishes.
    """

    def __init__(
        self,
        transport: Optional[Any] = None,
        *,
        base_url: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else default_sync_transport()
        self.base_url = base_url
        self.logger = logger or get_logger("sync")

    def send(self, request: Request) -> Response:
        url = resolve_url(self.base_url, request)
        method = request.method.value
        self.logger.debug("[sync] %s %s", method, url)
        try:
            reply = self.transport.request(method, url, headers=request.headers, content=request.body)
        except httpx.UnsupportedProtocol as exc:
            self.logger.warning("[sync] %s %s: not an HTTP address", method, url)
            raise InvalidResponseError(f"Not an HTTP URL: {url}") from exc
        except httpx.TransportError as exc:
            self.logger.debug("[sync] %s %s failed: %s", method, url, exc)
            raise
        try:
            response = Response.from_httpx(reply)
        except InvalidResponseError as exc:
            self.logger.warning("[sync] %s %s: %s", method, url, exc)
            raise
        self.logger.debug("[sync] %s %s -> %d", method, url, response.status_code)
        return response

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "SyncSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["SyncSession", "default_sync_transport"]
