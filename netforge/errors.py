from typing import Optional

import httpx


class NetForgeError(Exception):
    """Base exception for the netforge package."""


class InvalidResponseError(NetForgeError):
    """Raised when the transport completed but did not yield a valid HTTP response."""


class SerializationError(NetForgeError):
    """Raised when a value cannot be encoded as JSON."""


class DeserializationError(NetForgeError):
    """Raised when a response body cannot be decoded into the requested type."""


class HTTPStatusError(NetForgeError):
    """Raised by Response.raise_for_status for 4xx and 5xx responses."""

    def __init__(self, status_code: int, message: str, response: Optional[object] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


# Network failures come straight from httpx and are never wrapped.
TransportError = httpx.TransportError
