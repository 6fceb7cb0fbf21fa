from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import httpx

from .errors import HTTPStatusError, InvalidResponseError
from .serialization import decode_json

T = TypeVar("T")


@dataclass(frozen=True)
class Response:
    """
    HTTP response captured from the transport.

    Fields hold exactly what the transport returned; the body is always the
    fully read payload. ``headers`` is a read-only mapping.
    """
    status_code: int
    headers: Mapping[str, str]
    body: bytes
    _header_cache: Dict[str, str] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        headers = dict(self.headers)
        object.__setattr__(self, "headers", MappingProxyType(headers))
        object.__setattr__(self, "_header_cache", {k.lower(): v for k, v in headers.items()})

    @classmethod
    def from_httpx(cls, reply: Any) -> "Response":
        """
        Translate a transport reply into a Response.

        Raises InvalidResponseError if ``reply`` is not an HTTP response.
        """
        if not isinstance(reply, httpx.Response):
            raise InvalidResponseError(f"Transport returned {type(reply).__name__}, not an HTTP response")
        status = reply.status_code
        if isinstance(status, bool) or not isinstance(status, int) or not 100 <= status <= 599:
            raise InvalidResponseError(f"Invalid HTTP status code: {status!r}")
        return cls(status_code=status, headers=dict(reply.headers.items()), body=reply.content)

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self._header_cache.get(name.lower(), default)

    @property
    def ok(self) -> bool:
        """True if status code is in the 200-299 range."""
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> Optional[str]:
        return self.header("Content-Type")

    @property
    def body_as_text(self) -> Optional[str]:
        """The body decoded as UTF-8, or None if it is not valid UTF-8."""
        try:
            return self.body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def decode(self, type_: Type[T]) -> T:
        """
        Decode the JSON body into ``type_``.

        Raises DeserializationError if the body is not JSON or does not fit
        the shape of ``type_``.
        """
        return decode_json(self.body, type_)

    def json(self) -> Any:
        """Parse the JSON body without type conversion."""
        return decode_json(self.body)

    def raise_for_status(self) -> None:
        """
        Raise HTTPStatusError if status code indicates an error (4xx or 5xx).
        """
        if 400 <= self.status_code < 600:
            raise HTTPStatusError(self.status_code, f"HTTP {self.status_code}", self)

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}] {len(self.body)} bytes>"


__all__ = ["Response"]
