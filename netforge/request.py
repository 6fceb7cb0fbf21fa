from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from urllib.parse import quote, unquote_plus, urlencode, urlparse, urlunparse

from .method import Method
from .serialization import encode_json

JSON_CONTENT_TYPE = "application/json"

_READ_ONLY_FIELDS = frozenset({"url", "method"})


@dataclass
class Request:
    """
    An HTTP request to hand to a Session.

    ``url`` and ``method`` are fixed once the request is built; ``headers``,
    ``query_params`` and ``body`` may still be edited before sending.
    """

    url: str
    method: Method
    headers: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", Method.coerce(self.method))
        self.headers = dict(self.headers)
        self.query_params = dict(self.query_params)
        if self.body is not None:
            self.body = bytes(self.body)
        object.__setattr__(self, "_initialized", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _READ_ONLY_FIELDS and getattr(self, "_initialized", False):
            raise AttributeError(f"Request.{name} is read-only")
        object.__setattr__(self, name, value)

    @classmethod
    def json(
        cls,
        url: str,
        method: Union[Method, str],
        payload: Any,
        *,
        headers: Optional[Dict[str, str]] = None,
        query_params: Optional[Dict[str, str]] = None,
    ) -> "Request":
        """
        Build a request whose body is ``payload`` encoded as JSON.

        Any caller-supplied content type is replaced with application/json.
        Raises SerializationError if ``payload`` cannot be encoded.
        """
        body = encode_json(payload)
        hdrs = {k: v for k, v in (headers or {}).items() if k.lower() != "content-type"}
        hdrs["Content-Type"] = JSON_CONTENT_TYPE
        return cls(url=url, method=method, headers=hdrs, query_params=query_params or {}, body=body)

    def prepared_url(self) -> str:
        """
        Return ``url`` with ``query_params`` merged into its query string.

        Base pairs are kept verbatim (repeated keys, bare flags and their
        original encoding) unless their key is overridden by ``query_params``;
        supplied pairs are percent-encoded and appended.
        """
        if not self.query_params:
            return self.url
        parsed = urlparse(self.url)
        kept = [
            part
            for part in parsed.query.split("&")
            if part and unquote_plus(part.split("=", 1)[0]) not in self.query_params
        ]
        kept.append(urlencode(self.query_params, quote_via=quote))
        return urlunparse(parsed._replace(query="&".join(kept)))

    def __repr__(self) -> str:
        return f"<Request [{self.method.value}] url={self.url!r}>"


__all__ = ["Request", "JSON_CONTENT_TYPE"]
