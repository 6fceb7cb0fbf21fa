from .method import Method
from .request import Request
from .response import Response
from .session import Session, default_transport
from .sync import SyncSession, default_sync_transport
from .serialization import JSONDecodable, JSONEncodable, decode_json, encode_json
from .errors import (
    NetForgeError,
    InvalidResponseError,
    SerializationError,
    DeserializationError,
    HTTPStatusError,
    TransportError,
)

__all__ = [
    "Method",
    "Request",
    "Response",
    "Session",
    "SyncSession",
    "default_transport",
    "default_sync_transport",
    "JSONEncodable",
    "JSONDecodable",
    "encode_json",
    "decode_json",
    "NetForgeError",
    "InvalidResponseError",
    "SerializationError",
    "DeserializationError",
    "HTTPStatusError",
    "TransportError",
]


__version__ = "0.1.0"
