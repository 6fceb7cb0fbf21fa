from enum import Enum
from typing import Union


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    @classmethod
    def coerce(cls, value: Union["Method", str]) -> "Method":
        """Return the member for ``value``, accepting verbs in any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise ValueError(f"Unsupported HTTP method: {value!r}")

    def __str__(self) -> str:
        return self.value
