"""Error types raised by the Leonardo.ai client."""

from __future__ import annotations


class LeonardoError(Exception):
    """Base class for every error raised by this package."""


class EncodingError(LeonardoError):
    """An outgoing payload could not be serialized to JSON."""


class DecodingError(LeonardoError):
    """A 2xx response body did not match the expected shape."""


class TransportError(LeonardoError):
    """The request failed before any response was received."""

    def __init__(self, message: str, *, timed_out: bool = False) -> None:
        super().__init__(message)
        self.timed_out = timed_out


class HTTPError(LeonardoError):
    """Non-2xx response whose body could not be read as an API error."""

    def __init__(self, status: int, message: str | None = None) -> None:
        super().__init__(message or f"API request failed with status {status}")
        self.status = status
        self.message = message


class APIError(HTTPError):
    """Non-2xx response carrying the service's structured error body."""

    def __init__(self, code: str, message: str, status: int, path: str = "") -> None:
        super().__init__(status, message)
        self.code = code
        self.path = path

    def __str__(self) -> str:
        return f"API Error {self.code}: {self.message}"
