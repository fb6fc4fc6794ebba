"""Errors from sending DNS requests, and the interface all transports share."""

from __future__ import annotations

import ssl
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from ..wire import WireError


class TransportError(Exception):
    """Something went wrong making a DNS request."""


class ResponseWireError(TransportError):
    """The response data did not parse as DNS wire format."""

    def __init__(self, error: WireError) -> None:
        super().__init__(f"malformed response: {error}")
        self.error = error


class NetworkError(TransportError):
    """There was a network problem making a TCP or UDP request."""

    def __init__(self, error: OSError) -> None:
        super().__init__(f"network error: {error}")
        self.error = error


class TruncatedResponse(TransportError):
    """The server stopped sending before the whole response arrived."""

    def __init__(self, message: str = "truncated response") -> None:
        super().__init__(message)


class TlsError(TransportError):
    """There was a problem establishing or using a TLS connection."""

    def __init__(self, error: Exception) -> None:
        super().__init__(f"TLS error: {error}")
        self.error = error


class HttpError(TransportError):
    """The HTTP response headers or body could not be decoded."""


class WrongHttpStatus(TransportError):
    """The HTTP response code was something other than 200 OK."""

    def __init__(self, code: int, reason: str | None) -> None:
        text = f"HTTP status {code}" + (f" {reason}" if reason else "")
        super().__init__(text)
        self.code = code
        self.reason = reason


class Transport(ABC):
    """A way of sending a DNS request over the network and getting a response.

    Requests are objects with a ``to_bytes()`` method; ``parser`` turns
    the response bytes into a response object.
    """

    parser: Callable[[bytes], Any]

    @abstractmethod
    def send(self, request: Any) -> Any:
        """Send the request, wait for the response, and return it parsed."""

    def _parse(self, data: bytes) -> Any:
        try:
            return self.parser(data)
        except WireError as exc:
            raise ResponseWireError(exc) from exc


@contextmanager
def _translate_errors() -> Iterator[None]:
    """Turn socket and TLS exceptions into transport errors."""
    try:
        yield
    except ssl.SSLError as exc:
        raise TlsError(exc) from exc
    except OSError as exc:
        raise NetworkError(exc) from exc