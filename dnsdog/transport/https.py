"""Sending DNS requests inside HTTP requests over TLS (DNS over HTTPS)."""

from __future__ import annotations

import logging
import socket
import ssl
from collections.abc import Callable
from typing import Any

from .errors import HttpError, Transport, WrongHttpStatus, _translate_errors

logger = logging.getLogger(__name__)

USER_AGENT = "dog/0.1.0"

_HTTPS_PORT = 443
_READ_SIZE = 4096
_MAX_HEADERS = 16
_DIGITS = frozenset("0123456789")


def parse_http_response(data: bytes) -> tuple[int, str | None, list[tuple[str, str]], bytes]:
    """Split an HTTP/1.x response into its status code, reason, headers and body.

    Raises HttpError if the head is incomplete or malformed, or has more
    than sixteen headers.
    """
    head, separator, body = data.partition(b"\r\n\r\n")
    if not separator:
        raise HttpError("incomplete HTTP response")

    status_line, *header_lines = head.decode("latin-1").split("\r\n")
    version, _, rest = status_line.partition(" ")
    if version not in ("HTTP/1.0", "HTTP/1.1"):
        raise HttpError(f"invalid HTTP version in {status_line!r}")

    code_text, has_reason, reason = rest.partition(" ")
    if len(code_text) != 3 or not set(code_text) <= _DIGITS:
        raise HttpError(f"invalid status code in {status_line!r}")

    if len(header_lines) > _MAX_HEADERS:
        raise HttpError("too many headers")

    headers = []
    for line in header_lines:
        name, colon, value = line.partition(":")
        if not colon or not name or name != name.strip():
            raise HttpError(f"invalid header {line!r}")
        headers.append((name, value.strip()))

    return int(code_text), (reason if has_reason else None), headers, body


class HttpsTransport(Transport):
    """Sends DNS wire data as an HTTP POST to a URL such as https://host/path."""

    def __init__(self, url: str, parser: Callable[[bytes], Any]) -> None:
        self.url = url
        self.parser = parser

    def split_domain(self) -> tuple[str, str] | None:
        """The host and path of the URL, or None if it is not https://host/path."""
        if not self.url.startswith("https://"):
            return None
        rest = self.url[len("https://"):]
        slash = rest.find("/")
        if slash < 0:
            return None
        return rest[:slash], rest[slash:]

    def send(self, request: Any) -> Any:
        split = self.split_domain()
        if split is None:
            raise ValueError(f"Invalid HTTPS nameserver {self.url!r}")
        domain, path = split

        body = request.to_bytes()
        head = (
            f"POST {path} HTTP/1.1\r\n"
            f"Host: {domain}\r\n"
            "Content-Type: application/dns-message\r\n"
            "Accept: application/dns-message\r\n"
            f"User-Agent: {USER_AGENT}\r\n"
            f"Content-Length: {len(body)}\r\n\r\n"
        )
        data = head.encode("ascii") + body

        with _translate_errors():
            context = ssl.create_default_context()
            logger.info("Opening TLS socket to %r", domain)
            with socket.create_connection((domain, _HTTPS_PORT)) as raw:
                with context.wrap_socket(raw, server_hostname=domain) as stream:
                    logger.info("Sending %d bytes of data to %r over HTTPS", len(data), self.url)
                    stream.sendall(data)
                    logger.info("Waiting to receive...")
                    reply = stream.recv(_READ_SIZE)
        logger.info("Received %d bytes of data", len(reply))

        code, reason, headers, payload = parse_http_response(reply)
        if code != 200:
            raise WrongHttpStatus(code, reason)

        for name, value in headers:
            logger.debug("Header %r -> %r", name, value)
        logger.debug("HTTP body has %d bytes", len(payload))
        return self._parse(payload)