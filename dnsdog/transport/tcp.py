"""Sending DNS requests over TCP, with each message prefixed by its length."""

from __future__ import annotations

import logging
import socket
import struct
from collections.abc import Callable
from typing import Any, Protocol

from .errors import Transport, TruncatedResponse, _translate_errors

logger = logging.getLogger(__name__)

_DEFAULT_PORT = 53
_READ_SIZE = 4096
_MAX_MESSAGE_LENGTH = 0xFFFF


class _Receiver(Protocol):
    def recv(self, size: int) -> bytes: ...


def _host_and_port(addr: str, default_port: int) -> tuple[str, int]:
    """Split ``host:port``, or pair a bare host with the default port."""
    if ":" not in addr:
        return addr, default_port
    host, _, port = addr.rpartition(":")
    if not port.isdigit():
        raise OSError(f"invalid socket address {addr!r}")
    return host.strip("[]"), int(port)


def prefix_with_length(data: bytes) -> bytes:
    """Prefix the data with its own length as a big-endian 16-bit number.

    Raises ValueError if the data is too long for the prefix.
    """
    if len(data) > _MAX_MESSAGE_LENGTH:
        raise ValueError("request too long")
    return struct.pack(">H", len(data)) + bytes(data)


def length_prefixed_read(stream: _Receiver) -> bytes:
    """Read a message whose first two bytes give its length.

    Reads as many times as needed; raises TruncatedResponse if the stream
    ends before the whole message has arrived.
    """
    logger.info("Waiting to receive...")
    received = stream.recv(_READ_SIZE)
    if not received:
        logger.warning("Received no bytes!")
        raise TruncatedResponse("received no bytes")

    if len(received) == 1:
        logger.info("Received one byte of data")
        more = stream.recv(_READ_SIZE - 1)
        if not more:
            logger.warning("Received no bytes the second time!")
            raise TruncatedResponse("received only one byte")
        received += more
    else:
        logger.info("Received %d bytes of data", len(received))

    total_length = int.from_bytes(received[:2], "big")
    body = bytearray(received[2:])
    logger.debug("We need to read %d bytes total", total_length)

    while len(body) < total_length:
        chunk = stream.recv(_READ_SIZE)
        logger.info("Received further %d bytes of data (of %d)", len(chunk), total_length)
        if not chunk:
            logger.warning("Read zero bytes!")
            raise TruncatedResponse(
                f"received {len(body)} of {total_length} bytes before the stream ended"
            )
        body += chunk

    return bytes(body[:total_length])


class TcpTransport(Transport):
    """Sends DNS wire data over a TCP stream, on port 53 unless one is given."""

    def __init__(self, addr: str, parser: Callable[[bytes], Any]) -> None:
        self.addr = addr
        self.parser = parser

    def send(self, request: Any) -> Any:
        data = prefix_with_length(request.to_bytes())
        with _translate_errors():
            host, port = _host_and_port(self.addr, _DEFAULT_PORT)
            logger.info("Opening TCP stream")
            with socket.create_connection((host, port)) as stream:
                logger.info("Sending %d bytes of data to %r over TCP", len(data), self.addr)
                stream.sendall(data)
                reply = length_prefixed_read(stream)
        return self._parse(reply)