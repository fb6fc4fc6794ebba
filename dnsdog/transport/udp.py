"""Sending DNS requests inside UDP datagrams."""

from __future__ import annotations

import logging
import socket
from collections.abc import Callable
from typing import Any

from .errors import Transport, _translate_errors
from .tcp import _host_and_port

logger = logging.getLogger(__name__)

_DEFAULT_PORT = 53
_READ_SIZE = 4096


class UdpTransport(Transport):
    """Sends DNS wire data in a UDP datagram, to port 53 unless one is given.

    Only IPv4 is supported.
    """

    def __init__(self, addr: str, parser: Callable[[bytes], Any]) -> None:
        self.addr = addr
        self.parser = parser

    def send(self, request: Any) -> Any:
        data = request.to_bytes()
        with _translate_errors():
            host, port = _host_and_port(self.addr, _DEFAULT_PORT)
            logger.info("Opening UDP socket")
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.bind(("0.0.0.0", 0))
                sock.connect((host, port))
                logger.info("Sending %d bytes of data to %s over UDP", len(data), self.addr)
                sock.send(data)
                logger.info("Waiting to receive...")
                reply = sock.recv(_READ_SIZE)
        logger.info("Received %d bytes of data", len(reply))
        return self._parse(reply)