"""Sending DNS requests over TCP through an encrypted TLS connection."""

from __future__ import annotations

import logging
import socket
import ssl
from collections.abc import Callable
from typing import Any

from .errors import Transport, _translate_errors
from .tcp import _host_and_port, length_prefixed_read, prefix_with_length

logger = logging.getLogger(__name__)

_DEFAULT_PORT = 853


class TlsTransport(Transport):
    """Sends length-prefixed DNS wire data over TLS, to port 853 unless one is given."""

    def __init__(self, addr: str, parser: Callable[[bytes], Any]) -> None:
        self.addr = addr
        self.parser = parser

    def sni_domain(self) -> str:
        """The host name to present to the server: the address up to any colon."""
        return self.addr.partition(":")[0]

    def send(self, request: Any) -> Any:
        data = prefix_with_length(request.to_bytes())
        with _translate_errors():
            context = ssl.create_default_context()
            host, port = _host_and_port(self.addr, _DEFAULT_PORT)
            logger.info("Opening TLS socket")
            with socket.create_connection((host, port)) as raw:
                domain = self.sni_domain()
                logger.info("Connecting using domain %r", domain)
                with context.wrap_socket(raw, server_hostname=domain) as stream:
                    logger.info("Sending %d bytes of data to %s over TLS", len(data), self.addr)
                    stream.sendall(data)
                    reply = length_prefixed_read(stream)
        return self._parse(reply)