"""Sending DNS requests over UDP, retrying over TCP when the answer is truncated."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .errors import Transport
from .tcp import TcpTransport
from .udp import UdpTransport

logger = logging.getLogger(__name__)


class AutoTransport(Transport):
    """Tries UDP first, then TCP if the UDP response has its truncated flag set.

    Parsed responses must have ``flags.truncated``.
    """

    def __init__(self, addr: str, parser: Callable[[bytes], Any]) -> None:
        self.addr = addr
        self.parser = parser

    def send(self, request: Any) -> Any:
        response = UdpTransport(self.addr, self.parser).send(request)
        if not response.flags.truncated:
            return response

        logger.debug("Truncated flag set, so switching to TCP")
        return TcpTransport(self.addr, self.parser).send(request)