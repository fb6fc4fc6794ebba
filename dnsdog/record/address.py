"""A and AAAA records, holding IPv4 and IPv6 addresses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address

from ..wire import Cursor, MandatedLength, Wire, WrongRecordLength

logger = logging.getLogger(__name__)


def _require_exact_length(stated_length: int, required: int) -> None:
    if stated_length != required:
        logger.warning(
            "Length is incorrect (record length %d, but should be %d)",
            stated_length, required,
        )
        raise WrongRecordLength(stated_length, MandatedLength.exactly(required))


@dataclass(frozen=True)
class A(Wire):
    """An A record, which contains an IPv4 address."""

    NAME = "A"
    RR_TYPE = 1

    address: IPv4Address

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> A:
        _require_exact_length(stated_length, 4)
        address = IPv4Address(cursor.read_exact(4))
        logger.debug("Parsed IPv4 address -> %s", address)
        return cls(address)


@dataclass(frozen=True)
class AAAA(Wire):
    """An AAAA record, which contains an IPv6 address."""

    NAME = "AAAA"
    RR_TYPE = 28

    address: IPv6Address

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> AAAA:
        _require_exact_length(stated_length, 16)
        address = IPv6Address(cursor.read_exact(16))
        logger.debug("Parsed IPv6 address -> %s", address)
        return cls(address)