"""EUI48 and EUI64 records, holding Extended Unique Identifiers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..wire import Cursor, MandatedLength, Wire, WrongRecordLength

logger = logging.getLogger(__name__)


def _read_octets(stated_length: int, cursor: Cursor, required: int) -> bytes:
    if stated_length != required:
        logger.warning(
            "Length is incorrect (record length %d, but should be %d)",
            stated_length, required,
        )
        raise WrongRecordLength(stated_length, MandatedLength.exactly(required))
    return cursor.read_exact(required)


def _dashed_hex(octets: bytes) -> str:
    return "-".join(f"{octet:02x}" for octet in octets)


@dataclass(frozen=True)
class EUI48(Wire):
    """An EUI48 record, holding a six-octet identifier such as a MAC address."""

    NAME = "EUI48"
    RR_TYPE = 108

    octets: bytes

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> EUI48:
        return cls(_read_octets(stated_length, cursor, 6))

    def formatted_address(self) -> str:
        """The identifier as lower-case hex octets separated by dashes."""
        return _dashed_hex(self.octets)


@dataclass(frozen=True)
class EUI64(Wire):
    """An EUI64 record, holding an eight-octet identifier."""

    NAME = "EUI64"
    RR_TYPE = 109

    octets: bytes

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> EUI64:
        return cls(_read_octets(stated_length, cursor, 8))

    def formatted_address(self) -> str:
        """The identifier as lower-case hex octets separated by dashes."""
        return _dashed_hex(self.octets)