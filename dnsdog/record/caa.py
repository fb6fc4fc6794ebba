"""CAA records, naming the certificate authorities allowed for a domain."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..wire import Cursor, Wire

logger = logging.getLogger(__name__)

_CRITICAL_BIT = 0b1000_0000


@dataclass(frozen=True)
class CAA(Wire):
    """A CAA record: a critical flag, a tag and a value."""

    NAME = "CAA"
    RR_TYPE = 257

    critical: bool
    tag: str
    value: str

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> CAA:
        flags = cursor.read_u8()
        critical = flags & _CRITICAL_BIT == _CRITICAL_BIT
        logger.debug("Parsed flags -> %#010b (critical %s)", flags, critical)

        tag_length = cursor.read_u8()
        tag = cursor.read_exact(tag_length).decode("utf-8", errors="replace")
        logger.debug("Parsed tag -> %r", tag)

        remaining_length = max(0, max(0, stated_length - tag_length) - 2)
        value = cursor.read_exact(remaining_length).decode("utf-8", errors="replace")
        logger.debug("Parsed value -> %r", value)

        return cls(critical, tag, value)