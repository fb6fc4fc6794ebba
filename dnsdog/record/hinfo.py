"""HINFO records, holding CPU and operating-system information about a host."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..wire import Cursor, Wire, WrongLabelLength

logger = logging.getLogger(__name__)


def _read_character_string(cursor: Cursor) -> tuple[str, int]:
    length = cursor.read_u8()
    text = cursor.read_exact(length).decode("utf-8", errors="replace")
    return text, length


@dataclass(frozen=True)
class HINFO(Wire):
    """An HINFO record: the CPU type and operating system of a host.

    It is also returned in answer to a blocked ANY query.
    """

    NAME = "HINFO"
    RR_TYPE = 13

    cpu: str
    os: str

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> HINFO:
        cpu, cpu_length = _read_character_string(cursor)
        logger.debug("Parsed CPU -> %r", cpu)
        os, os_length = _read_character_string(cursor)
        logger.debug("Parsed OS -> %r", os)

        length_after_labels = 1 + cpu_length + 1 + os_length
        if stated_length != length_after_labels:
            logger.warning(
                "Length is incorrect (stated length %d, cpu plus os length %d)",
                stated_length, length_after_labels,
            )
            raise WrongLabelLength(stated_length, length_after_labels)

        logger.debug("Length is correct")
        return cls(cpu, os)