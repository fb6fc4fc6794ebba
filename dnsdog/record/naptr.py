"""NAPTR records, holding rules for the Dynamic Delegation Discovery System."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..labels import Labels, read_labels
from ..wire import Cursor, Wire, WrongLabelLength

logger = logging.getLogger(__name__)


def _read_character_string(cursor: Cursor) -> tuple[str, int]:
    length = cursor.read_u8()
    text = cursor.read_exact(length).decode("utf-8", errors="replace")
    return text, length


@dataclass(frozen=True)
class NAPTR(Wire):
    """A NAPTR record: order, preference, flags, service, regex and replacement."""

    NAME = "NAPTR"
    RR_TYPE = 35

    order: int
    preference: int
    flags: str
    service: str
    regex: str
    replacement: Labels

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> NAPTR:
        order = cursor.read_u16()
        preference = cursor.read_u16()
        logger.debug("Parsed order %d, preference %d", order, preference)

        flags, flags_length = _read_character_string(cursor)
        logger.debug("Parsed flags -> %r", flags)
        service, service_length = _read_character_string(cursor)
        logger.debug("Parsed service -> %r", service)
        regex, regex_length = _read_character_string(cursor)
        logger.debug("Parsed regex -> %r", regex)

        replacement, replacement_length = read_labels(cursor)
        logger.debug("Parsed replacement -> %s", replacement)

        length_after_labels = (
            2 + 2
            + 1 + flags_length
            + 1 + service_length
            + 1 + regex_length
            + replacement_length
        )
        if stated_length != length_after_labels:
            logger.warning(
                "Length is incorrect (stated length %d, fields plus replacement length %d)",
                stated_length, length_after_labels,
            )
            raise WrongLabelLength(stated_length, length_after_labels)

        return cls(order, preference, flags, service, regex, replacement)