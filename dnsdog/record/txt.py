"""TXT records, holding arbitrary descriptive text."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..wire import Cursor, Wire, WrongLabelLength

logger = logging.getLogger(__name__)

_CONTINUATION_LENGTH = 255


def _read_message(cursor: Cursor) -> tuple[str, int]:
    """Read one message, joining chunks of length 255 to the chunk after.

    Returns the decoded text and the number of bytes it took up.
    """
    buffer = bytearray()
    consumed = 0
    while True:
        chunk_length = cursor.read_u8()
        consumed += chunk_length + 1
        logger.debug("Parsed slice length -> %d", chunk_length)
        buffer += cursor.read_exact(chunk_length)
        if chunk_length < _CONTINUATION_LENGTH:
            break
        logger.debug("Got length 255, so looping")
    return bytes(buffer).decode("utf-8", errors="replace"), consumed


@dataclass(frozen=True)
class TXT(Wire):
    """A TXT record: one or more text messages.

    The text encoding is unspecified; it is decoded as UTF-8 with invalid
    bytes replaced.
    """

    NAME = "TXT"
    RR_TYPE = 16

    messages: tuple[str, ...]

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> TXT:
        messages: list[str] = []
        total_length = 0

        while True:
            message, consumed = _read_message(cursor)
            total_length += consumed
            logger.debug("Parsed message -> %r (total so far %d)", message, total_length)
            messages.append(message)
            if total_length >= stated_length:
                break

        if stated_length != total_length:
            logger.warning(
                "Length is incorrect (stated length %d, messages length %d)",
                stated_length, total_length,
            )
            raise WrongLabelLength(stated_length, total_length)

        logger.debug("Length is correct")
        return cls(tuple(messages))