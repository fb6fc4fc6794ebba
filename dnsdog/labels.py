"""Domain names as sequences of labels, and reading them from wire data."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .wire import Cursor, WireError

logger = logging.getLogger(__name__)

_MAX_LABEL_LENGTH = 63
_POINTER_MASK = 0xC0


@dataclass(frozen=True)
class Labels:
    """A domain name, stored as its individual labels."""

    segments: tuple[str, ...] = ()

    @classmethod
    def encode(cls, name: str) -> Labels:
        """Split a dotted domain name into labels.

        Raises ValueError if any label is longer than 63 bytes.
        """
        segments = tuple(part for part in name.split(".") if part)
        for segment in segments:
            if len(segment.encode("utf-8")) > _MAX_LABEL_LENGTH:
                raise ValueError(f"label {segment!r} is longer than {_MAX_LABEL_LENGTH} bytes")
        return cls(segments)

    def __str__(self) -> str:
        return "".join(f"{segment}." for segment in self.segments) or "."


def read_labels(cursor: Cursor) -> tuple[Labels, int]:
    """Read a possibly compressed domain name from the cursor.

    Returns the labels and the number of bytes they took up at the
    cursor's original position. Compression pointers are followed, and
    the cursor is left just after the name as it appears in place.
    """
    segments: list[str] = []
    length = 0
    resume_at: int | None = None
    visited: set[int] = set()

    while True:
        size = cursor.read_u8()
        if resume_at is None:
            length += 1

        if size == 0:
            break

        if size & _POINTER_MASK == _POINTER_MASK:
            low = cursor.read_u8()
            if resume_at is None:
                length += 1
                resume_at = cursor.position
            offset = ((size & ~_POINTER_MASK & 0xFF) << 8) | low
            if offset in visited:
                raise WireError(f"compression pointer loop at offset {offset}")
            visited.add(offset)
            logger.debug("Following compression pointer to offset %d", offset)
            cursor.position = offset
            continue

        raw = cursor.read_exact(size)
        if resume_at is None:
            length += size
        segments.append(raw.decode("utf-8", errors="replace"))

    if resume_at is not None:
        cursor.position = resume_at

    return Labels(tuple(segments)), length