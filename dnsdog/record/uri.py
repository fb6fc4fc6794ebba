"""URI records, holding a URI with priority and weight."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..wire import Cursor, MandatedLength, Wire, WrongRecordLength

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class URI(Wire):
    """A URI record: a priority, a weight and a target URI.

    The target is kept as text; it is not checked for validity.
    """

    NAME = "URI"
    RR_TYPE = 256

    priority: int
    weight: int
    target: str

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> URI:
        priority = cursor.read_u16()
        weight = cursor.read_u16()
        logger.debug("Parsed priority %d, weight %d", priority, weight)

        # The target must not be empty.
        if stated_length <= 4:
            raise WrongRecordLength(stated_length, MandatedLength.at_least(5))

        target = cursor.read_exact(stated_length - 4).decode("utf-8", errors="replace")
        logger.debug("Parsed target -> %r", target)
        return cls(priority, weight, target)