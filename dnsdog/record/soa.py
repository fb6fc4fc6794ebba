"""SOA records, holding administrative information about a zone."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..labels import Labels, read_labels
from ..wire import Cursor, Wire, WrongLabelLength

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SOA(Wire):
    """An SOA record: the zone's primary server, contact and timing values.

    The intervals and limits are in seconds.
    """

    NAME = "SOA"
    RR_TYPE = 6

    mname: Labels
    rname: Labels
    serial: int
    refresh_interval: int
    retry_interval: int
    expire_limit: int
    minimum_ttl: int

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> SOA:
        mname, mname_length = read_labels(cursor)
        logger.debug("Parsed mname -> %s", mname)
        rname, rname_length = read_labels(cursor)
        logger.debug("Parsed rname -> %s", rname)

        serial = cursor.read_u32()
        refresh_interval = cursor.read_u32()
        retry_interval = cursor.read_u32()
        expire_limit = cursor.read_u32()
        minimum_ttl = cursor.read_u32()
        logger.debug(
            "Parsed serial %d, refresh %d, retry %d, expire %d, minimum TTL %d",
            serial, refresh_interval, retry_interval, expire_limit, minimum_ttl,
        )

        length_after_labels = 4 * 5 + mname_length + rname_length
        if stated_length != length_after_labels:
            logger.warning(
                "Length is incorrect (stated length %d, mname plus rname plus fields length %d)",
                stated_length, length_after_labels,
            )
            raise WrongLabelLength(stated_length, length_after_labels)

        return cls(
            mname, rname, serial, refresh_interval,
            retry_interval, expire_limit, minimum_ttl,
        )