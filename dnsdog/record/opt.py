"""The OPT pseudo-record, which extends DNS with extra flags and options."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import ClassVar

from ..wire import Cursor

logger = logging.getLogger(__name__)

_MAX_DATA_LENGTH = 0xFFFF


@dataclass(frozen=True)
class OPT:
    """An OPT pseudo-record.

    It re-purposes the class and TTL fields of an ordinary record, so it is
    read starting where the class would be, and needs no stated length.
    """

    RR_TYPE: ClassVar[int] = 41

    udp_payload_size: int
    higher_bits: int
    edns0_version: int
    flags: int
    data: bytes = b""

    @classmethod
    def read(cls, cursor: Cursor) -> OPT:
        """Read an OPT record from just after its type field."""
        udp_payload_size = cursor.read_u16()
        higher_bits = cursor.read_u8()
        edns0_version = cursor.read_u8()
        flags = cursor.read_u16()
        logger.debug(
            "Parsed UDP payload size %d, higher bits %#010b, EDNS(0) version %d, flags %#06x",
            udp_payload_size, higher_bits, edns0_version, flags,
        )

        data_length = cursor.read_u16()
        data = cursor.read_exact(data_length)
        logger.debug("Parsed %d bytes of data", data_length)

        return cls(udp_payload_size, higher_bits, edns0_version, flags, data)

    def to_bytes(self) -> bytes:
        """Serialise this record for the Additional section of a request.

        Raises ValueError if the data is too long for its length field.
        """
        if len(self.data) > _MAX_DATA_LENGTH:
            raise ValueError(f"OPT data of {len(self.data)} bytes is too long to send")
        header = struct.pack(
            ">HBBHH",
            self.udp_payload_size,
            self.higher_bits,
            self.edns0_version,
            self.flags,
            len(self.data),
        )
        return header + bytes(self.data)