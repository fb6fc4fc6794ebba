"""Reading DNS wire-format data: the cursor, the record reader base, and errors."""

from __future__ import annotations

import logging
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, TypeVar

logger = logging.getLogger(__name__)

_W = TypeVar("_W", bound="Wire")


@dataclass(frozen=True)
class MandatedLength:
    """The length a record must have: either exactly, or at least, a value."""

    value: int
    at_least_only: bool = False

    @classmethod
    def exactly(cls, value: int) -> MandatedLength:
        """A record must be exactly ``value`` bytes long."""
        return cls(value, at_least_only=False)

    @classmethod
    def at_least(cls, value: int) -> MandatedLength:
        """A record must be ``value`` bytes long or longer."""
        return cls(value, at_least_only=True)

    def __str__(self) -> str:
        qualifier = "at least" if self.at_least_only else "exactly"
        return f"{qualifier} {self.value}"


class WireError(Exception):
    """Something went wrong decoding DNS wire data."""


class WireIOError(WireError):
    """The buffer ended before all the expected bytes could be read."""

    def __init__(self, message: str = "unexpected end of buffer") -> None:
        super().__init__(message)


class WrongRecordLength(WireError):
    """A record's stated length is not one its type allows."""

    def __init__(self, stated_length: int, mandated_length: MandatedLength) -> None:
        super().__init__(
            f"record length {stated_length} is wrong (must be {mandated_length})"
        )
        self.stated_length = stated_length
        self.mandated_length = mandated_length


class WrongLabelLength(WireError):
    """A record's stated length differs from the length its contents used."""

    def __init__(self, stated_length: int, length_after_labels: int) -> None:
        super().__init__(
            f"record length {stated_length} does not match "
            f"length after labels {length_after_labels}"
        )
        self.stated_length = stated_length
        self.length_after_labels = length_after_labels


class WrongVersion(WireError):
    """A record declares a format version newer than the one supported."""

    def __init__(self, stated_version: int, maximum_supported_version: int) -> None:
        super().__init__(
            f"record version {stated_version} is not supported "
            f"(maximum {maximum_supported_version})"
        )
        self.stated_version = stated_version
        self.maximum_supported_version = maximum_supported_version


class Cursor:
    """A read position over a byte buffer, reading big-endian integers."""

    def __init__(self, data: bytes, position: int = 0) -> None:
        self.data = bytes(data)
        self.position = position

    @property
    def remaining(self) -> int:
        """How many bytes are left to read."""
        return max(0, len(self.data) - self.position)

    def read_exact(self, count: int) -> bytes:
        """Read exactly ``count`` bytes, or raise WireIOError."""
        if count < 0 or self.remaining < count:
            raise WireIOError(
                f"wanted {count} bytes at offset {self.position}, "
                f"only {self.remaining} left"
            )
        chunk = self.data[self.position:self.position + count]
        self.position += count
        return chunk

    def read_u8(self) -> int:
        """Read one unsigned byte."""
        return self.read_exact(1)[0]

    def read_u16(self) -> int:
        """Read a big-endian unsigned 16-bit integer."""
        return struct.unpack(">H", self.read_exact(2))[0]

    def read_u32(self) -> int:
        """Read a big-endian unsigned 32-bit integer."""
        return struct.unpack(">I", self.read_exact(4))[0]


class Wire(ABC):
    """A record type that can be decoded from DNS wire data."""

    NAME: ClassVar[str]
    RR_TYPE: ClassVar[int]

    @classmethod
    @abstractmethod
    def read(cls: type[_W], stated_length: int, cursor: Cursor) -> _W:
        """Decode a record of this type whose data is ``stated_length`` bytes."""