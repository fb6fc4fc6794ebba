"""LOC records, which point to a location on Earth."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from ..wire import Cursor, MandatedLength, Wire, WrongRecordLength, WrongVersion

logger = logging.getLogger(__name__)

_EQUATOR = 0x8000_0000
_MILLIARCSECONDS_PER_DEGREE = 1000 * 60 * 60
_ALTITUDE_BASE = 10_000_000  # 100,000 metres, in centimetres


class Direction(enum.Enum):
    """A direction relative to the equator or the prime meridian."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Size:
    """A size in centimetres, as a base and a power-of-ten exponent."""

    base: int
    power_of_ten: int

    @classmethod
    def from_u8(cls, value: int) -> Size:
        """Split an octet into a four-bit base and a four-bit exponent."""
        return cls(value >> 4, value & 0x0F)

    def __str__(self) -> str:
        return f"{self.base}e{self.power_of_ten}"


@dataclass(frozen=True)
class Position:
    """A position on the latitude or longitude axis."""

    degrees: int
    arcminutes: int
    arcseconds: int
    milliarcseconds: int
    direction: Direction

    @classmethod
    def from_u32(cls, value: int, vertical: bool) -> Position | None:
        """Decode a position given in milliarcseconds, with 2^31 at the centre.

        Returns None when the value is out of range for the axis.
        """
        limit = _MILLIARCSECONDS_PER_DEGREE * (90 if vertical else 180)
        if value < _EQUATOR - limit or value > _EQUATOR + limit:
            return None

        if value >= _EQUATOR:
            offset = value - _EQUATOR
            direction = Direction.NORTH if vertical else Direction.EAST
        else:
            offset = _EQUATOR - value
            direction = Direction.SOUTH if vertical else Direction.WEST

        total_arcseconds, milliarcseconds = divmod(offset, 1000)
        total_arcminutes, arcseconds = divmod(total_arcseconds, 60)
        degrees, arcminutes = divmod(total_arcminutes, 60)
        return cls(degrees, arcminutes, arcseconds, milliarcseconds, direction)

    def __str__(self) -> str:
        text = f"{self.degrees}°{self.arcminutes}′{self.arcseconds}"
        if self.milliarcseconds != 0:
            text += f".{self.milliarcseconds:03}"
        return f"{text}″ {self.direction}"


@dataclass(frozen=True)
class Altitude:
    """A height relative to the GPS reference spheroid."""

    metres: int
    centimetres: int

    @classmethod
    def from_u32(cls, value: int) -> Altitude:
        """Decode centimetres above a base 100,000 metres below the spheroid."""
        relative = value - _ALTITUDE_BASE
        metres = abs(relative) // 100 * (-1 if relative < 0 else 1)
        centimetres = relative - metres * 100
        return cls(metres, centimetres)

    def __str__(self) -> str:
        if self.centimetres == 0:
            return f"{self.metres}m"
        return f"{self.metres}.{self.centimetres:02}m"


@dataclass(frozen=True)
class LOC(Wire):
    """A LOC record: a latitude, longitude and altitude, with size and precision.

    Latitude and longitude are None when the packet parses but the
    position is out of range.
    """

    NAME = "LOC"
    RR_TYPE = 29

    size: Size
    horizontal_precision: int
    vertical_precision: int
    latitude: Position | None
    longitude: Position | None
    altitude: Altitude

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> LOC:
        version = cursor.read_u8()
        logger.debug("Parsed version -> %d", version)
        if version != 0:
            raise WrongVersion(version, 0)

        if stated_length != 16:
            raise WrongRecordLength(stated_length, MandatedLength.exactly(16))

        size_bits = cursor.read_u8()
        size = Size.from_u8(size_bits)
        logger.debug("Parsed size -> %#010b (%s)", size_bits, size)

        horizontal_precision = cursor.read_u8()
        vertical_precision = cursor.read_u8()
        logger.debug(
            "Parsed precision -> horizontal %d, vertical %d",
            horizontal_precision, vertical_precision,
        )

        latitude_num = cursor.read_u32()
        latitude = Position.from_u32(latitude_num, True)
        logger.debug("Parsed latitude -> %d (%s)", latitude_num, latitude)

        longitude_num = cursor.read_u32()
        longitude = Position.from_u32(longitude_num, False)
        logger.debug("Parsed longitude -> %d (%s)", longitude_num, longitude)

        altitude_num = cursor.read_u32()
        altitude = Altitude.from_u32(altitude_num)
        logger.debug("Parsed altitude -> %d (%s)", altitude_num, altitude)

        return cls(
            size, horizontal_precision, vertical_precision,
            latitude, longitude, altitude,
        )