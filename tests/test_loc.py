import pytest

from dnsdog.record.loc import LOC, Altitude, Direction, Position, Size
from dnsdog.wire import (
    Cursor,
    MandatedLength,
    WireIOError,
    WrongRecordLength,
    WrongVersion,
)

FULL_RECORD = bytes([
    0x00,
    0x32,
    0x00,
    0x00,
    0x8B, 0x0D, 0x2C, 0x8C,
    0x7F, 0xF8, 0xFC, 0xA5,
    0x00, 0x98, 0x96, 0x80,
])

DEGREE = 1000 * 60 * 60


def test_parses():
    record = LOC.read(len(FULL_RECORD), Cursor(FULL_RECORD))
    assert record == LOC(
        size=Size(base=3, power_of_ten=2),
        horizontal_precision=0,
        vertical_precision=0,
        latitude=Position.from_u32(0x8B0D2C8C, True),
        longitude=Position.from_u32(0x7FF8FCA5, False),
        altitude=Altitude.from_u32(0x00989680),
    )


def test_parsed_values_render():
    record = LOC.read(len(FULL_RECORD), Cursor(FULL_RECORD))
    assert str(record.latitude) == "51°30′12.748″ N"
    assert str(record.longitude) == "0°7′39.611″ W"
    assert str(record.altitude) == "0m"
    assert str(record.size) == "3e2"


def test_record_too_short():
    buf = bytes([0x00, 0x00])
    with pytest.raises(WrongRecordLength) as info:
        LOC.read(len(buf), Cursor(buf))
    assert info.value.stated_length == 2
    assert info.value.mandated_length == MandatedLength.exactly(16)


def test_record_too_long():
    buf = FULL_RECORD + bytes([0x12, 0x34, 0x56])
    with pytest.raises(WrongRecordLength) as info:
        LOC.read(len(buf), Cursor(buf))
    assert info.value.stated_length == 19
    assert info.value.mandated_length == MandatedLength.exactly(16)


def test_more_recent_version():
    buf = bytes([0x80, 0x12, 0x34, 0x56])
    with pytest.raises(WrongVersion) as info:
        LOC.read(len(buf), Cursor(buf))
    assert info.value.stated_version == 128
    assert info.value.maximum_supported_version == 0


def test_record_empty():
    with pytest.raises(WireIOError):
        LOC.read(0, Cursor(b""))


def test_buffer_ends_abruptly():
    with pytest.raises(WireIOError):
        LOC.read(16, Cursor(bytes([0x00])))


@pytest.mark.parametrize(
    ("bits", "expected"),
    [
        (0b0000_0000, "0e0"),
        (0b0001_0001, "1e1"),
        (0b1110_0011, "14e3"),
        (0b1111_1111, "15e15"),
    ],
)
def test_size(bits, expected):
    assert str(Size.from_u8(bits)) == expected


@pytest.mark.parametrize(
    ("value", "vertical", "expected"),
    [
        (0x8000_0000, False, "0°0′0″ E"),
        (0x8000_0000 + 1, False, "0°0′0.001″ E"),
        (0x8000_0000 - 1, False, "0°0′0.001″ W"),
        (0x8000_0000, True, "0°0′0″ N"),
        (0x8000_0000 + 1, True, "0°0′0.001″ N"),
        (0x8000_0000 - 1, True, "0°0′0.001″ S"),
        (2332896396, True, "51°30′12.748″ N"),
        (2147024037, False, "0°7′39.611″ W"),
        (0x8000_0000 + DEGREE * 90, True, "90°0′0″ N"),
        (0x8000_0000 - DEGREE * 90, True, "90°0′0″ S"),
        (0x8000_0000 + DEGREE * 180, False, "180°0′0″ E"),
        (0x8000_0000 - DEGREE * 180, False, "180°0′0″ W"),
    ],
)
def test_position(value, vertical, expected):
    assert str(Position.from_u32(value, vertical)) == expected


@pytest.mark.parametrize(
    ("value", "vertical"),
    [
        (0x8000_0000 + DEGREE * 90 + 1, True),
        (0x8000_0000 - DEGREE * 90 - 1, True),
        (0x8000_0000 + DEGREE * 180 + 1, False),
        (0x8000_0000 - DEGREE * 180 - 1, False),
    ],
)
def test_position_out_of_range(value, vertical):
    assert Position.from_u32(value, vertical) is None


def test_position_direction():
    assert Position.from_u32(0x8000_0000 - 1, False).direction is Direction.WEST
    assert Position.from_u32(0x8000_0000 - 1, True).direction is Direction.SOUTH


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (10000000, "0m"),
        (20000000, "100000m"),
        (0, "-100000m"),
        (50505050, "405050.50m"),
    ],
)
def test_altitude(value, expected):
    assert str(Altitude.from_u32(value)) == expected