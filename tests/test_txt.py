import pytest

from dnsdog.record.txt import TXT
from dnsdog.wire import Cursor, WireIOError, WrongLabelLength


def test_parses_one_iteration():
    buf = bytes([0x06, 0x74, 0x78, 0x74, 0x20, 0x6D, 0x65])
    assert TXT.read(len(buf), Cursor(buf)) == TXT(("txt me",))


def test_parses_two_iterations():
    buf = bytes([0xFF]) + b"A" * 255 + bytes([0x04]) + b"A" * 4
    assert TXT.read(len(buf), Cursor(buf)) == TXT(("A" * 259,))


def test_right_at_the_limit():
    buf = bytes([0xFE]) + b"B" * 254
    assert TXT.read(len(buf), Cursor(buf)) == TXT(("B" * 254,))


def test_another_message():
    buf = bytes([
        0x06, 0x74, 0x78, 0x74, 0x20, 0x6D, 0x65,
        0x06, 0x79, 0x61, 0x20, 0x62, 0x65, 0x62,
    ])
    assert TXT.read(len(buf), Cursor(buf)) == TXT(("txt me", "ya beb"))


def test_length_too_short():
    buf = bytes([0x06, 0x74, 0x78, 0x74, 0x20, 0x6D, 0x65])
    with pytest.raises(WrongLabelLength) as info:
        TXT.read(2, Cursor(buf))
    assert info.value.stated_length == 2
    assert info.value.length_after_labels == 7


def test_record_empty():
    with pytest.raises(WireIOError):
        TXT.read(0, Cursor(b""))


def test_buffer_ends_abruptly():
    with pytest.raises(WireIOError):
        TXT.read(23, Cursor(bytes([0x06, 0x74])))


def test_invalid_utf8_is_replaced():
    buf = bytes([0x02, 0xFF, 0x41])
    assert TXT.read(len(buf), Cursor(buf)).messages == ("\ufffdA",)