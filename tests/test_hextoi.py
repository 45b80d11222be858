import pytest

from wireframe.hextoi import hextoi


@pytest.mark.parametrize("value", [0, 1, 0xABCDEF, 0xFFFFFF, 0x123456, 0xFFFFFFFF])
def test_round_trip_upper(value):
    assert hextoi(f"0x{value:X}") == value


@pytest.mark.parametrize("value", [0, 7, 0xabcdef, 0x00ff00])
def test_round_trip_lower(value):
    assert hextoi(f"0x{value:x}") == value


def test_skips_text_before_marker():
    assert hextoi("10,0xFF0000") == 0xFF0000


def test_upper_marker():
    assert hextoi("5,0XFF") == hextoi("5,0xff")


def test_stops_at_non_hex():
    assert hextoi("0x1G2") == 1


def test_stops_at_newline():
    assert hextoi("0xFF\n") == hextoi("0xFF")


def test_empty_digits_give_zero():
    assert hextoi("0x") == 0


def test_none_gives_zero():
    assert hextoi(None) == 0


def test_wraps_to_32_bits():
    assert hextoi("0x1FFFFFFFF") == 0xFFFFFFFF


def test_missing_marker_raises():
    with pytest.raises(ValueError):
        hextoi("123")