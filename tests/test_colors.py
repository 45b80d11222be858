import pytest

from wireframe.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_unknown_name_gives_zero():
    assert lookup_color("no such colour") == 0


def test_lookup_ignores_case():
    assert lookup_color("ReD") == lookup_color("red")
    assert lookup_color("LIGHTGREEN") == lookup_color("lightgreen")


def test_suffix_joins_with_space():
    assert lookup_color("navy", "blue") == lookup_color("navy blue")
    assert lookup_color("Light", "Green") == lookup_color("lightgreen")


def test_duplicate_name_uses_first_entry():
    assert lookup_color("dark", "slate") == 0x2F4F4F


def test_hex_value():
    assert lookup_color("#ff00ff") == 0xFF00FF
    assert lookup_color("#FF00FF") == lookup_color("magenta")


def test_hex_ignores_suffix():
    assert lookup_color("#0000ff", "anything") == lookup_color("blue")


def test_hex_stops_at_invalid_digit():
    assert lookup_color("#ffzz") == 0xFF
    assert lookup_color("#zz") == 0


def test_hex_wraps_to_signed_32_bits():
    assert lookup_color("#ffffffff") == -1


def test_overlong_name_is_truncated_before_lookup():
    assert lookup_color("red" + " " * 70, "x") == 0
    assert lookup_color("white", "smoke") == lookup_color("whitesmoke")