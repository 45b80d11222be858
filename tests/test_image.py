import pytest

from wireframe.image import MSB_FIRST, Image, Visual, channel_shifts

IM1_SX = 42
IM1_SY = 42


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_channel_shifts_truecolor():
    assert channel_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


def test_channel_shifts_565():
    assert channel_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_channel_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        channel_shifts(0, 0xFF00, 0xFF)


@pytest.mark.parametrize("color", [0, 0xFF99FF, 0x00FFFF, 0x123456])
def test_color_value_deep_visual_is_identity(color):
    assert Visual().color_value(color) == color


def test_color_value_565():
    visual = Visual(depth=16, red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F)
    assert visual.color_value(0xFFFFFF) == 0xFFFF
    assert visual.color_value(0xFF0000) == 0xF800
    assert visual.color_value(0x0000FF) == 0x001F


def test_image_geometry():
    image = Image(IM1_SX, IM1_SY)
    assert image.bits_per_pixel == 32
    assert image.size_line == 168
    assert len(image.data) == image.size_line * IM1_SY
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize("kind", [1, 2])
def test_fill_with_color_map(kind):
    visual = Visual()
    image = Image(IM1_SX, IM1_SY)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            image.put_pixel(x, y, visual.color_value(_color_map(x, y, IM1_SX, IM1_SY, kind)))
    for y in (0, 17, IM1_SY - 1):
        row = image.row(y)
        for x in (0, 5, IM1_SX - 1):
            expected = _color_map(x, y, IM1_SX, IM1_SY, kind)
            assert image.get_pixel(x, y) == expected
            assert row[x * 4:x * 4 + 4] == expected.to_bytes(4, "little")


def test_big_endian_layout():
    image = Image(3, 2, byte_order=MSB_FIRST)
    image.put_pixel(1, 1, 0xFF99FF)
    assert image.row(1)[4:8] == bytes([0x00, 0xFF, 0x99, 0xFF])
    assert image.get_pixel(1, 1) == 0xFF99FF


def test_24_bit_pixels():
    image = Image(4, 1, bits_per_pixel=24, byte_order=MSB_FIRST)
    image.put_pixel(2, 0, 0x123456)
    assert image.row(0)[6:9] == b"\x12\x34\x56"
    assert image.get_pixel(2, 0) == 0x123456


def test_put_pixel_truncates_to_pixel_size():
    image = Image(1, 1, bits_per_pixel=8)
    image.put_pixel(0, 0, 0x1234)
    assert image.get_pixel(0, 0) == 0x34


@pytest.mark.parametrize("x,y", [(-1, 0), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_range_pixel(x, y):
    image = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 0)


def test_out_of_range_row():
    with pytest.raises(IndexError):
        Image(2, 2).row(2)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0, "height": 1},
        {"width": 1, "height": -1},
        {"width": 1, "height": 1, "bits_per_pixel": 12},
        {"width": 1, "height": 1, "byte_order": 2},
    ],
)
def test_invalid_image(kwargs):
    with pytest.raises(ValueError):
        Image(**kwargs)