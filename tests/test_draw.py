from wireframe.draw import blend_color, draw_segment, draw_wireframe
from wireframe.projection import Point, WireMap


def _screen_point(sx, sy, color, x=0, y=0):
    return Point(x, y, 0, color, screen_x=sx, screen_y=sy)


def _segment_pixels(start, end):
    pixels = []
    draw_segment(start, end, lambda x, y, color: pixels.append((x, y, color)))
    return pixels


def _wireframe_pixels(wire_map):
    pixels = []
    draw_wireframe(wire_map, lambda x, y, color: pixels.append((x, y, color)))
    return pixels


def test_blend_at_zero_count_keeps_color():
    assert blend_color(0x102030, (1.5, -2.0, 3.0), 0) == 0x102030


def test_blend_blue_only_step_keeps_color():
    assert blend_color(0x000010, (0.0, 0.0, 4.0), 9) == 0x000010


def test_blend_red_step():
    assert blend_color(0x000000, (1.0, 0.0, 0.0), 3) == 0x030000


def test_horizontal_segment_same_color():
    pixels = _segment_pixels(
        _screen_point(0, 0, 0xABCDEF), _screen_point(3, 0, 0xABCDEF)
    )
    assert pixels == [(x, 0, 0xABCDEF) for x in range(4)]


def test_segment_runs_backwards():
    pixels = _segment_pixels(_screen_point(4, 2, 7), _screen_point(1, 2, 7))
    assert [p[0] for p in pixels] == [4, 3, 2, 1]
    assert {p[1] for p in pixels} == {2}


def test_zero_length_segment_plots_one_pixel():
    pixels = _segment_pixels(_screen_point(5, 5, 9), _screen_point(5, 5, 9))
    assert pixels == [(5, 5, 9)]


def test_red_gradient_reaches_end_color():
    start = _screen_point(0, 0, 0x000000)
    end = _screen_point(0, 5, 0xFF0000)
    pixels = _segment_pixels(start, end)
    assert len(pixels) == 6
    assert pixels[0][2] == start.color
    assert pixels[-1][2] == end.color
    reds = [(p[2] >> 16) & 0xFF for p in pixels]
    assert reds == sorted(reds)


def test_blue_only_gradient_keeps_start_color():
    pixels = _segment_pixels(
        _screen_point(0, 0, 0x000000), _screen_point(5, 0, 0x0000FF)
    )
    assert {p[2] for p in pixels} == {0x000000}


def test_wireframe_draws_square_outline():
    corners = [(0, 0), (10, 0), (0, 10), (10, 10)]
    points = [
        _screen_point(sx, sy, 1, x=i % 2, y=i // 2)
        for i, (sx, sy) in enumerate(corners)
    ]
    pixels = _wireframe_pixels(WireMap(2, 2, points))
    assert len(pixels) == 4 * 11
    drawn = {(x, y) for x, y, _ in pixels}
    assert {(5, 0), (0, 5), (10, 5), (5, 10)} <= drawn
    assert (5, 5) not in drawn


def test_wireframe_single_row_draws_only_horizontal():
    points = [_screen_point(i * 2, 0, 3, x=i, y=0) for i in range(3)]
    pixels = _wireframe_pixels(WireMap(3, 1, points))
    assert {p[1] for p in pixels} == {0}
    assert {p[0] for p in pixels} == set(range(5))