"""Drawing the edges of a projected map with colour gradients."""

from __future__ import annotations

import math
from collections.abc import Callable

from wireframe.projection import Point, WireMap

PutPixel = Callable[[int, int, int], object]
_UINT32 = 0xFFFFFFFF


def _channels(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def blend_color(color: int, step: tuple[float, float, float], count: int) -> int:
    """Return ``color`` shifted by ``count`` steps of per-channel change.

    Each channel is moved by the truncated product of its step and
    ``count``; the result wraps to 32 bits. When only the blue step is
    non-zero the colour is returned unchanged.
    """
    step_red, step_green, step_blue = step
    if step_red == 0 and step_green == 0 and step_blue:
        return color
    red, green, blue = _channels(color)
    result = (red << 16) + (int(step_red * count) << 16)
    result += (green << 8) + (int(step_green * count) << 8)
    result += blue + int(step_blue * count)
    return result & _UINT32


def _color_step(start: Point, end: Point, length: int) -> tuple[float, float, float]:
    if start.color == end.color or length == 0:
        return 0.0, 0.0, 0.0
    diffs = (e - s for s, e in zip(_channels(start.color), _channels(end.color)))
    return tuple(diff / length for diff in diffs)  # type: ignore[return-value]


def draw_segment(start: Point, end: Point, put_pixel: PutPixel) -> None:
    """Plot the line from ``start`` to ``end`` on screen, one pixel per step."""
    span_x = abs(int(end.screen_x - start.screen_x))
    span_y = abs(int(end.screen_y - start.screen_y))
    length = max(span_x, span_y)
    step_x = span_x / length if length else 0.0
    step_y = span_y / length if length else 0.0
    if end.screen_x < start.screen_x:
        step_x = -step_x
    if end.screen_y < start.screen_y:
        step_y = -step_y
    color_step = _color_step(start, end, length)
    px, py = start.screen_x, start.screen_y
    for count in range(length + 1):
        color = start.color
        if start.color != end.color:
            color = blend_color(start.color, color_step, count)
        put_pixel(_round(px), _round(py), color)
        px += step_x
        py += step_y


def draw_wireframe(wire_map: WireMap, put_pixel: PutPixel) -> None:
    """Draw every edge between neighbouring points of a projected map."""
    points = wire_map.points
    width = wire_map.width
    last_row_start = width * (wire_map.height - 1)
    for i in range(len(points) - 1):
        if points[i].y == points[i + 1].y:
            draw_segment(points[i], points[i + 1], put_pixel)
        if i < last_row_start:
            draw_segment(points[i], points[i + width], put_pixel)