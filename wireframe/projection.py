"""Isometric projection of a height map onto the screen."""

from __future__ import annotations

from dataclasses import dataclass, field

WIDTH = 1280
HEIGHT = 920
RATE = 1.3913043478
COS_30 = 0.86602540378
SIN_30 = 0.52532198881
TOP_MARGIN = 50


@dataclass
class Point:
    """A map vertex: grid position, height, colour and projected positions."""

    x: float
    y: float
    z: float
    color: int
    iso_x: float = 0.0
    iso_y: float = 0.0
    screen_x: float = 0.0
    screen_y: float = 0.0


@dataclass
class WireMap:
    """A grid of points stored row by row, with its isometric extents."""

    width: int
    height: int
    points: list[Point]
    max_ix: float = field(default=0.0, init=False)
    min_ix: float = field(default=0.0, init=False)
    max_iy: float = field(default=0.0, init=False)
    min_iy: float = field(default=0.0, init=False)
    d_ix: float = field(default=0.0, init=False)
    d_iy: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("map dimensions must be positive")
        if len(self.points) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} points, "
                f"got {len(self.points)}"
            )

    def point(self, x: int, y: int) -> Point:
        """Return the point in column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) is outside the map")
        return self.points[y * self.width + x]


def _to_iso(wire_map: WireMap) -> None:
    for point in wire_map.points:
        point.iso_x = (point.x - point.y) * COS_30
        point.iso_y = -point.z + (point.x + point.y) * SIN_30


def _measure(wire_map: WireMap) -> None:
    # Extents start from the origin, so they always bracket zero.
    for point in wire_map.points:
        wire_map.max_ix = max(wire_map.max_ix, point.iso_x)
        wire_map.max_iy = max(wire_map.max_iy, point.iso_y)
        wire_map.min_ix = min(wire_map.min_ix, point.iso_x)
        wire_map.min_iy = min(wire_map.min_iy, point.iso_y)
    wire_map.d_ix = wire_map.max_ix + abs(wire_map.min_ix)
    wire_map.d_iy = wire_map.max_iy + abs(wire_map.min_iy)


def project(wire_map: WireMap) -> WireMap:
    """Fill in the isometric and screen positions of every point."""
    _to_iso(wire_map)
    _measure(wire_map)
    scale = wire_map.d_ix if RATE <= 1 else wire_map.d_iy * 1.75
    if scale == 0:
        raise ValueError("the map has no extent to scale to the screen")
    shift_x = abs(wire_map.min_ix)
    shift_y = abs(wire_map.min_iy)
    for point in wire_map.points:
        point.screen_x = (point.iso_x + shift_x) * (WIDTH / scale)
        point.screen_y = (
            (point.iso_y + shift_y) * (HEIGHT / scale) * RATE + TOP_MARGIN
        )
    return wire_map