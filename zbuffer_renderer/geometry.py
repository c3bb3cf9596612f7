#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/geometry.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Point3d:
    """Vertex in screen space. y grows downward, smaller z is nearer."""
    x: float
    y: float
    z: float

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


@dataclass(frozen=True)
class Polygon:
    """
    Closed vertex loop with a single packed 0xRRGGBB fill color.

    Any vertex count can be constructed; the rasterizer decides
    whether it accepts the shape.
    """
    points: Tuple[Point3d, ...]
    color: int

    def __init__(self, points: Iterable, color: int):
        pts = tuple(p if isinstance(p, Point3d) else Point3d(*p) for p in points)
        object.__setattr__(self, 'points', pts)
        object.__setattr__(self, 'color', int(color))

    def __len__(self):
        return len(self.points)
