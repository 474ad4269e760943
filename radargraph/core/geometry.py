"""Pure geometry calculations for the radar chart.

NO Kivy imports - all functions are pure and deterministic.

Coordinate System:
- Origin at top-left, Y increases downward
- Angle 0 = right (3 o'clock), positive angles turn clockwise on screen
- DEFAULT_OFFSET (-90 degrees) puts axis 0 at 12 o'clock (top)

Radar Layout:
- Axis i sits at angle i * (360 / N) + offset
- Gradation ring k of G sits at radius ratio (k + 1) / (G + 1)
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple

from radargraph.core.models import Point

# -PI/2 keeps the polygon vertically symmetrical (axis 0 points straight up)
VERTICAL_OFFSET = -math.pi / 2
# PI/4 makes a 4-gon whose edges are parallel to the x and y axis
SQUARE_OFFSET = math.pi / 4
DEFAULT_OFFSET = VERTICAL_OFFSET


def exterior_angle(count: int) -> float:
    """Angle between two consecutive axes, in radians.

    Callers must guard count == 0.
    """
    return 2 * math.pi / count


def vertex_angle(index: int, count: int, angular_offset: float = DEFAULT_OFFSET) -> float:
    return exterior_angle(count) * index + angular_offset


def point_on_circle(center: Point, radius: float, angle: float) -> Point:
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def vertex_for(
    index: int,
    count: int,
    radius: float,
    center: Point,
    angular_offset: float = DEFAULT_OFFSET,
) -> Point:
    """Calculate the (x, y) position of vertex `index` of a regular `count`-gon.

    Args:
        index: 0..count-1 (clockwise on screen, 0=top with the default offset)
        count: number of vertices, must be > 0
        radius: radius of the outlying circle
        center: center of the outlying circle
        angular_offset: rotation of vertex 0, in radians
    """
    return point_on_circle(center, radius, vertex_angle(index, count, angular_offset))


def regular_polygon(
    edge_count: int,
    radius: float,
    center: Point,
    rotation: float = DEFAULT_OFFSET,
) -> Tuple[Point, ...]:
    """Vertices of a regular polygon, unclosed (first point is not repeated).

    Shared by the outer polygon, the gradation rings and the vertex decorations.
    """
    if edge_count <= 0:
        return ()
    return tuple(vertex_for(i, edge_count, radius, center, rotation) for i in range(edge_count))


def gradation_ratio(index: int, number_of_gradations: int) -> float:
    """Radius ratio of gradation ring `index`; strictly between 0 and 1."""
    return (index + 1) / (number_of_gradations + 1)


def gradation_ratios(number_of_gradations: int) -> Tuple[float, ...]:
    return tuple(gradation_ratio(k, number_of_gradations) for k in range(max(0, number_of_gradations)))


def scale_toward(center: Point, target: Point, ratio: float) -> Point:
    """center + ratio * (target - center)."""
    return Point(
        center.x + (target.x - center.x) * ratio,
        center.y + (target.y - center.y) * ratio,
    )


def scale_polygon(points: Sequence[Point], center: Point, ratio: float) -> Tuple[Point, ...]:
    return tuple(scale_toward(center, p, ratio) for p in points)


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def flatten(points: Sequence[Point]) -> list[float]:
    """[(x0, y0), (x1, y1)] -> [x0, y0, x1, y1]"""
    flat: list[float] = []
    for p in points:
        flat.extend((p[0], p[1]))
    return flat


def unflatten(flat: Sequence[float]) -> Tuple[Point, ...]:
    return tuple(Point(flat[i], flat[i + 1]) for i in range(0, len(flat) - 1, 2))


def closed(flat: Sequence[float]) -> list[float]:
    """Repeat the first point at the end, as Kivy's Line expects for a closed path."""
    points = list(flat)
    if len(points) >= 2:
        points.extend(points[:2])
    return points

