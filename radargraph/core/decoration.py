"""Vertex decoration shapes (circle, square, diamond).

NO Kivy imports.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from radargraph.core.geometry import SQUARE_OFFSET, VERTICAL_OFFSET, regular_polygon
from radargraph.core.models import (
    CircleDecoration,
    Decoration,
    DiamondDecoration,
    Point,
    SquareDecoration,
)

DECORATION_EDGE_COUNT = 4


@dataclass(frozen=True)
class CircleShape:
    center: Point
    radius: float


@dataclass(frozen=True)
class PolygonShape:
    """Closed polygon; the first point is not repeated at the end."""

    points: Tuple[Point, ...]


Shape = Union[CircleShape, PolygonShape]


def decoration_shape(decoration: Decoration, center: Point) -> Shape:
    """Shape of one decoration drawn at `center` (a series vertex).

    SQUARE and DIAMOND are the same 4-gon with a different rotation:
    SQUARE_OFFSET gives axis-aligned edges, VERTICAL_OFFSET gives vertices
    pointing up, down, left and right.
    """
    if isinstance(decoration, CircleDecoration):
        return CircleShape(center, decoration.radius)
    if isinstance(decoration, SquareDecoration):
        return PolygonShape(regular_polygon(DECORATION_EDGE_COUNT, decoration.radius, center, SQUARE_OFFSET))
    if isinstance(decoration, DiamondDecoration):
        return PolygonShape(regular_polygon(DECORATION_EDGE_COUNT, decoration.radius, center, VERTICAL_OFFSET))
    raise TypeError(f"Unknown decoration type: {type(decoration).__name__}")
