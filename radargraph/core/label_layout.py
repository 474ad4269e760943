"""Axis label placement around the outer polygon.

NO Kivy imports.

The label of a vertex sitting on the vertical axis of the chart (within
POSITION_EPSILON) is centered horizontally above or below it. Any other label
is centered vertically to the right or left of its vertex.

This rule assumes the default -90 degree start offset. With another offset a
vertex that is almost vertical gets a side label.
"""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from radargraph.core.models import Point, Size

POSITION_EPSILON = 0.01


class LabelQuadrant(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class LabelPlacement(NamedTuple):
    quadrant: LabelQuadrant
    top_left: Point


def is_equal_with_epsilon(a: float, b: float, epsilon: float) -> bool:
    return abs(a - b) <= epsilon


def classify_quadrant(vertex: Point, center: Point, epsilon: float = POSITION_EPSILON) -> LabelQuadrant:
    if is_equal_with_epsilon(vertex.x, center.x, epsilon):
        return LabelQuadrant.TOP if vertex.y < center.y else LabelQuadrant.BOTTOM
    return LabelQuadrant.RIGHT if vertex.x > center.x else LabelQuadrant.LEFT


def place_label(
    vertex: Point,
    center: Point,
    text_size: Size,
    text_margin: float,
    offset: Point = Point(0.0, 0.0),
    epsilon: float = POSITION_EPSILON,
) -> LabelPlacement:
    """Compute the top-left draw origin of a label attached to `vertex`.

    Args:
        vertex: outer vertex the label belongs to
        center: center of the chart circle
        text_size: measured size of the rendered text
        text_margin: gap between the vertex and the text box
        offset: per-label manual nudge, added after automatic placement
        epsilon: tolerance for "vertex is on the vertical axis"
    """
    width, height = text_size
    quadrant = classify_quadrant(vertex, center, epsilon)

    if quadrant is LabelQuadrant.TOP:
        x, y = vertex.x - width / 2, vertex.y - (height + text_margin)
    elif quadrant is LabelQuadrant.BOTTOM:
        x, y = vertex.x - width / 2, vertex.y + text_margin
    elif quadrant is LabelQuadrant.RIGHT:
        x, y = vertex.x + text_margin, vertex.y - height / 2
    else:
        x, y = vertex.x - (width + text_margin), vertex.y - height / 2

    return LabelPlacement(quadrant, Point(x + offset.x, y + offset.y))
