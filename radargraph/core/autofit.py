"""Auto-fit of the chart radius so that axis labels stay inside the bounds.

NO Kivy imports.

Two passes (see radargraph.core.layout):
1. AUTO_ADJUST - lay the labels out at the naive radius, measure how far each
   label box sticks out of the bounds and derive the radius that pulls its
   vertex back in. The most restrictive radius wins.
2. DRAW_TEXT - lay everything out again at the resolved radius.

A label wider than the bounds themselves cannot be fitted; the radius is then
floored at MINIMUM_RADIUS and the label clips.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, NamedTuple

from radargraph.core.models import Point, Rect, Size

_logger = logging.getLogger(__name__)

AUTO_ADJUST_MARGIN = 2.0
MINIMUM_RADIUS = 20.0
# sin/cos below this are treated as zero (the edge cannot be reached by shrinking)
_DIRECTION_EPSILON = 1e-6


class EdgeOverflow(NamedTuple):
    """Distance between a label box and each edge of the bounds.

    Negative values mean the label would be clipped on that edge.
    """

    top: float
    bottom: float
    left: float
    right: float

    @property
    def clips(self) -> bool:
        return min(self) < 0


class LabelBox(NamedTuple):
    vertex: Point
    angle: float
    top_left: Point
    size: Size


def label_overflow(
    top_left: Point,
    text_size: Size,
    bounds: Rect,
    margin: float = AUTO_ADJUST_MARGIN,
) -> EdgeOverflow:
    return EdgeOverflow(
        top=top_left.y - bounds.y - margin,
        bottom=bounds.max_y - (top_left.y + text_size.height + margin),
        left=top_left.x - bounds.x - margin,
        right=bounds.max_x - (top_left.x + text_size.width + margin),
    )


def radius_for_overflow(
    vertex: Point,
    angle: float,
    center: Point,
    radius: float,
    overflow: EdgeOverflow,
) -> float:
    """Radius that moves `vertex` along its spoke until the label no longer clips.

    Solves center + r * (cos, sin)(angle) == adjusted edge position,
    component by component, and keeps the smallest candidate.
    """
    sin_a = math.sin(angle)
    cos_a = math.cos(angle)
    candidates = [radius]

    if abs(sin_a) > _DIRECTION_EPSILON:
        if overflow.top < 0:
            candidates.append(((vertex.y - overflow.top) - center.y) / sin_a)
        if overflow.bottom < 0:
            candidates.append(((vertex.y + overflow.bottom) - center.y) / sin_a)

    if abs(cos_a) > _DIRECTION_EPSILON:
        if overflow.left < 0:
            candidates.append(((vertex.x - overflow.left) - center.x) / cos_a)
        if overflow.right < 0:
            candidates.append(((vertex.x + overflow.right) - center.x) / cos_a)

    return min(candidates)


def resolve_radius(
    bounds: Rect,
    naive_radius: float,
    center: Point,
    labels: Iterable[LabelBox],
    margin: float = AUTO_ADJUST_MARGIN,
) -> float:
    """Return the largest radius (<= naive_radius) at which every label fits.

    Returns naive_radius unchanged when no label clips.
    """
    resolved = naive_radius
    for label in labels:
        overflow = label_overflow(label.top_left, label.size, bounds, margin)
        if not overflow.clips:
            continue
        candidate = radius_for_overflow(label.vertex, label.angle, center, naive_radius, overflow)
        resolved = min(resolved, candidate)

    floor = min(naive_radius, MINIMUM_RADIUS)
    if resolved < floor:
        _logger.debug("Auto-fit radius %.2f below floor, using %.2f", resolved, floor)
        resolved = floor
    if resolved != naive_radius:
        _logger.debug("Auto-fit radius adjusted %.2f -> %.2f", naive_radius, resolved)
    return resolved
