"""Draw-time layout of the radar chart.

NO Kivy imports.

compute_layout() is run at the start of every draw pass and returns an
immutable ChartLayout. Parameter and Series stay pure configuration; the
outer vertices, label positions and series vertices only live in the layout.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from radargraph.common.config import ChartAppearance
from radargraph.core.autofit import LabelBox, resolve_radius
from radargraph.core.geometry import (
    DEFAULT_OFFSET,
    gradation_ratios,
    point_on_circle,
    scale_polygon,
    scale_toward,
    vertex_angle,
)
from radargraph.core.label_layout import LabelQuadrant, place_label
from radargraph.core.models import LabelStyle, Parameter, Point, Rect, Series, Size

_logger = logging.getLogger(__name__)

TextMeasure = Callable[[str, LabelStyle], Size]


@dataclass(frozen=True)
class ParameterLayout:
    parameter: Parameter
    outer_vertex: Point
    angle: float
    text_size: Size
    text_top_left: Point
    quadrant: LabelQuadrant


@dataclass(frozen=True)
class SeriesLayout:
    series: Series
    vertices: Tuple[Point, ...]


@dataclass(frozen=True)
class ChartLayout:
    """Result of one layout pass.

    Every SeriesLayout has exactly len(parameters) vertices.
    """

    bounds: Rect
    center: Point
    radius: float
    parameters: Tuple[ParameterLayout, ...]
    gradations: Tuple[Tuple[Point, ...], ...]
    series: Tuple[SeriesLayout, ...]

    @property
    def outer_polygon(self) -> Tuple[Point, ...]:
        return tuple(p.outer_vertex for p in self.parameters)

    @property
    def is_empty(self) -> bool:
        return not self.parameters


def naive_radius(bounds: Rect, margin: float) -> float:
    """Half of the shortest side minus the margin; correct when there are no labels."""
    return max(0.0, min(bounds.width / 2.0, bounds.height / 2.0) - margin)


def series_vertices(
    series: Series,
    outer_polygon: Sequence[Point],
    center: Point,
) -> Tuple[Point, ...]:
    """Scale each outer vertex toward the center by the series percentage.

    Negative percentages are clamped to 0 instead of flipping the vertex to the
    other side of the center. Values above 1 overshoot the outer polygon.
    """
    vertices = []
    for i, outer in enumerate(outer_polygon):
        percentage = series.percentage_at(i)
        if percentage < 0:
            _logger.debug("Series %r value %d is negative (%s), clamping to 0", series.name, i, percentage)
            percentage = 0.0
        vertices.append(scale_toward(center, outer, percentage))
    return tuple(vertices)


def _measure_all(parameters: Sequence[Parameter], measure: TextMeasure) -> list[Size]:
    sizes = []
    for parameter in parameters:
        if parameter.name:
            sizes.append(Size(*measure(parameter.name, parameter.label_style)))
        else:
            sizes.append(Size(0.0, 0.0))
    return sizes


def _lay_out_parameters(
    parameters: Sequence[Parameter],
    text_sizes: Sequence[Size],
    center: Point,
    radius: float,
    label_margin: float,
    angular_offset: float,
) -> Tuple[ParameterLayout, ...]:
    count = len(parameters)
    result = []
    for i, (parameter, text_size) in enumerate(zip(parameters, text_sizes)):
        angle = vertex_angle(i, count, angular_offset)
        vertex = point_on_circle(center, radius, angle)
        placement = place_label(vertex, center, text_size, label_margin, parameter.text_offset)
        result.append(
            ParameterLayout(
                parameter=parameter,
                outer_vertex=vertex,
                angle=angle,
                text_size=text_size,
                text_top_left=placement.top_left,
                quadrant=placement.quadrant,
            )
        )
    return tuple(result)


def compute_layout(
    parameters: Sequence[Parameter],
    series: Sequence[Series],
    appearance: ChartAppearance,
    bounds: Rect,
    measure: TextMeasure,
    angular_offset: float = DEFAULT_OFFSET,
) -> ChartLayout:
    """Lay out the chart inside `bounds`.

    With appearance.auto_fit the radius is resolved in two passes:
    AUTO_ADJUST at the naive radius, then the final pass at the adjusted
    radius. Without it the naive radius is used directly.
    """
    center = bounds.center
    radius = naive_radius(bounds, appearance.margin)

    if not parameters:
        return ChartLayout(
            bounds=bounds,
            center=center,
            radius=radius,
            parameters=(),
            gradations=(),
            series=tuple(SeriesLayout(s, ()) for s in series),
        )

    text_sizes = _measure_all(parameters, measure)
    # The labels also clear the outer stroke
    label_margin = appearance.text_margin + appearance.outer_stroke_width

    laid_out = _lay_out_parameters(parameters, text_sizes, center, radius, label_margin, angular_offset)

    if appearance.auto_fit:
        boxes = [LabelBox(p.outer_vertex, p.angle, p.text_top_left, p.text_size) for p in laid_out]
        fitted = resolve_radius(bounds, radius, center, boxes)
        if fitted != radius:
            radius = fitted
            laid_out = _lay_out_parameters(parameters, text_sizes, center, radius, label_margin, angular_offset)

    outer_polygon = tuple(p.outer_vertex for p in laid_out)
    gradations = tuple(
        scale_polygon(outer_polygon, center, ratio) for ratio in gradation_ratios(appearance.number_of_gradations)
    )
    series_layouts = tuple(SeriesLayout(s, series_vertices(s, outer_polygon, center)) for s in series)

    _logger.debug(
        "Layout: %d parameters, %d series, center=(%.1f, %.1f), radius=%.2f",
        len(parameters),
        len(series),
        center.x,
        center.y,
        radius,
    )
    return ChartLayout(
        bounds=bounds,
        center=center,
        radius=radius,
        parameters=laid_out,
        gradations=gradations,
        series=series_layouts,
    )
