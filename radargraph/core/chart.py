"""Radar chart draw orchestration.

NO Kivy imports - drawing goes through a DrawingSurface.

Draw order (later on top):
1. Outer polygon (background fill + outer stroke)
2. Gradation rings
3. Axis spokes (optional)
4. Axis labels
5. For each series in list order: fill, stroke, then vertex decorations
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from radargraph.common.config import ChartAppearance
from radargraph.core.decoration import CircleShape, decoration_shape
from radargraph.core.geometry import DEFAULT_OFFSET, distance, scale_toward
from radargraph.core.layout import ChartLayout, TextMeasure, compute_layout
from radargraph.core.models import (
    Color,
    GradientFill,
    NoFill,
    Parameter,
    Point,
    Rect,
    Series,
    SolidFill,
)
from radargraph.core.surface import DrawingSurface

_logger = logging.getLogger(__name__)

# The gradient reaches end_color at this fraction of the chart radius
GRADIENT_END_LOCATION = 0.6
GRADIENT_STEPS = 12


def _is_visible(color: Color) -> bool:
    return len(color) < 4 or color[3] > 0


def _mix(start: Color, end: Color, t: float) -> Color:
    return (
        start[0] + (end[0] - start[0]) * t,
        start[1] + (end[1] - start[1]) * t,
        start[2] + (end[2] - start[2]) * t,
        start[3] + (end[3] - start[3]) * t,
    )


def gradient_bands(
    vertices: Sequence[Point],
    center: Point,
    radius: float,
    fill: GradientFill,
    steps: int = GRADIENT_STEPS,
) -> List[Tuple[Tuple[Point, ...], Color]]:
    """Approximate a radial gradient clipped to the series polygon.

    Returns (polygon, color) bands to fill in order, outermost first. Each band
    is the series polygon with its vertices pulled within the band radius.
    """
    bands: List[Tuple[Tuple[Point, ...], Color]] = [(tuple(vertices), fill.end_color)]
    end_radius = radius * GRADIENT_END_LOCATION
    if end_radius <= 0 or steps <= 0:
        return bands

    for k in range(steps - 1, 0, -1):
        t = k / steps
        band_radius = end_radius * t
        clipped = []
        for vertex in vertices:
            d = distance(center, vertex)
            clipped.append(vertex if d <= band_radius else scale_toward(center, vertex, band_radius / d))
        bands.append((tuple(clipped), _mix(fill.start_color, fill.end_color, t)))
    return bands


class RadarChart:
    """Parameters, series and appearance of one radar chart.

    Holds configuration only. Each draw() computes a fresh ChartLayout.
    """

    def __init__(
        self,
        parameters: Sequence[Parameter] = (),
        series: Sequence[Series] = (),
        appearance: Optional[ChartAppearance] = None,
        angular_offset: float = DEFAULT_OFFSET,
    ) -> None:
        self.parameters = list(parameters)
        self.series = list(series)
        self.appearance = appearance or ChartAppearance()
        self.angular_offset = angular_offset

    def series_from_values(self, values: Sequence[float], **style: Any) -> Series:
        """Build a series from raw values on the 0..appearance.max_value scale."""
        return Series.from_values(values, self.appearance.max_value, **style)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def layout(self, bounds: Rect, measure: TextMeasure) -> ChartLayout:
        return compute_layout(
            self.parameters,
            self.series,
            self.appearance,
            bounds,
            measure,
            self.angular_offset,
        )

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self, surface: DrawingSurface, bounds: Rect) -> ChartLayout:
        """Lay out and draw the whole chart. Returns the layout that was drawn."""
        layout = self.layout(bounds, surface.measure_text)
        self.draw_background(surface, layout)
        for series_layout in layout.series:
            self.draw_series(surface, series_layout.series, series_layout.vertices, layout)
        return layout

    def draw_background(self, surface: DrawingSurface, layout: ChartLayout) -> None:
        """Everything below the series: outer polygon, gradations, spokes, labels."""
        appearance = self.appearance

        if layout.is_empty:
            if _is_visible(appearance.graph_background_color):
                surface.fill_rect(layout.bounds, appearance.graph_background_color)
            return

        outer = layout.outer_polygon
        if _is_visible(appearance.graph_background_color):
            surface.fill_polygon(outer, appearance.graph_background_color)
        if appearance.outer_stroke_width > 0:
            surface.stroke_polygon(outer, appearance.outer_stroke_color, appearance.outer_stroke_width)

        for ring in layout.gradations:
            surface.stroke_polygon(ring, appearance.gradation_stroke_color, appearance.gradation_stroke_width)

        if appearance.show_axes:
            for vertex in outer:
                surface.stroke_line(
                    layout.center, vertex, appearance.gradation_stroke_color, appearance.gradation_stroke_width
                )

        self.draw_labels(surface, layout)

    def draw_labels(self, surface: DrawingSurface, layout: ChartLayout) -> None:
        for parameter_layout in layout.parameters:
            parameter = parameter_layout.parameter
            if parameter.name:
                surface.draw_text(parameter.name, parameter_layout.text_top_left, parameter.label_style)

    def draw_series(
        self,
        surface: DrawingSurface,
        series: Series,
        vertices: Sequence[Point],
        layout: ChartLayout,
    ) -> None:
        """Draw one series polygon at `vertices`, then its decorations on top.

        `vertices` is passed separately from the layout so that an animated
        host can draw intermediate paths.
        """
        if not vertices:
            return

        fill = series.fill
        if isinstance(fill, SolidFill):
            surface.fill_polygon(vertices, fill.color)
        elif isinstance(fill, GradientFill):
            for band, color in gradient_bands(vertices, layout.center, layout.radius, fill):
                surface.fill_polygon(band, color)
        elif not isinstance(fill, NoFill):
            _logger.warning("Unknown fill mode %r for series %r, not filling", fill, series.name)

        if series.stroke_color is not None:
            surface.stroke_polygon(vertices, series.stroke_color, series.stroke_width)

        self.draw_decorations(surface, series, vertices)

    def draw_decorations(self, surface: DrawingSurface, series: Series, vertices: Sequence[Point]) -> None:
        # Decorations are filled with the stroke color; no stroke color, no decoration
        if series.decoration is None or series.stroke_color is None:
            return
        for vertex in vertices:
            shape = decoration_shape(series.decoration, vertex)
            if isinstance(shape, CircleShape):
                surface.fill_circle(shape.center, shape.radius, series.stroke_color)
            else:
                surface.fill_polygon(shape.points, series.stroke_color)
