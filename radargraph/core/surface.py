"""Host drawing primitives consumed by the chart.

The chart never talks to a GUI toolkit directly. The host passes an object
satisfying DrawingSurface; radargraph.gui.kivy_surface implements it on top of
kivy.graphics, tests use a recording fake.

All coordinates are in the chart's top-left origin system.
"""
from __future__ import annotations

from typing import Protocol, Sequence

from radargraph.core.models import Color, LabelStyle, Point, Rect, Size


class DrawingSurface(Protocol):
    def fill_rect(self, rect: Rect, color: Color) -> None: ...

    def fill_polygon(self, points: Sequence[Point], color: Color) -> None: ...

    def stroke_polygon(self, points: Sequence[Point], color: Color, width: float) -> None: ...

    def stroke_line(self, start: Point, end: Point, color: Color, width: float) -> None: ...

    def fill_circle(self, center: Point, radius: float, color: Color) -> None: ...

    def measure_text(self, text: str, style: LabelStyle) -> Size: ...

    def draw_text(self, text: str, top_left: Point, style: LabelStyle) -> None: ...
