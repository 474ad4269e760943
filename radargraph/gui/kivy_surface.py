"""DrawingSurface implementation on top of kivy.graphics.

Chart coordinates have their origin at the top-left of the widget with Y
growing downward; Kivy's origin is bottom-left with Y growing upward. The
surface converts every point before issuing an instruction.

Instructions are added to whichever canvas is active (`with widget.canvas:`).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Sequence, Tuple

from kivy.core.text import Label as CoreLabel
from kivy.graphics import Color, Ellipse, Line, Mesh, Rectangle
from kivy.graphics.tesselator import TYPE_POLYGONS, WINDING_ODD, Tesselator

from radargraph.core.geometry import closed
from radargraph.core.models import Color as RGBA
from radargraph.core.models import LabelStyle, Point, Rect, Size

DEFAULT_FONT = "Roboto"


@lru_cache(maxsize=500)
def _create_text_texture(text: str, font_name: str, font_size: float) -> Any:
    """LRU-cached text texture (Kivy draws on the main thread only)."""
    label = CoreLabel(text=text, font_name=font_name, font_size=font_size)
    label.refresh()
    return label.texture


def cached_text_texture(text: str, style: LabelStyle) -> Any:
    return _create_text_texture(text, style.font_name or DEFAULT_FONT, float(style.font_size))


class KivySurface:
    def __init__(self, left: float, top: float) -> None:
        self._left = left
        self._top = top

    @classmethod
    def for_widget(cls, widget: Any) -> "KivySurface":
        return cls(widget.x, widget.top)

    def _to_kivy(self, point: Point) -> Tuple[float, float]:
        return (self._left + point[0], self._top - point[1])

    def _flat(self, points: Sequence[Point]) -> list[float]:
        flat: list[float] = []
        for p in points:
            flat.extend(self._to_kivy(p))
        return flat

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def fill_rect(self, rect: Rect, color: RGBA) -> None:
        x, y = self._to_kivy(Point(rect.x, rect.max_y))
        Color(*color)
        Rectangle(pos=(x, y), size=(rect.width, rect.height))

    def fill_polygon(self, points: Sequence[Point], color: RGBA) -> None:
        if len(points) < 3:
            return
        # Series polygons can be concave; let Kivy's tesselator triangulate them
        tess = Tesselator()
        tess.add_contour(self._flat(points))
        if not tess.tesselate(WINDING_ODD, TYPE_POLYGONS):
            return
        Color(*color)
        for vertices, indices in tess.meshes:
            Mesh(vertices=vertices, indices=indices, mode="triangle_fan")

    def stroke_polygon(self, points: Sequence[Point], color: RGBA, width: float) -> None:
        if not points or width <= 0:
            return
        Color(*color)
        Line(points=closed(self._flat(points)), width=width)

    def stroke_line(self, start: Point, end: Point, color: RGBA, width: float) -> None:
        if width <= 0:
            return
        Color(*color)
        Line(points=[*self._to_kivy(start), *self._to_kivy(end)], width=width)

    def fill_circle(self, center: Point, radius: float, color: RGBA) -> None:
        x, y = self._to_kivy(center)
        Color(*color)
        Ellipse(pos=(x - radius, y - radius), size=(2 * radius, 2 * radius))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def measure_text(self, text: str, style: LabelStyle) -> Size:
        texture = cached_text_texture(text, style)
        if texture is None:
            return Size(0.0, 0.0)
        return Size(float(texture.size[0]), float(texture.size[1]))

    def draw_text(self, text: str, top_left: Point, style: LabelStyle) -> None:
        texture: Optional[Any] = cached_text_texture(text, style)
        if texture is None:
            return
        width, height = texture.size
        x, y = self._to_kivy(top_left)
        Color(*style.color)
        Rectangle(texture=texture, pos=(x, y - height), size=(width, height))
