"""Data model for the radar chart.

NO Kivy imports - everything here is plain data.

Coordinate System:
- Origin at top-left, Y increases downward
- The Kivy host flips Y when issuing draw calls
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Sequence, Tuple, Union

Color = Tuple[float, float, float, float]

BLACK: Color = (0.0, 0.0, 0.0, 1.0)
GRAY: Color = (0.5, 0.5, 0.5, 1.0)
CLEAR: Color = (0.0, 0.0, 0.0, 0.0)


class Point(NamedTuple):
    x: float
    y: float


class Size(NamedTuple):
    width: float
    height: float


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)


# ---------------------------------------------------------------------------
# Fill modes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SolidFill:
    color: Color


@dataclass(frozen=True)
class GradientFill:
    """Radial gradient from the chart center outward."""

    start_color: Color
    end_color: Color


@dataclass(frozen=True)
class NoFill:
    pass


FillMode = Union[SolidFill, GradientFill, NoFill]


# ---------------------------------------------------------------------------
# Vertex decorations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CircleDecoration:
    radius: float


@dataclass(frozen=True)
class SquareDecoration:
    """Square with edges parallel to the x and y axis."""

    radius: float


@dataclass(frozen=True)
class DiamondDecoration:
    """Square rotated 45 degrees (vertices point up/down/left/right)."""

    radius: float


Decoration = Union[CircleDecoration, SquareDecoration, DiamondDecoration]


# ---------------------------------------------------------------------------
# Parameters and series
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LabelStyle:
    font_name: Optional[str] = None
    font_size: float = 14.0
    color: Color = BLACK


@dataclass(frozen=True)
class Parameter:
    """One spoke of the radar chart.

    Attributes:
        name: Rendered next to the spoke.
        text_offset: Manual nudge applied after automatic label placement.
        label_style: Font and color of the name label.
    """

    name: str = ""
    text_offset: Point = Point(0.0, 0.0)
    label_style: LabelStyle = field(default_factory=LabelStyle)


@dataclass(frozen=True)
class Series:
    """One data polygon plotted across all parameters.

    percentage_values follows the same order as the chart parameters.
    0.0 places a vertex at the chart center, 1.0 on the outer polygon.
    The stroke color also colors the vertex decorations.
    """

    name: Optional[str] = None
    fill: FillMode = SolidFill(BLACK)
    stroke_color: Optional[Color] = None
    stroke_width: float = 1.0
    percentage_values: Tuple[float, ...] = ()
    decoration: Optional[Decoration] = None

    def __post_init__(self) -> None:
        # Accept any sequence (lists from JSON / callers) but store a tuple
        object.__setattr__(self, "percentage_values", tuple(float(v) for v in self.percentage_values))

    @classmethod
    def from_values(cls, values: Sequence[float], max_value: float, **kwargs) -> "Series":
        """Build a series from raw values on a 0..max_value scale."""
        if max_value <= 0:
            percentages: Tuple[float, ...] = tuple(0.0 for _ in values)
        else:
            percentages = tuple(v / max_value for v in values)
        return cls(percentage_values=percentages, **kwargs)

    def percentage_at(self, index: int) -> float:
        """Missing entries are treated as 0, extra entries are never read."""
        if index < len(self.percentage_values):
            return self.percentage_values[index]
        return 0.0
