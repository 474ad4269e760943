# radargraph/common/config.py
#
# Typed appearance configuration for the radar chart.
# Frozen dataclass plus safe converters so that values coming from JSON
# never break rendering: unknown or malformed values fall back to defaults.

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from radargraph.core.models import BLACK, CLEAR, GRAY, Color

_logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})


# =============================================================================
# Helper Functions
# =============================================================================


def safe_int(value: Any, default: int) -> int:
    """int conversion. None/bool/float/failed conversion -> default.

    bool is a subclass of int but returns default, so True never becomes 1.
    float returns default to avoid silent truncation.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_float(value: Any, default: float) -> float:
    """float conversion. None/bool/failed conversion -> default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def safe_bool(value: Any, default: bool) -> bool:
    """bool conversion. Accepts bools, 0/1 and "true"/"false"/"yes"/"no"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return default


def safe_color(value: Any, default: Color) -> Color:
    """Color conversion.

    Accepts [r, g, b] / [r, g, b, a] lists of floats in 0..1 and
    "#rrggbb" / "#rrggbbaa" hex strings. Anything else -> default.
    """
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if len(text) not in (6, 8):
            return default
        try:
            channels = [int(text[i : i + 2], 16) / 255.0 for i in range(0, len(text), 2)]
        except ValueError:
            return default
        if len(channels) == 3:
            channels.append(1.0)
        return (channels[0], channels[1], channels[2], channels[3])

    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        try:
            channels = [float(c) for c in value]
        except (TypeError, ValueError):
            return default
        if any(c < 0.0 or c > 1.0 for c in channels):
            return default
        if len(channels) == 3:
            channels.append(1.0)
        return (channels[0], channels[1], channels[2], channels[3])

    return default


# =============================================================================
# Dataclasses
# =============================================================================


@dataclass(frozen=True)
class ChartAppearance:
    """Appearance of the chart frame (everything except the series).

    Thread-safety: Immutable (frozen=True)

    Attributes:
        margin: Space between the bounds and the outlying circle.
        text_margin: Space between an outer vertex and its label.
        outer_stroke_color: Color of the outermost polygon's edges.
        outer_stroke_width: Width of the outermost polygon's edges.
        gradation_stroke_color: Color of the inner (gradation) polygons' edges.
        gradation_stroke_width: Width of the inner (gradation) polygons' edges.
        graph_background_color: Fill of the outermost polygon.
        number_of_gradations: Number of inner polygons.
        max_value: Full scale used by RadarChart.series_from_values.
        auto_fit: Shrink the radius so that labels fit in the bounds.
        show_axes: Draw a spoke from the center to each outer vertex.
    """

    margin: float = 0.0
    text_margin: float = 3.0
    outer_stroke_color: Color = BLACK
    outer_stroke_width: float = 1.0
    gradation_stroke_color: Color = GRAY
    gradation_stroke_width: float = 1.0
    graph_background_color: Color = CLEAR
    number_of_gradations: int = 4
    max_value: float = 100.0
    auto_fit: bool = True
    show_axes: bool = False

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ChartAppearance":
        """Build from a dict. Missing keys use defaults, bad types are converted safely.

        Unknown keys are logged and ignored.
        """
        known = {f.name for f in fields(cls)}
        for key in d:
            if key not in known:
                _logger.warning("Unknown appearance key '%s', ignoring", key)

        base = cls()
        return cls(
            margin=max(0.0, safe_float(d.get("margin"), base.margin)),
            text_margin=safe_float(d.get("text_margin"), base.text_margin),
            outer_stroke_color=safe_color(d.get("outer_stroke_color"), base.outer_stroke_color),
            outer_stroke_width=max(0.0, safe_float(d.get("outer_stroke_width"), base.outer_stroke_width)),
            gradation_stroke_color=safe_color(d.get("gradation_stroke_color"), base.gradation_stroke_color),
            gradation_stroke_width=max(
                0.0, safe_float(d.get("gradation_stroke_width"), base.gradation_stroke_width)
            ),
            graph_background_color=safe_color(d.get("graph_background_color"), base.graph_background_color),
            number_of_gradations=max(0, safe_int(d.get("number_of_gradations"), base.number_of_gradations)),
            max_value=safe_float(d.get("max_value"), base.max_value),
            auto_fit=safe_bool(d.get("auto_fit"), base.auto_fit),
            show_axes=safe_bool(d.get("show_axes"), base.show_axes),
        )

    def with_overrides(self, **overrides: Any) -> "ChartAppearance":
        """Copy with some fields replaced; unknown names are logged and ignored."""
        known = {f.name for f in fields(self)}
        accepted = {}
        for key, value in overrides.items():
            if key in known:
                accepted[key] = value
            else:
                _logger.warning("Unknown appearance key '%s', ignoring", key)
        return replace(self, **accepted)
