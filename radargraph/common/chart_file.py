# radargraph/common/chart_file.py
"""JSON chart definition loading (Kivy-independent).

File layout:

    {
        "appearance": {"margin": 10, "number_of_gradations": 3, ...},
        "parameters": [{"name": "HP", "text_offset": [0, 0]}, ...],
        "series": [
            {
                "name": "blue",
                "fill": {"solid": [0.1, 0.1, 0.7, 0.7]},
                "stroke_color": "#0000ff",
                "stroke_width": 4.0,
                "percentage_values": [0.9, 0.5, 0.6, 0.2, 0.9],
                "decoration": {"square": 8.0}
            }
        ]
    }

"fill" is {"solid": color}, {"gradient": [start, end]} or "none".
A series may give raw "values" instead of "percentage_values"; they are
divided by appearance.max_value.

Usage:
    from radargraph.common.chart_file import load_chart_file

    definition = load_chart_file("chart.json")
    chart = definition.to_chart()
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from radargraph.common.config import ChartAppearance, safe_color, safe_float
from radargraph.common.errors import ChartFileError
from radargraph.core.chart import RadarChart
from radargraph.core.models import (
    BLACK,
    CircleDecoration,
    Decoration,
    DiamondDecoration,
    FillMode,
    GradientFill,
    LabelStyle,
    NoFill,
    Parameter,
    Point,
    Series,
    SolidFill,
    SquareDecoration,
)

_logger = logging.getLogger(__name__)

_DECORATIONS = {
    "circle": CircleDecoration,
    "square": SquareDecoration,
    "diamond": DiamondDecoration,
}


@dataclass(frozen=True)
class ChartDefinition:
    parameters: Tuple[Parameter, ...] = ()
    series: Tuple[Series, ...] = ()
    appearance: ChartAppearance = field(default_factory=ChartAppearance)

    def to_chart(self) -> RadarChart:
        return RadarChart(self.parameters, self.series, self.appearance)


# =============================================================================
# Parsing
# =============================================================================


def _parse_point(value: Any) -> Point:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return Point(safe_float(value[0], 0.0), safe_float(value[1], 0.0))
    if isinstance(value, dict):
        return Point(safe_float(value.get("x"), 0.0), safe_float(value.get("y"), 0.0))
    return Point(0.0, 0.0)


def _parse_parameter(raw: Any, index: int) -> Parameter:
    if isinstance(raw, str):
        return Parameter(name=raw)
    if not isinstance(raw, dict):
        raise ChartFileError(
            f"Parameter {index} must be a string or an object, got {type(raw).__name__}",
            user_message="Invalid chart file",
            context={"index": index},
        )
    default_style = LabelStyle()
    style = LabelStyle(
        font_name=raw.get("font_name") if isinstance(raw.get("font_name"), str) else None,
        font_size=safe_float(raw.get("font_size"), default_style.font_size),
        color=safe_color(raw.get("font_color"), default_style.color),
    )
    return Parameter(
        name=str(raw.get("name", "")),
        text_offset=_parse_point(raw.get("text_offset")),
        label_style=style,
    )


def _parse_fill(raw: Any) -> FillMode:
    if raw is None:
        return SolidFill(BLACK)
    if raw == "none":
        return NoFill()
    if isinstance(raw, dict):
        if "solid" in raw:
            return SolidFill(safe_color(raw["solid"], BLACK))
        if "gradient" in raw:
            colors = raw["gradient"]
            if isinstance(colors, (list, tuple)) and len(colors) == 2:
                return GradientFill(safe_color(colors[0], BLACK), safe_color(colors[1], BLACK))
    _logger.warning("Unrecognized fill %r, using solid black", raw)
    return SolidFill(BLACK)


def _parse_decoration(raw: Any) -> Optional[Decoration]:
    if raw is None:
        return None
    if isinstance(raw, dict) and len(raw) == 1:
        ((kind, radius),) = raw.items()
        decoration_cls = _DECORATIONS.get(str(kind).lower())
        if decoration_cls is not None:
            return decoration_cls(safe_float(radius, 0.0))
    _logger.warning("Unrecognized decoration %r, ignoring", raw)
    return None


def _parse_values(raw: Any, index: int) -> List[float]:
    if not isinstance(raw, (list, tuple)):
        raise ChartFileError(
            f"Series {index} values must be a list",
            user_message="Invalid chart file",
            context={"index": index},
        )
    try:
        return [float(v) for v in raw]
    except (TypeError, ValueError) as e:
        raise ChartFileError(
            f"Series {index} has a non-numeric value: {e}",
            user_message="Invalid chart file",
            context={"index": index},
        ) from e


def _parse_series(raw: Any, index: int, appearance: ChartAppearance) -> Series:
    if not isinstance(raw, dict):
        raise ChartFileError(
            f"Series {index} must be an object, got {type(raw).__name__}",
            user_message="Invalid chart file",
            context={"index": index},
        )
    stroke_color = safe_color(raw.get("stroke_color"), BLACK) if raw.get("stroke_color") is not None else None
    style: Dict[str, Any] = dict(
        name=raw.get("name") if isinstance(raw.get("name"), str) else None,
        fill=_parse_fill(raw.get("fill")),
        stroke_color=stroke_color,
        stroke_width=safe_float(raw.get("stroke_width"), 1.0),
        decoration=_parse_decoration(raw.get("decoration")),
    )
    if "percentage_values" in raw:
        return Series(percentage_values=tuple(_parse_values(raw["percentage_values"], index)), **style)
    if "values" in raw:
        return Series.from_values(_parse_values(raw["values"], index), appearance.max_value, **style)
    return Series(**style)


def parse_chart_definition(data: Any) -> ChartDefinition:
    """Build a ChartDefinition from already-decoded JSON data.

    Raises:
        ChartFileError: If the top-level structure is wrong.
    """
    if not isinstance(data, dict):
        raise ChartFileError("Chart definition must be a JSON object", user_message="Invalid chart file")

    raw_appearance = data.get("appearance", {})
    if not isinstance(raw_appearance, dict):
        raise ChartFileError("'appearance' must be an object", user_message="Invalid chart file")
    appearance = ChartAppearance.from_dict(raw_appearance)

    raw_parameters = data.get("parameters", [])
    raw_series = data.get("series", [])
    if not isinstance(raw_parameters, list) or not isinstance(raw_series, list):
        raise ChartFileError("'parameters' and 'series' must be lists", user_message="Invalid chart file")

    parameters = tuple(_parse_parameter(p, i) for i, p in enumerate(raw_parameters))
    series = tuple(_parse_series(s, i, appearance) for i, s in enumerate(raw_series))

    for i, s in enumerate(series):
        if len(s.percentage_values) != len(parameters):
            _logger.debug(
                "Series %d has %d values for %d parameters", i, len(s.percentage_values), len(parameters)
            )

    return ChartDefinition(parameters=parameters, series=series, appearance=appearance)


def load_chart_file(path: Union[str, Path]) -> ChartDefinition:
    """Load a chart definition from a JSON file.

    Raises:
        ChartFileError: If the file cannot be read, is not valid JSON, or has
            the wrong structure.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ChartFileError(
            f"Failed to load chart file {path}: {e}",
            user_message="Could not open the chart file",
            context={"path": str(path)},
        ) from e
    _logger.debug("Loaded chart file %s", path)
    return parse_chart_definition(data)


# =============================================================================
# Sample chart
# =============================================================================

SAMPLE_CHART: Dict[str, Any] = {
    "appearance": {"margin": 10, "number_of_gradations": 3},
    "parameters": ["HP", "MP", "STR", "DF", "MGC"],
    "series": [
        {
            "name": "blue",
            "fill": {"solid": [0.1, 0.1, 0.7, 0.7]},
            "stroke_color": [0.0, 0.0, 1.0, 1.0],
            "stroke_width": 4.0,
            "percentage_values": [0.9, 0.5, 0.6, 0.2, 0.9],
            "decoration": {"square": 8.0},
        },
        {
            "name": "green",
            "fill": {"solid": [0.1, 0.7, 0.1, 0.7]},
            "stroke_color": [0.0, 1.0, 0.0, 1.0],
            "stroke_width": 4.0,
            "percentage_values": [0.9, 0.1, 0.2, 0.9, 0.3],
            "decoration": {"circle": 6.0},
        },
        {
            "name": "red",
            "fill": {"solid": [0.7, 0.1, 0.1, 0.7]},
            "stroke_color": [1.0, 0.0, 0.0, 1.0],
            "stroke_width": 4.0,
            "percentage_values": [0.5, 0.9, 0.5, 0.5, 0.6],
            "decoration": {"diamond": 8.0},
        },
    ],
}


def sample_chart_definition() -> ChartDefinition:
    """Five-parameter chart with three series, used by the demo app."""
    return parse_chart_definition(SAMPLE_CHART)
