"""
Pytest configuration and shared fixtures for radargraph tests.

This module provides:
- The five-parameter sample chart (HP/MP/STR/DF/MGC)
- Recording surface / fake animator instances
"""

from typing import Tuple

import pytest

from radargraph.common.config import ChartAppearance
from radargraph.core.models import (
    CircleDecoration,
    DiamondDecoration,
    Parameter,
    Rect,
    Series,
    SolidFill,
    SquareDecoration,
)
from tests.fakes import FakePathAnimator, RecordingSurface

PARAMETER_NAMES = ("HP", "MP", "STR", "DF", "MGC")

BLUE = (0.0, 0.0, 1.0, 1.0)
GREEN = (0.0, 1.0, 0.0, 1.0)
RED = (1.0, 0.0, 0.0, 1.0)


# ---------------------------------------------------------------------------
# Chart fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def parameters() -> Tuple[Parameter, ...]:
    return tuple(Parameter(name=name) for name in PARAMETER_NAMES)


@pytest.fixture
def sample_series() -> Tuple[Series, ...]:
    return (
        Series(
            name="blue",
            fill=SolidFill((0.1, 0.1, 0.7, 0.7)),
            stroke_color=BLUE,
            stroke_width=4.0,
            percentage_values=[0.9, 0.5, 0.6, 0.2, 0.9],
            decoration=SquareDecoration(8.0),
        ),
        Series(
            name="green",
            fill=SolidFill((0.1, 0.7, 0.1, 0.7)),
            stroke_color=GREEN,
            stroke_width=4.0,
            percentage_values=[0.9, 0.1, 0.2, 0.9, 0.3],
            decoration=CircleDecoration(6.0),
        ),
        Series(
            name="red",
            fill=SolidFill((0.7, 0.1, 0.1, 0.7)),
            stroke_color=RED,
            stroke_width=4.0,
            percentage_values=[0.5, 0.9, 0.5, 0.5, 0.6],
            decoration=DiamondDecoration(8.0),
        ),
    )


@pytest.fixture
def centered_bounds() -> Rect:
    """200x200 bounds centered on the origin (center (0, 0), naive radius 100)."""
    return Rect(-100.0, -100.0, 200.0, 200.0)


@pytest.fixture
def fixed_appearance() -> ChartAppearance:
    """No auto-fit, so that the radius is exactly the naive radius."""
    return ChartAppearance(auto_fit=False, number_of_gradations=3)


# ---------------------------------------------------------------------------
# Host fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def animator() -> FakePathAnimator:
    return FakePathAnimator()
