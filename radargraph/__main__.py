"""isort:skip_file"""
# Demo application: the sample chart (or a JSON chart file) with one button per animation.
#
#   python -m radargraph [--chart chart.json] [--duration 0.4]

from __future__ import annotations

# first, logging level lower
import os

os.environ["KCFG_KIVY_LOG_LEVEL"] = os.environ.get("KCFG_KIVY_LOG_LEVEL", "warning")

import argparse
import logging
import sys
from typing import Any, List, Optional

import kivy

kivy.require("2.0.0")

from kivy.metrics import dp
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivymd.app import MDApp

from radargraph.common.chart_file import ChartDefinition, load_chart_file, sample_chart_definition
from radargraph.common.errors import RadarGraphError
from radargraph.core.animation import AnimationKind
from radargraph.gui.radar_graph import RadarGraphWidget

_logger = logging.getLogger("radargraph")

ANIMATION_DEFAULT_DURATION = 0.4

ANIMATION_BUTTONS = (
    ("Scale all", AnimationKind.SCALE_ALL),
    ("Scale one by one", AnimationKind.SCALE_ONE_BY_ONE),
    ("Parameter one by one", AnimationKind.PARAMETER_BY_PARAMETER),
)


class RadarGraphDemoApp(MDApp):
    def __init__(self, definition: ChartDefinition, duration: float, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.definition = definition
        self.duration = duration
        self.graph: Optional[RadarGraphWidget] = None

    def build(self) -> BoxLayout:
        self.title = "Radar Graph"
        root = BoxLayout(orientation="vertical", padding=dp(8), spacing=dp(8))

        self.graph = RadarGraphWidget(
            parameters=list(self.definition.parameters),
            series=list(self.definition.series),
            appearance=self.definition.appearance,
        )
        root.add_widget(self.graph)

        buttons = BoxLayout(orientation="horizontal", size_hint_y=None, height=dp(48), spacing=dp(8))
        for title, kind in ANIMATION_BUTTONS:
            button = Button(text=title)
            button.bind(on_release=lambda _btn, kind=kind: self.graph.animate(kind, self.duration))
            buttons.add_widget(button)
        root.add_widget(buttons)
        return root


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="radargraph", description="Radar graph demo")
    parser.add_argument("--chart", help="JSON chart definition file (default: built-in sample)")
    parser.add_argument(
        "--duration",
        type=float,
        default=ANIMATION_DEFAULT_DURATION,
        help=f"animation duration in seconds (default: {ANIMATION_DEFAULT_DURATION})",
    )
    return parser.parse_args(argv)


def run_app(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        definition = load_chart_file(args.chart) if args.chart else sample_chart_definition()
    except RadarGraphError as e:
        _logger.error("%s (%s)", e, e.context)
        print(e.user_message, file=sys.stderr)
        return 1

    RadarGraphDemoApp(definition, args.duration).run()
    return 0


if __name__ == "__main__":
    sys.exit(run_app())
