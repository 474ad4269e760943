"""Radar graph Kivy widget.

The frame (outer polygon, gradations, labels) is drawn on the widget's own
canvas; each series is drawn by a SeriesLayer child so that it can be animated
on its own.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from kivy.clock import Clock
from kivy.graphics import Canvas
from kivy.properties import ListProperty, ObjectProperty
from kivy.uix.relativelayout import RelativeLayout
from kivy.uix.widget import Widget

from radargraph.common.config import ChartAppearance
from radargraph.core.animation import AnimationKind, AnimationSequencer, SeriesAnimation, SequencerState
from radargraph.core.chart import RadarChart
from radargraph.core.geometry import flatten, unflatten
from radargraph.core.layout import ChartLayout
from radargraph.core.models import Rect, Series
from radargraph.gui.animator import KivyPathAnimator
from radargraph.gui.kivy_surface import KivySurface

_logger = logging.getLogger(__name__)


class SeriesLayer(Widget):
    """Draws one series at its current (possibly animated) points.

    Properties:
        points: flat [x0, y0, x1, y1, ...] in chart coordinates
    """

    points = ListProperty([])

    def __init__(self, graph: "RadarGraphWidget", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._graph = graph
        self.series: Optional[Series] = None
        self._redraw_trigger = Clock.create_trigger(self._do_redraw, 0)
        for prop in ("pos", "size", "points"):
            self.bind(**{prop: self.redraw})

    def redraw(self, *_: Any) -> None:
        self._redraw_trigger()

    def _do_redraw(self, *_: Any) -> None:
        self.canvas.clear()
        layout = self._graph.chart_layout
        if self.series is None or layout is None or not self.points:
            return
        try:
            with self.canvas:
                self._graph.chart.draw_series(KivySurface.for_widget(self), self.series, unflatten(self.points), layout)
        except Exception:
            _logger.exception("Failed to draw series %r", self.series.name)
            self.canvas.clear()


class RadarGraphWidget(RelativeLayout):
    """Radar (spider) chart widget.

    Properties:
        parameters: list of Parameter (spokes)
        series: list of Series (data polygons), drawn in list order
        appearance: ChartAppearance
    """

    parameters = ListProperty()
    series = ListProperty()
    appearance = ObjectProperty(ChartAppearance())

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.chart = RadarChart()
        self.chart_layout: Optional[ChartLayout] = None
        self.series_layers: List[SeriesLayer] = []
        self.sequencer = AnimationSequencer(KivyPathAnimator(self))

        # Own canvas group so that RelativeLayout's transform in canvas.before stays intact
        self._frame_canvas = Canvas()
        self.canvas.add(self._frame_canvas)

        self._redraw_trigger = Clock.create_trigger(self._do_redraw, 0)
        for prop in ("size", "parameters", "appearance"):
            self.bind(**{prop: self.redraw})
        self.bind(series=self._on_series)
        self._sync_layers()

    # ------------------------------------------------------------------
    # Host triggers
    # ------------------------------------------------------------------

    def redraw(self, *_: Any) -> None:
        self._redraw_trigger()

    def animate(self, kind: AnimationKind, duration: float) -> None:
        """Start a series animation on the next frame.

        Ignored while another animation is running.
        """
        animation = SeriesAnimation(kind, duration)
        Clock.schedule_once(lambda *_: self._start_animation(animation), 0)

    def cancel_animation(self) -> None:
        self.sequencer.cancel()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_series(self, *_: Any) -> None:
        self._sync_layers()
        self._redraw_trigger()

    def _sync_layers(self) -> None:
        """One SeriesLayer per series, in series order."""
        difference = len(self.series) - len(self.series_layers)
        if difference < 0:
            self.sequencer.cancel()
        for _ in range(difference):
            layer = SeriesLayer(self)
            self.series_layers.append(layer)
            self.add_widget(layer)
        for _ in range(-difference):
            self.remove_widget(self.series_layers.pop())
        for layer, series in zip(self.series_layers, self.series):
            layer.series = series

    def _refresh_chart(self) -> None:
        self.chart.parameters = list(self.parameters)
        self.chart.series = list(self.series)
        self.chart.appearance = self.appearance

    def _do_redraw(self, *_: Any) -> None:
        self._frame_canvas.clear()
        if self.sequencer.state is SequencerState.ANIMATING:
            _logger.debug("Redraw during animation, snapping series to their targets")
            self.sequencer.cancel()

        self._refresh_chart()
        # Guard: Skip if widget not properly sized
        if self.width <= 0 or self.height <= 0:
            self.chart_layout = None
            return

        surface = KivySurface(0, self.height)
        try:
            self.chart_layout = self.chart.layout(Rect(0, 0, self.width, self.height), surface.measure_text)
            with self._frame_canvas:
                self.chart.draw_background(surface, self.chart_layout)
        except Exception:
            _logger.exception("Failed to draw radar graph")
            self._frame_canvas.clear()
            self.chart_layout = None
            return

        for layer, series_layout in zip(self.series_layers, self.chart_layout.series):
            layer.opacity = 1
            layer.points = flatten(series_layout.vertices)
            layer.redraw()

    def _start_animation(self, animation: SeriesAnimation) -> None:
        if self.sequencer.state is SequencerState.ANIMATING:
            _logger.debug("Animation request ignored, %s still running", animation.kind.value)
            return
        # Lay out now so that the pending redraw cannot cancel the animation
        self._redraw_trigger.cancel()
        self._do_redraw()
        if self.chart_layout is None:
            return
        self.sequencer.start(animation, self.chart_layout)
