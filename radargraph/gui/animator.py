"""PathAnimator implementation using kivy.animation.Animation."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

from kivy.animation import Animation
from kivy.clock import Clock

from radargraph.core.geometry import flatten
from radargraph.core.models import Point

if TYPE_CHECKING:
    from radargraph.gui.radar_graph import RadarGraphWidget

EASING = "in_out_quad"


class KivyPathAnimator:
    """Animates the `points` property of the graph's series layers."""

    def __init__(self, graph: "RadarGraphWidget") -> None:
        self._graph = graph

    def animate_path(
        self,
        layer_index: int,
        from_path: Sequence[Point],
        to_path: Sequence[Point],
        duration: float,
        on_complete: Callable[[], None],
    ) -> None:
        layer = self._graph.series_layers[layer_index]
        Animation.cancel_all(layer, "points")
        layer.points = flatten(from_path)

        if duration <= 0:
            layer.points = flatten(to_path)
            # Never chain synchronously from inside the sequencer
            Clock.schedule_once(lambda *_: on_complete(), 0)
            return

        anim = Animation(points=flatten(to_path), duration=duration, t=EASING)
        anim.bind(on_complete=lambda *_: on_complete())
        anim.start(layer)

    def set_layer_path(self, layer_index: int, path: Sequence[Point]) -> None:
        layer = self._graph.series_layers[layer_index]
        Animation.cancel_all(layer, "points")
        layer.points = flatten(path)

    def set_layer_hidden(self, layer_index: int, hidden: bool) -> None:
        self._graph.series_layers[layer_index].opacity = 0 if hidden else 1
