"""Series reveal animations.

NO Kivy imports - the host supplies a PathAnimator (see
radargraph.gui.animator for the Kivy one).

Animation kinds:
- SCALE_ALL: every series grows from the center to its target at once.
- SCALE_ONE_BY_ONE: series grow one after another in list order; the others
  stay hidden until their turn.
- PARAMETER_BY_PARAMETER: every series reveals one vertex per step, in axis
  order, each step lasting `duration`.

The sequencer keeps one LayerAnimationState per series, indexed like
ChartLayout.series. Completion callbacks carry the generation they were
started in; a callback from an older generation (after cancel() or a new
start()) does nothing.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Protocol, Sequence, Tuple

from radargraph.core.layout import ChartLayout
from radargraph.core.models import Point

_logger = logging.getLogger(__name__)


class AnimationKind(Enum):
    NONE = "none"
    SCALE_ALL = "scale_all"
    SCALE_ONE_BY_ONE = "scale_one_by_one"
    PARAMETER_BY_PARAMETER = "parameter_by_parameter"


@dataclass(frozen=True)
class SeriesAnimation:
    kind: AnimationKind = AnimationKind.NONE
    duration: float = 0.0

    @classmethod
    def scale_all(cls, duration: float) -> "SeriesAnimation":
        return cls(AnimationKind.SCALE_ALL, duration)

    @classmethod
    def scale_one_by_one(cls, duration: float) -> "SeriesAnimation":
        return cls(AnimationKind.SCALE_ONE_BY_ONE, duration)

    @classmethod
    def parameter_by_parameter(cls, duration: float) -> "SeriesAnimation":
        return cls(AnimationKind.PARAMETER_BY_PARAMETER, duration)


NO_ANIMATION = SeriesAnimation()


class SequencerState(Enum):
    IDLE = "idle"
    ANIMATING = "animating"


@dataclass
class LayerAnimationState:
    """Animation bookkeeping for one series layer."""

    animation: SeriesAnimation = NO_ANIMATION
    last_animated_vertex_index: int = 0
    hidden: bool = False
    finished: bool = True
    target: Tuple[Point, ...] = ()


class PathAnimator(Protocol):
    """Host animation primitive.

    animate_path must interpolate the layer's path from `from_path` to
    `to_path` over `duration` seconds and call `on_complete` once at the end,
    on the same thread that started it.
    """

    def animate_path(
        self,
        layer_index: int,
        from_path: Sequence[Point],
        to_path: Sequence[Point],
        duration: float,
        on_complete: Callable[[], None],
    ) -> None: ...

    def set_layer_path(self, layer_index: int, path: Sequence[Point]) -> None: ...

    def set_layer_hidden(self, layer_index: int, hidden: bool) -> None: ...


def collapsed_path(center: Point, count: int) -> Tuple[Point, ...]:
    """All vertices at the chart center."""
    return tuple(center for _ in range(count))


def partial_path(center: Point, targets: Sequence[Point], revealed: int) -> Tuple[Point, ...]:
    """Vertices 0..revealed-1 at their target, the rest at the center."""
    return tuple(target if i < revealed else center for i, target in enumerate(targets))


class AnimationSequencer:
    def __init__(self, animator: PathAnimator) -> None:
        self._animator = animator
        self._layers: List[LayerAnimationState] = []
        self._center = Point(0.0, 0.0)
        self._generation = 0
        # Series currently scaling in SCALE_ONE_BY_ONE
        self._cursor = 0

    @property
    def state(self) -> SequencerState:
        if any(not layer.finished and layer.animation.kind is not AnimationKind.NONE for layer in self._layers):
            return SequencerState.ANIMATING
        return SequencerState.IDLE

    @property
    def layers(self) -> Tuple[LayerAnimationState, ...]:
        return tuple(self._layers)

    @property
    def cursor(self) -> int:
        return self._cursor

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def start(self, animation: SeriesAnimation, layout: ChartLayout) -> bool:
        """Start animating every series of `layout`.

        Returns False when nothing was started: NONE (treated as cancel),
        no series, or an animation already running (the request is ignored).
        """
        if animation.kind is AnimationKind.NONE:
            self.cancel()
            return False
        if self.state is SequencerState.ANIMATING:
            _logger.debug("Animation %s ignored: another animation is running", animation.kind.value)
            return False
        if not layout.series:
            return False

        self._generation += 1
        generation = self._generation
        self._center = layout.center
        self._cursor = 0
        self._layers = [
            LayerAnimationState(animation=animation, finished=False, target=tuple(s.vertices)) for s in layout.series
        ]
        _logger.debug(
            "Starting %s over %d series (duration %.2fs)", animation.kind.value, len(self._layers), animation.duration
        )

        if animation.kind is AnimationKind.SCALE_ALL:
            for index in range(len(self._layers)):
                self._start_scale(index, generation)

        elif animation.kind is AnimationKind.SCALE_ONE_BY_ONE:
            for index in range(1, len(self._layers)):
                layer = self._layers[index]
                layer.hidden = True
                self._animator.set_layer_hidden(index, True)
                self._animator.set_layer_path(index, collapsed_path(self._center, len(layer.target)))
            self._start_scale(0, generation)

        elif animation.kind is AnimationKind.PARAMETER_BY_PARAMETER:
            for index in range(len(self._layers)):
                self._start_parameter_step(index, generation)

        return True

    def cancel(self) -> None:
        """Stop chaining and snap every layer to its target path.

        Completions already queued by the host still fire once but do nothing.
        """
        self._generation += 1
        for index, layer in enumerate(self._layers):
            if layer.finished and layer.animation.kind is AnimationKind.NONE:
                continue
            layer.animation = NO_ANIMATION
            layer.finished = True
            if layer.hidden:
                layer.hidden = False
                self._animator.set_layer_hidden(index, False)
            self._animator.set_layer_path(index, layer.target)
        _logger.debug("Animation cancelled")

    # ------------------------------------------------------------------
    # Scale animations
    # ------------------------------------------------------------------

    def _start_scale(self, index: int, generation: int) -> None:
        layer = self._layers[index]
        if not layer.target:
            self._on_scale_complete(index, generation)
            return
        self._animator.animate_path(
            index,
            collapsed_path(self._center, len(layer.target)),
            layer.target,
            layer.animation.duration,
            lambda: self._on_scale_complete(index, generation),
        )

    def _on_scale_complete(self, index: int, generation: int) -> None:
        if self._is_stale(index, generation):
            return
        layer = self._layers[index]
        layer.finished = True

        if layer.animation.kind is AnimationKind.SCALE_ONE_BY_ONE:
            next_index = index + 1
            if next_index < len(self._layers):
                self._cursor = next_index
                next_layer = self._layers[next_index]
                next_layer.hidden = False
                self._animator.set_layer_hidden(next_index, False)
                self._start_scale(next_index, generation)
                return

        self._finish_if_done()

    # ------------------------------------------------------------------
    # Parameter by parameter
    # ------------------------------------------------------------------

    def _start_parameter_step(self, index: int, generation: int) -> None:
        layer = self._layers[index]
        step = layer.last_animated_vertex_index
        if step >= len(layer.target):
            layer.finished = True
            self._finish_if_done()
            return
        self._animator.animate_path(
            index,
            partial_path(self._center, layer.target, step),
            partial_path(self._center, layer.target, step + 1),
            layer.animation.duration,
            lambda: self._on_parameter_step_complete(index, generation),
        )

    def _on_parameter_step_complete(self, index: int, generation: int) -> None:
        if self._is_stale(index, generation):
            return
        self._layers[index].last_animated_vertex_index += 1
        self._start_parameter_step(index, generation)

    # ------------------------------------------------------------------
    # Bookkeeping
    # ------------------------------------------------------------------

    def _is_stale(self, index: int, generation: int) -> bool:
        if generation != self._generation or index >= len(self._layers):
            return True
        layer = self._layers[index]
        return layer.finished or layer.animation.kind is AnimationKind.NONE

    def _finish_if_done(self) -> None:
        if all(layer.finished for layer in self._layers):
            for layer in self._layers:
                layer.animation = NO_ANIMATION
            _logger.debug("Animation finished")
