"""Tests for AnimationSequencer against a fake path animator.

Time is driven by FakePathAnimator.complete_next() / run_all().
"""

import pytest

from radargraph.core.animation import (
    NO_ANIMATION,
    AnimationKind,
    AnimationSequencer,
    SeriesAnimation,
    SequencerState,
    collapsed_path,
    partial_path,
)
from radargraph.core.layout import compute_layout
from radargraph.core.models import Point, Series
from tests.fakes import measure_text

DURATION = 0.4


@pytest.fixture
def layout(parameters, sample_series, centered_bounds, fixed_appearance):
    return compute_layout(parameters, sample_series, fixed_appearance, centered_bounds, measure_text)


@pytest.fixture
def sequencer(animator):
    return AnimationSequencer(animator)


def _revealed(path, center):
    return sum(1 for p in path if p != center)


class TestPathHelpers:
    def test_collapsed_path(self):
        assert collapsed_path(Point(1, 2), 3) == (Point(1, 2),) * 3

    def test_partial_path(self):
        targets = (Point(0, -1), Point(1, 0), Point(0, 1))
        assert partial_path(Point(0, 0), targets, 2) == (Point(0, -1), Point(1, 0), Point(0, 0))

    def test_partial_path_none_revealed(self):
        targets = (Point(0, -1), Point(1, 0))
        assert partial_path(Point(0, 0), targets, 0) == (Point(0, 0), Point(0, 0))


class TestSeriesAnimation:
    def test_constructors(self):
        assert SeriesAnimation.scale_all(1.0) == SeriesAnimation(AnimationKind.SCALE_ALL, 1.0)
        assert SeriesAnimation.scale_one_by_one(1.0).kind is AnimationKind.SCALE_ONE_BY_ONE
        assert SeriesAnimation.parameter_by_parameter(1.0).kind is AnimationKind.PARAMETER_BY_PARAMETER

    def test_default_is_none(self):
        assert NO_ANIMATION.kind is AnimationKind.NONE


class TestScaleAll:
    def test_all_layers_start_together(self, sequencer, animator, layout):
        assert sequencer.start(SeriesAnimation.scale_all(DURATION), layout)
        assert [call.layer_index for call in animator.calls] == [0, 1, 2]
        for call, series_layout in zip(animator.calls, layout.series):
            assert call.from_path == collapsed_path(layout.center, 5)
            assert call.to_path == series_layout.vertices
            assert call.duration == DURATION
        assert sequencer.state is SequencerState.ANIMATING

    def test_idle_after_all_complete(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.scale_all(DURATION), layout)
        animator.complete_next()
        animator.complete_next()
        assert sequencer.state is SequencerState.ANIMATING
        animator.complete_next()
        assert sequencer.state is SequencerState.IDLE
        assert all(layer.animation == NO_ANIMATION for layer in sequencer.layers)
        assert len(animator.calls) == 3

    def test_final_paths_are_targets(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.scale_all(DURATION), layout)
        animator.run_all()
        for i, series_layout in enumerate(layout.series):
            assert animator.paths[i] == series_layout.vertices


class TestScaleOneByOne:
    def test_only_first_layer_animates(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.scale_one_by_one(DURATION), layout)
        assert [call.layer_index for call in animator.calls] == [0]
        assert animator.hidden == {1: True, 2: True}
        assert animator.paths[1] == collapsed_path(layout.center, 5)
        assert sequencer.cursor == 0

    def test_chains_in_order(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.scale_one_by_one(DURATION), layout)

        animator.complete_next()
        assert [call.layer_index for call in animator.calls] == [0, 1]
        assert animator.hidden[1] is False
        assert animator.hidden[2] is True
        assert sequencer.cursor == 1
        assert sequencer.state is SequencerState.ANIMATING

        animator.complete_next()
        assert [call.layer_index for call in animator.calls] == [0, 1, 2]
        assert animator.hidden[2] is False

        animator.complete_next()
        assert sequencer.state is SequencerState.IDLE
        assert animator.pending_count == 0

    def test_each_layer_grows_from_center(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.scale_one_by_one(DURATION), layout)
        animator.run_all()
        for call in animator.calls:
            assert call.from_path == collapsed_path(layout.center, 5)
            assert call.to_path == layout.series[call.layer_index].vertices


class TestParameterByParameter:
    def test_exactly_n_steps_per_series(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.parameter_by_parameter(DURATION), layout)
        completed = animator.run_all()
        assert completed == 5 * 3
        for index in range(3):
            assert len([c for c in animator.calls if c.layer_index == index]) == 5
        assert sequencer.state is SequencerState.IDLE

    def test_step_k_reveals_k_plus_one_vertices(self, animator, parameters, centered_bounds, fixed_appearance):
        series = [Series(stroke_color=(0, 0, 1, 1), percentage_values=[0.9, 0.5, 0.6, 0.2, 0.9])]
        layout = compute_layout(parameters, series, fixed_appearance, centered_bounds, measure_text)
        sequencer = AnimationSequencer(animator)
        sequencer.start(SeriesAnimation.parameter_by_parameter(DURATION), layout)
        animator.run_all()

        assert len(animator.calls) == 5
        for k, call in enumerate(animator.calls):
            assert _revealed(call.from_path, layout.center) == k
            assert _revealed(call.to_path, layout.center) == k + 1
            assert call.to_path[: k + 1] == layout.series[0].vertices[: k + 1]
            assert call.duration == DURATION
        assert animator.paths[0] == layout.series[0].vertices
        assert sequencer.layers[0].last_animated_vertex_index == 5

    def test_series_advance_together(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.parameter_by_parameter(DURATION), layout)
        assert [call.layer_index for call in animator.calls] == [0, 1, 2]
        animator.complete_next()
        assert sequencer.layers[0].last_animated_vertex_index == 1
        assert sequencer.layers[1].last_animated_vertex_index == 0


class TestRetrigger:
    def test_ignored_while_animating(self, sequencer, animator, layout):
        assert sequencer.start(SeriesAnimation.scale_all(DURATION), layout)
        assert not sequencer.start(SeriesAnimation.parameter_by_parameter(DURATION), layout)
        assert len(animator.calls) == 3
        animator.run_all()
        assert len(animator.calls) == 3

    def test_restart_after_finish(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.parameter_by_parameter(DURATION), layout)
        animator.run_all()
        assert sequencer.start(SeriesAnimation.parameter_by_parameter(DURATION), layout)
        assert all(layer.last_animated_vertex_index == 0 for layer in sequencer.layers)
        assert animator.run_all() == 15

    def test_none_is_not_started(self, sequencer, animator, layout):
        assert not sequencer.start(SeriesAnimation(AnimationKind.NONE, DURATION), layout)
        assert animator.calls == []

    def test_no_series(self, sequencer, animator, parameters, centered_bounds, fixed_appearance):
        empty = compute_layout(parameters, [], fixed_appearance, centered_bounds, measure_text)
        assert not sequencer.start(SeriesAnimation.scale_all(DURATION), empty)
        assert sequencer.state is SequencerState.IDLE


class TestCancel:
    def test_stale_completions_do_nothing(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.parameter_by_parameter(DURATION), layout)
        sequencer.cancel()
        assert sequencer.state is SequencerState.IDLE
        animator.run_all()
        # Only the three first steps were ever started
        assert len(animator.calls) == 3

    def test_snaps_to_targets(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.scale_one_by_one(DURATION), layout)
        sequencer.cancel()
        for i, series_layout in enumerate(layout.series):
            assert animator.paths[i] == series_layout.vertices
        assert animator.hidden == {1: False, 2: False}

    def test_start_none_cancels(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.scale_all(DURATION), layout)
        sequencer.start(NO_ANIMATION, layout)
        assert sequencer.state is SequencerState.IDLE

    def test_new_start_after_cancel_ignores_old_callbacks(self, sequencer, animator, layout):
        sequencer.start(SeriesAnimation.scale_one_by_one(DURATION), layout)
        sequencer.cancel()
        sequencer.start(SeriesAnimation.scale_one_by_one(DURATION), layout)
        # The pending completion from the first run must not advance the second
        animator.complete_next()
        assert sequencer.cursor == 0
        assert [call.layer_index for call in animator.calls] == [0, 0]

    def test_cancel_when_idle(self, sequencer, animator):
        sequencer.cancel()
        assert sequencer.state is SequencerState.IDLE
        assert animator.paths == {}


class TestDegenerateLayouts:
    def test_series_without_vertices_finish_immediately(self, sequencer, animator, sample_series, centered_bounds,
                                                        fixed_appearance):
        layout = compute_layout([], sample_series, fixed_appearance, centered_bounds, measure_text)
        assert sequencer.start(SeriesAnimation.scale_all(DURATION), layout)
        assert animator.calls == []
        assert sequencer.state is SequencerState.IDLE

    def test_one_by_one_without_vertices(self, sequencer, animator, sample_series, centered_bounds,
                                         fixed_appearance):
        layout = compute_layout([], sample_series, fixed_appearance, centered_bounds, measure_text)
        sequencer.start(SeriesAnimation.scale_one_by_one(DURATION), layout)
        assert animator.calls == []
        assert sequencer.state is SequencerState.IDLE
