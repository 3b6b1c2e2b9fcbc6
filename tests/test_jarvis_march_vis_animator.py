"""
Tests for the step-by-step trace and its matplotlib animation.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import matplotlib.animation as animation
import pytest

from convex_hull.jarvis_march import gift_wrapping
from convex_hull.jarvis_march_vis_animator import (
    HullAnimator,
    build_animation,
    jarvis_march_trace,
)


S = [(2, 2), (4, 1), (3, 4), (5, 3), (1, 5), (6, 5), (4, 6), (2, 7), (5, 0)]
SCENARIO = [(0, 3), (2, 2), (1, 1), (2, 1), (3, 0), (0, 0), (3, 3)]


class TestTrace:

    @pytest.mark.parametrize("points", [
        S,
        SCENARIO,
        [(0, 0), (1, 1), (2, 2)],
        [(4, 2), (1, 2), (3, 2), (0, 2), (3, 1), (2, 1)],
        [(2, 1), (2, 2), (2, 4), (1, 1), (1, 3), (1, 0)],
        [(0, 0), (4, 0), (4, 4), (0, 0)],
    ])
    def test_final_frame_matches_gift_wrapping(self, points):
        frames = list(jarvis_march_trace(points))
        last = frames[-1]
        assert last['hull_points'] == gift_wrapping(points)
        assert last['final_hull_path'] == last['hull_points'] + [last['hull_points'][0]]
        assert last['status'].startswith("Hull complete!")

    def test_too_few_points_single_frame(self):
        frames = list(jarvis_march_trace([(0, 0), (5, 5)]))
        assert len(frames) == 1
        assert frames[0]['hull_points'] == []
        assert frames[0]['current_pivot'] is None

    def test_no_points(self):
        frames = list(jarvis_march_trace([]))
        assert frames[0]['status'] == "No points."

    def test_hull_grows_one_vertex_at_a_time(self):
        sizes = [len(f['hull_points']) for f in jarvis_march_trace(SCENARIO)]
        assert sizes[0] == 1
        assert all(b - a in (0, 1) for a, b in zip(sizes, sizes[1:]))


class TestAnimation:

    def teardown_method(self):
        plt.close('all')

    def test_build_animation(self):
        fig, ani = build_animation(SCENARIO, interval=10)
        assert isinstance(ani, animation.FuncAnimation)
        assert fig.axes

    def test_update_draws_closed_final_hull(self):
        frames = list(jarvis_march_trace(SCENARIO))
        animator = HullAnimator(frames[0]['all_points'])
        animator.init()
        animator.update(frames[-1])

        xs = list(animator.hull_line_plot.get_xdata())
        ys = list(animator.hull_line_plot.get_ydata())
        assert list(zip(xs, ys)) == [(0, 3), (0, 0), (3, 0), (3, 3), (0, 3)]
        assert animator.status_text.get_text() == "Hull complete! Found 4 points."

    def test_update_clears_markers_without_pivot(self):
        frame = list(jarvis_march_trace([(1, 1)]))[0]
        animator = HullAnimator(frame['all_points'])
        animator.init()
        animator.update(frame)
        assert len(animator.pivot_marker.get_xdata()) == 0
        assert len(animator.candidate_line_plot.get_xdata()) == 0
