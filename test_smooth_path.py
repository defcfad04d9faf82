"""Tests for quadratic live-path smoothing."""

import numpy as np
import pytest

from gesture_overlay.gestures.gesture import GesturePoint
from gesture_overlay.utils.smooth_path import PathSmoother, SmoothPath, build_smoothed_path


def test_small_moves_are_coalesced():
    smoother = PathSmoother(tolerance=4)
    path = smoother.start(0, 0)
    
    assert smoother.add(3, 3) is False
    assert smoother.add(-3.9, 3.9) is False
    assert path.quad_count == 0
    assert (smoother.anchor_x, smoother.anchor_y) == (0, 0)


@pytest.mark.parametrize("x, y", [(4, 0), (0, 4), (-4, 0), (0, -4), (10, 10)])
def test_tolerance_reached_on_either_axis_extends(x, y):
    smoother = PathSmoother(tolerance=4)
    path = smoother.start(0, 0)
    
    assert smoother.add(x, y) is True
    assert path.segments[-1] == ('quad', (0.0, 0.0, x / 2, y / 2))
    assert (smoother.anchor_x, smoother.anchor_y) == (x, y)


def test_anchor_follows_accepted_samples_only():
    smoother = PathSmoother(tolerance=4)
    path = smoother.start(10, 10)
    
    smoother.add(20, 10)
    smoother.add(22, 12)
    smoother.add(30, 10)
    
    assert path.quad_count == 2
    assert path.segments[2] == ('quad', (20.0, 10.0, 25.0, 10.0))


def test_add_without_start_is_ignored():
    smoother = PathSmoother()
    assert smoother.add(50, 50) is False


def test_polylines_sample_quadratics():
    path = SmoothPath()
    path.move_to(0, 0)
    path.quad_to(0, 0, 10, 0)
    path.quad_to(20, 0, 20, 10)
    
    polylines = path.polylines(steps=4)
    
    assert len(polylines) == 1
    line = polylines[0]
    assert line.shape == (9, 2)
    np.testing.assert_allclose(line[0], [0, 0])
    np.testing.assert_allclose(line[4], [10, 0])
    np.testing.assert_allclose(line[-1], [20, 10])


def test_move_only_path_is_a_single_vertex():
    path = SmoothPath()
    path.move_to(5, 5)
    
    polylines = path.polylines()
    assert len(polylines) == 1
    assert polylines[0].shape == (1, 2)


def test_build_smoothed_path_matches_incremental_capture():
    points = [GesturePoint(x, y, i) for i, (x, y) in enumerate([(0, 0), (1, 1), (8, 0), (9, 1), (20, 0)])]
    
    path = build_smoothed_path(points, tolerance=4)
    
    assert path.quad_count == 2
    assert build_smoothed_path([]).is_empty
