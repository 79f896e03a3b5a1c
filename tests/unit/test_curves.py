"""Tests for cubic to quadratic approximation."""

import pytest

from iconfont.core.curves import (
    CurveApproximator,
    approximate_cubic,
    evaluate_cubic,
    fit_cubic,
    midpoint_error,
    split_cubic,
    trial_quadratic,
)
from iconfont.domain import CommandType, CubicBezier, PathCommand, Point

# Control points about ten times further out than the chord is long
STEEP = CubicBezier(Point(0, 0), Point(0, 1000), Point(100, 1000), Point(100, 0))


class TestSplitCubic:
    """Tests for De Casteljau subdivision."""

    def test_halves_meet_on_curve(self) -> None:
        left, right = split_cubic(STEEP)
        mid = evaluate_cubic(STEEP, 0.5)

        assert left.p0 == STEEP.p0
        assert right.p3 == STEEP.p3
        assert left.p3 == right.p0
        assert left.p3.x == pytest.approx(mid.x)
        assert left.p3.y == pytest.approx(mid.y)


class TestTrialQuadratic:
    """Tests for the single-quadratic candidate."""

    def test_straight_line_is_exact(self) -> None:
        """Evenly spaced collinear controls give zero midpoint error."""
        line = CubicBezier(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))
        quad = trial_quadratic(line)

        assert quad.p1 == Point(1.5, 0)
        assert midpoint_error(line, quad) == 0.0
        assert approximate_cubic(line) == [quad]


class TestFitCubic:
    """Tests for recursive fitting."""

    def test_steep_curve_needs_several_quadratics(self) -> None:
        fits = fit_cubic(STEEP, tolerance=1.0, max_depth=16)
        assert len(fits) > 1

    def test_fits_within_tolerance_or_depth_limit(self) -> None:
        fits = fit_cubic(STEEP, tolerance=1.0, max_depth=6)
        for fit in fits:
            assert fit.depth <= 6
            assert fit.error < 1.0 or fit.depth == 6

    def test_max_depth_zero_gives_single_segment(self) -> None:
        fits = fit_cubic(STEEP, tolerance=0.001, max_depth=0)
        assert len(fits) == 1
        assert fits[0].depth == 0

    def test_segments_chain(self) -> None:
        """Each quadratic starts where the previous one ends."""
        quads = approximate_cubic(STEEP, tolerance=0.5)

        assert quads[0].p0 == STEEP.p0
        assert quads[-1].p2 == STEEP.p3
        for prev, nxt in zip(quads, quads[1:]):
            assert prev.p2 == nxt.p0

    def test_tighter_tolerance_adds_segments(self) -> None:
        coarse = approximate_cubic(STEEP, tolerance=10.0)
        fine = approximate_cubic(STEEP, tolerance=0.1)
        assert len(fine) > len(coarse)

    def test_cusp_terminates(self) -> None:
        """A cubic whose controls cross still finishes at the depth limit."""
        cusp = CubicBezier(Point(0, 0), Point(100, 100), Point(0, 100), Point(100, 0))
        fits = fit_cubic(cusp, tolerance=1e-9, max_depth=4)
        assert len(fits) <= 2**4


class TestCurveApproximator:
    """Tests for command-level conversion."""

    def test_to_quad_commands(self) -> None:
        approximator = CurveApproximator(tolerance=1.0, max_depth=16)
        command = PathCommand.cubic_to(Point(0, 1000), Point(100, 1000), Point(100, 0))

        result = approximator.to_quad_commands(Point(0, 0), command)

        assert len(result) > 1
        assert all(cmd.kind == CommandType.QUAD_TO for cmd in result)
        assert result[-1].end_point == Point(100, 0)
