"""
Tests for viewport clipping (auto-fit).

Verifies:
- Corner order and the inside test (both windings, epsilon on edges)
- Axis-aligned auto-fit: endpoints on the parabola and on the frame
- Rotated auto-fit still lands on the frame boundary
- Empty clips report NoVisibleSegmentError with diagnostics
"""
import math
import pytest
from models.errors import NoVisibleSegmentError
from models.geometry import Parabola, Viewport, ExplicitRange
from models.point import Point
from services.viewport_clipping import viewport_corners, is_inside, clip_to_viewport, fit_range
from utils.parabola_math import evaluate


VIEWPORT = Viewport(200, 200)


def _on_frame(p, viewport, tol=1e-6):
    """Device point lies on the frame boundary"""
    within = -tol <= p.x <= viewport.width + tol and -tol <= p.y <= viewport.height + tol
    distance = min(abs(p.x), abs(p.x - viewport.width), abs(p.y), abs(p.y - viewport.height))
    return within and distance < tol


# ══════════════════════════════════════════════════════════════════════════
# Corners / Inside Test
# ══════════════════════════════════════════════════════════════════════════

class TestCorners:

    def test_cyclic_order(self):
        assert viewport_corners(Viewport(40, 30)) == (
            Point(0, 0), Point(40, 0), Point(40, 30), Point(0, 30)
        )


class TestIsInside:

    SQUARE = (Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10))

    def test_center(self):
        assert is_inside(Point(5, 5), self.SQUARE)

    def test_outside(self):
        assert not is_inside(Point(11, 5), self.SQUARE)
        assert not is_inside(Point(5, -1), self.SQUARE)

    def test_on_edge(self):
        assert is_inside(Point(0, 5), self.SQUARE)
        assert is_inside(Point(10, 10), self.SQUARE)

    def test_just_outside_within_epsilon(self):
        assert is_inside(Point(10.00005, 5), self.SQUARE)

    def test_just_outside_beyond_epsilon(self):
        assert not is_inside(Point(10.01, 5), self.SQUARE)

    def test_reversed_winding(self):
        reversed_square = tuple(reversed(self.SQUARE))
        assert is_inside(Point(5, 5), reversed_square)
        assert not is_inside(Point(-5, 5), reversed_square)

    def test_rotated_quad(self):
        diamond = (Point(0, -5), Point(5, 0), Point(0, 5), Point(-5, 0))
        assert is_inside(Point(1, 1), diamond)
        assert not is_inside(Point(4, 4), diamond)


# ══════════════════════════════════════════════════════════════════════════
# Auto-fit
# ══════════════════════════════════════════════════════════════════════════

class TestAxisAlignedFit:
    """a=50, focus (100, 100), 200x200: curve leaves through the side edges"""

    def test_candidates_and_visible(self, centered_parabola):
        clip = clip_to_viewport(centered_parabola, VIEWPORT)
        # right + left (vertical edges) + two bottom roots outside the frame
        assert len(clip.candidates) == 4
        assert len(clip.visible) == 2

    def test_start_and_end(self, centered_parabola):
        clip = clip_to_viewport(centered_parabola, VIEWPORT)
        assert clip.start.x == pytest.approx(-100)
        assert clip.start.y == pytest.approx(50)
        assert clip.end.x == pytest.approx(100)
        assert clip.end.y == pytest.approx(50)

    def test_endpoints_on_parabola(self, centered_parabola):
        clip = clip_to_viewport(centered_parabola, VIEWPORT)
        for p in (clip.start, clip.end):
            assert p.y == pytest.approx(evaluate(p.x, centered_parabola.focal_length))

    def test_endpoints_map_to_frame(self, centered_parabola):
        clip = clip_to_viewport(centered_parabola, VIEWPORT)
        for p in (clip.start, clip.end):
            assert _on_frame(centered_parabola.to_device(p), VIEWPORT)

    def test_canonical_corners(self, centered_parabola):
        clip = clip_to_viewport(centered_parabola, VIEWPORT)
        expected = [(-100, -50), (100, -50), (100, 150), (-100, 150)]
        for corner, (x, y) in zip(clip.corners, expected):
            assert corner.x == pytest.approx(x)
            assert corner.y == pytest.approx(y)

    def test_fit_range(self, centered_parabola):
        fitted = fit_range(centered_parabola, VIEWPORT)
        assert isinstance(fitted, ExplicitRange)
        assert fitted.start == pytest.approx(-100)
        assert fitted.end == pytest.approx(100)


class TestRotatedFit:

    @pytest.mark.parametrize("rotation", [math.pi / 2, math.pi / 5, -2.0, math.pi])
    def test_endpoints_on_frame_and_parabola(self, rotation):
        parabola = Parabola(100, 100, 50, rotation)
        clip = clip_to_viewport(parabola, VIEWPORT)
        assert not clip.is_empty
        for p in (clip.start, clip.end):
            assert p.y == pytest.approx(evaluate(p.x, parabola.focal_length))
            assert _on_frame(parabola.to_device(p), VIEWPORT)

    def test_start_left_of_end(self):
        clip = clip_to_viewport(Parabola(100, 100, 50, 0.4), VIEWPORT)
        assert clip.start.x < clip.end.x

    def test_negative_focal_length(self):
        parabola = Parabola(100, 100, -50)
        clip = clip_to_viewport(parabola, VIEWPORT)
        assert clip.start.x == pytest.approx(-100)
        assert clip.end.x == pytest.approx(100)


class TestEmptyClip:

    def test_is_empty(self, offscreen_parabola):
        clip = clip_to_viewport(offscreen_parabola, VIEWPORT)
        assert clip.is_empty
        assert clip.candidates  # curve meets the edge lines, just not the frame

    def test_start_raises(self, offscreen_parabola):
        clip = clip_to_viewport(offscreen_parabola, VIEWPORT)
        with pytest.raises(NoVisibleSegmentError):
            clip.start
        with pytest.raises(NoVisibleSegmentError):
            clip.end

    def test_fit_range_raises_with_clip(self, offscreen_parabola):
        with pytest.raises(NoVisibleSegmentError) as excinfo:
            fit_range(offscreen_parabola, VIEWPORT)
        assert excinfo.value.clip is not None
        assert excinfo.value.clip.is_empty

    def test_grazing_span_within_epsilon(self):
        # Vertex 1e-9 below the top edge: two distinct hits under 0.001 apart
        parabola = Parabola(100, -50 + 1e-9, -50)
        clip = clip_to_viewport(parabola, VIEWPORT)
        assert len(clip.visible) == 2
        assert clip.start.x != clip.end.x
        with pytest.raises(NoVisibleSegmentError) as excinfo:
            fit_range(parabola, VIEWPORT)
        assert excinfo.value.clip is not None

    def test_trace_receives_clip(self, centered_parabola, offscreen_parabola):
        seen = {}
        fit_range(centered_parabola, VIEWPORT, trace=seen.__setitem__)
        assert len(seen['clip'].visible) == 2
        with pytest.raises(NoVisibleSegmentError):
            fit_range(offscreen_parabola, VIEWPORT, trace=seen.__setitem__)
        assert seen['clip'].is_empty

    def test_not_an_arithmetic_error(self, offscreen_parabola):
        with pytest.raises(NoVisibleSegmentError):
            fit_range(offscreen_parabola, VIEWPORT)
        assert not issubclass(NoVisibleSegmentError, ArithmeticError)
        assert not issubclass(NoVisibleSegmentError, ValueError)
