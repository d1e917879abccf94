"""Parabola renderer service.

Turns a Parabola plus a drawing range into one quadratic Bézier segment and
emits it to a drawing surface:

1. Resolve canonical endpoints (explicit offsets, or auto-fit to viewport)
2. Control point = intersection of the tangents at the endpoints
3. Rotate about the focus, translate to the focus position
4. begin_path -> move_to -> quadratic_curve_to -> stroke

Stages are reported to an optional trace(stage, data) callback and logged at
DEBUG level. The stage names are 'range', 'clip', 'canonical' and 'device'.
"""

import logging
from contextlib import nullcontext
from functools import partial

from constants import EPSILON
from models.geometry import (
    AUTO_FIT, AutoFit, BezierCurve, ExplicitRange, Parabola, Viewport, resolve_range
)
from services.viewport_clipping import fit_range
from utils.parabola_math import point_at, tangent_intersection

logger = logging.getLogger(__name__)


def _report(trace, stage, data):
    logger.debug("%s: %s", stage, data)
    if trace is not None:
        trace(stage, data)


def _canonical_endpoints(parabola, draw_range, viewport, epsilon, trace):
    """Start and end point on the canonical parabola."""
    if isinstance(draw_range, AutoFit):
        draw_range = fit_range(parabola, viewport, epsilon, partial(_report, trace))

    if isinstance(draw_range, ExplicitRange):
        a = parabola.focal_length
        return point_at(draw_range.start, a), point_at(draw_range.end, a)

    raise TypeError(f"Unsupported drawing range: {draw_range!r}")


def compute_bezier(parabola: Parabola, draw_range=AUTO_FIT, viewport: Viewport = None,
                   epsilon: float = EPSILON, trace=None) -> BezierCurve:
    """Compute the device-space Bézier segment for a parabola.

    Args:
        parabola: Parabola to draw
        draw_range: ExplicitRange or AUTO_FIT
        viewport: Device frame (required for AUTO_FIT)
        epsilon: Solver/clip tolerance
        trace: Optional callable(stage, data) receiving intermediate results

    Returns:
        BezierCurve in device coordinates

    Raises:
        PreconditionError: Zero-width explicit range
        NoVisibleSegmentError: Auto-fit found nothing to draw
    """
    if isinstance(draw_range, AutoFit) and viewport is None:
        raise ValueError("Auto-fit needs a viewport")
    _report(trace, 'range', draw_range)

    start, end = _canonical_endpoints(parabola, draw_range, viewport, epsilon, trace)
    control = tangent_intersection(start, end, parabola.focal_length)

    canonical = BezierCurve(start, control, end)
    _report(trace, 'canonical', canonical)

    # Same rotate-then-translate applied to every point
    device = canonical.map(parabola.to_device)
    _report(trace, 'device', device)
    return device


def emit(surface, curve: BezierCurve):
    """Issue the drawing calls for one curve.

    Holds the surface's draw_lock, when it has one, so calls from different
    threads never interleave on the same surface.
    """
    lock = getattr(surface, 'draw_lock', None)
    with lock if lock is not None else nullcontext():
        surface.begin_path()
        surface.move_to(curve.start.x, curve.start.y)
        surface.quadratic_curve_to(curve.control.x, curve.control.y, curve.end.x, curve.end.y)
        surface.stroke()


def render(surface, parabola: Parabola, draw_range=AUTO_FIT,
           epsilon: float = EPSILON, trace=None) -> BezierCurve:
    """Compute and draw a parabola segment on a surface.

    Nothing is drawn if computing the curve fails.

    Returns:
        The BezierCurve that was drawn
    """
    curve = compute_bezier(parabola, draw_range, Viewport.of(surface), epsilon, trace)
    emit(surface, curve)
    return curve


def draw_parabola(surface, focus_x, focus_y, focal_length, rotation,
                  start_offset=0, end_offset=0, counterclockwise=False,
                  draw_range=None, epsilon=EPSILON, trace=None):
    """Draw a parabola segment on a surface.

    Args:
        surface: DrawingSurface (begin_path/move_to/quadratic_curve_to/stroke, width/height)
        focus_x: Device x of the focus
        focus_y: Device y of the focus
        focal_length: Focal length a; focus at canonical (0, a), directrix y = -a
        rotation: Rotation about the focus in radians
        start_offset: Canonical x where drawing starts
        end_offset: Canonical x where drawing ends; equal offsets mean auto-fit
        counterclockwise: Rotate in the opposite sense
        draw_range: ExplicitRange or AUTO_FIT; overrides the offsets when given
        epsilon: Solver/clip tolerance
        trace: Optional callable(stage, data)

    Returns:
        The BezierCurve that was drawn
    """
    parabola = Parabola(focus_x, focus_y, focal_length, rotation, counterclockwise)
    if draw_range is None:
        draw_range = resolve_range(start_offset, end_offset)
    return render(surface, parabola, draw_range, epsilon, trace)
