"""Viewport clipping service (auto-fit).

Finds the part of an unbounded parabola that is visible inside a rectangular
viewport. The viewport corners are pulled back into the parabola's canonical
frame, each frame edge is intersected with the canonical curve, and the
intersections lying inside the (rotated) frame bound the drawn segment.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from constants import EPSILON
from models.errors import NoVisibleSegmentError
from models.geometry import ExplicitRange, Parabola, Viewport
from models.point import Point
from utils.parabola_math import intersect

logger = logging.getLogger(__name__)


def viewport_corners(viewport: Viewport) -> Tuple[Point, Point, Point, Point]:
    """Device-space corners in cyclic order: top-left, top-right, bottom-right, bottom-left."""
    return (
        Point(0.0, 0.0),
        Point(viewport.width, 0.0),
        Point(viewport.width, viewport.height),
        Point(0.0, viewport.height),
    )


def _cross(origin: Point, toward: Point, point: Point) -> float:
    """Z component of (toward - origin) x (point - origin)."""
    return ((toward.x - origin.x) * (point.y - origin.y)
            - (toward.y - origin.y) * (point.x - origin.x))


def is_inside(point: Point, corners, epsilon: float = EPSILON) -> bool:
    """Check whether a point lies inside a convex quad (either winding).

    Points on an edge count as inside, within epsilon.
    """
    crosses = [
        _cross(corners[i], corners[(i + 1) % len(corners)], point)
        for i in range(len(corners))
    ]
    return all(c >= -epsilon for c in crosses) or all(c <= epsilon for c in crosses)


@dataclass(frozen=True)
class ClipResult:
    """Outcome of clipping a parabola to a viewport.

    Attributes:
        corners: Viewport corners mapped into the canonical frame
        candidates: Every edge/parabola intersection, inside or not
        visible: Candidates that lie inside the frame
    """
    corners: Tuple[Point, ...]
    candidates: Tuple[Point, ...]
    visible: Tuple[Point, ...]

    @property
    def is_empty(self) -> bool:
        return not self.visible

    def _require_visible(self):
        if self.is_empty:
            raise NoVisibleSegmentError(clip=self)

    @property
    def start(self) -> Point:
        """Visible point with the smallest canonical x."""
        self._require_visible()
        return min(self.visible, key=lambda p: p.x)

    @property
    def end(self) -> Point:
        """Visible point with the largest canonical x."""
        self._require_visible()
        return max(self.visible, key=lambda p: p.x)


def clip_to_viewport(parabola: Parabola, viewport: Viewport, epsilon: float = EPSILON) -> ClipResult:
    """Intersect a parabola with the frame of a viewport.

    Args:
        parabola: Parabola to clip
        viewport: Device frame
        epsilon: Tolerance for vertical edges and the inside test

    Returns:
        ClipResult (possibly empty; check is_empty before reading start/end)
    """
    corners = tuple(parabola.to_canonical(c) for c in viewport_corners(viewport))
    top_left, top_right, bottom_right, bottom_left = corners

    edges = [
        (top_left, top_right),        # top
        (top_right, bottom_right),    # right
        (bottom_left, bottom_right),  # bottom
        (top_left, bottom_left),      # left
    ]

    candidates: List[Point] = []
    for p1, p2 in edges:
        candidates.extend(intersect(parabola.focal_length, p1, p2, epsilon))

    visible = tuple(p for p in candidates if is_inside(p, corners, epsilon))

    logger.debug("Canonical corners: %s", corners)
    logger.debug("Clip candidates: %d, visible: %d", len(candidates), len(visible))
    if not visible:
        logger.info("No visible segment for %s in %sx%s viewport",
                    parabola, viewport.width, viewport.height)

    return ClipResult(corners=corners, candidates=tuple(candidates), visible=visible)


def fit_range(parabola: Parabola, viewport: Viewport, epsilon: float = EPSILON,
              trace=None) -> ExplicitRange:
    """Canonical x-range of the visible part of a parabola.

    Args:
        trace: Optional callable(stage, data), called with ('clip', ClipResult)

    Raises:
        NoVisibleSegmentError: If the parabola never enters the viewport, or
            only grazes it (visible span no wider than epsilon)
    """
    clip = clip_to_viewport(parabola, viewport, epsilon)
    if trace is not None:
        trace('clip', clip)
    start, end = clip.start, clip.end
    if end.x - start.x <= epsilon:
        raise NoVisibleSegmentError(
            "Parabola touches the viewport at a single point", clip=clip)
    return ExplicitRange(start.x, end.x)
