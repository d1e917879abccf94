"""Geometry value types for parabola rendering.

All types here are immutable and live for a single render call:
- Point: x/y pair in any coordinate frame (canonical or device)
- Parabola: focus, focal length, rotation and rotation sense
- ExplicitRange / AUTO_FIT: how the drawn segment is chosen
- Viewport: pixel frame of the drawing surface
- BezierCurve: start, control and end point of one quadratic segment
"""
import math
from dataclasses import dataclass

from models.errors import PreconditionError
from models.point import Point
from utils.point_math import rotate, translate


@dataclass(frozen=True)
class Parabola:
    """Parabola placed on a surface.

    Attributes:
        focus_x: Device x of the focus
        focus_y: Device y of the focus
        focal_length: Signed vertex-to-focus distance (a). Nonzero.
        rotation: Rotation about the focus, radians
        counterclockwise: Negates the rotation (screen-space sense)
    """
    focus_x: float
    focus_y: float
    focal_length: float
    rotation: float = 0.0
    counterclockwise: bool = False

    def __post_init__(self):
        for name in ('focus_x', 'focus_y', 'focal_length', 'rotation'):
            if not math.isfinite(getattr(self, name)):
                raise PreconditionError(f"{name} must be finite, got {getattr(self, name)!r}")
        if self.focal_length == 0:
            raise PreconditionError("focal_length must be nonzero")

    @property
    def angle(self) -> float:
        """Effective rotation in radians."""
        return -self.rotation if self.counterclockwise else self.rotation

    @property
    def canonical_focus(self) -> Point:
        return Point(0.0, self.focal_length)

    @property
    def offset(self) -> Point:
        """Translation from canonical frame to device frame."""
        return Point(self.focus_x, self.focus_y - self.focal_length)

    def to_device(self, point: Point) -> Point:
        """Canonical -> device: rotate about the focus, then translate."""
        rotated = rotate(point, self.canonical_focus, self.angle)
        return translate(rotated, self.offset.x, self.offset.y)

    def to_canonical(self, point: Point) -> Point:
        """Device -> canonical: exact inverse of to_device."""
        shifted = translate(point, -self.offset.x, -self.offset.y)
        return rotate(shifted, self.canonical_focus, -self.angle)


@dataclass(frozen=True)
class ExplicitRange:
    """Caller-chosen canonical x-offsets.

    start and end are labels only; a reversed range draws the same curve.
    """
    start: float
    end: float

    def __post_init__(self):
        for name in ('start', 'end'):
            if not math.isfinite(getattr(self, name)):
                raise PreconditionError(f"{name} offset must be finite, got {getattr(self, name)!r}")


class AutoFit:
    """Fit the drawn segment to the visible viewport."""

    def __repr__(self):
        return 'AUTO_FIT'


AUTO_FIT = AutoFit()


def resolve_range(start_offset=0.0, end_offset=0.0):
    """Map the legacy (start, end) offsets to a drawing range.

    Equal offsets (including the 0, 0 default) mean auto-fit. Callers that
    need a genuine explicit range with equal ends must pass ExplicitRange.
    Non-finite offsets are rejected, never treated as auto-fit.
    """
    if start_offset == end_offset and math.isfinite(start_offset):
        return AUTO_FIT
    return ExplicitRange(start_offset, end_offset)


@dataclass(frozen=True)
class Viewport:
    """Pixel frame of a drawing surface with its origin at the top-left."""
    width: float
    height: float

    @classmethod
    def of(cls, surface):
        """Read the frame size from anything exposing width/height."""
        return cls(surface.width, surface.height)


@dataclass(frozen=True)
class BezierCurve:
    """Quadratic Bézier segment."""
    start: Point
    control: Point
    end: Point

    def map(self, fn):
        """Apply a point transform to all three points."""
        return BezierCurve(fn(self.start), fn(self.control), fn(self.end))

    def point_at(self, t: float) -> Point:
        """Sample the curve at parameter t in [0, 1]."""
        u = 1.0 - t
        x = u * u * self.start.x + 2 * u * t * self.control.x + t * t * self.end.x
        y = u * u * self.start.y + 2 * u * t * self.control.y + t * t * self.end.y
        return Point(x, y)

    def tangent_at(self, t: float) -> Point:
        """Derivative of the curve at t (direction, not normalized)."""
        u = 1.0 - t
        x = 2 * u * (self.control.x - self.start.x) + 2 * t * (self.end.x - self.control.x)
        y = 2 * u * (self.control.y - self.start.y) + 2 * t * (self.end.y - self.control.y)
        return Point(x, y)
