"""
Parabola Canvas - Data Models

Immutable value types describing a parabola, how much of it to draw, the
surface frame it is drawn into, and the resulting Bézier segment.

Public API: import from models directly.
"""

from .point import Point
from .geometry import (
    Parabola, ExplicitRange, AutoFit, AUTO_FIT, resolve_range,
    Viewport, BezierCurve
)
from .errors import ParabolaError, PreconditionError, NoVisibleSegmentError

__all__ = [
    'Point', 'Parabola', 'ExplicitRange', 'AutoFit', 'AUTO_FIT', 'resolve_range',
    'Viewport', 'BezierCurve',
    'ParabolaError', 'PreconditionError', 'NoVisibleSegmentError',
]
