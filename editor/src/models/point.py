"""Point value type shared by the geometry helpers and models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """2D point.

    Used for canonical parabola coordinates (vertex at origin, focus at
    (0, a)) and for device pixels (y grows downward).
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))
