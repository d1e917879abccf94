"""Error types raised by the parabola geometry and renderer."""


class ParabolaError(Exception):
    """Base class for all parabola rendering errors."""


class PreconditionError(ParabolaError, ValueError):
    """Caller passed parameters the geometry cannot work with.

    Raised for a zero focal length, a vertical chord handed to the tangent
    solver, or non-finite numeric input. Not recoverable by retrying.
    """


class NoVisibleSegmentError(ParabolaError):
    """Auto-fit found no part of the parabola inside the viewport.

    Attributes:
        clip: The ClipResult that came back empty (corners and raw candidates
            are kept for diagnostics)
    """

    def __init__(self, message="Parabola has no visible segment in the viewport", clip=None):
        super().__init__(message)
        self.clip = clip
