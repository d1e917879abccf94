"""UI components for Parabola Canvas

- drawing_surface: DrawingSurface capability the renderer draws into
- painter_surface: QPainter adapter for that capability
- parabola_canvas: widget that renders the current parabola
- parabola_controls: parameter side panel
"""

from .drawing_surface import DrawingSurface
from .painter_surface import PainterSurface
from .parabola_canvas import ParabolaCanvas
from .parabola_controls import ParabolaControls

__all__ = [
    'DrawingSurface',
    'PainterSurface',
    'ParabolaCanvas',
    'ParabolaControls',
]
