"""
Shared fixtures for Parabola Canvas tests.

Provides a recording drawing surface, sample parabolas, and a headless
QApplication for widget tests.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widget and QImage tests run without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from components.drawing_surface import DrawingSurface
from models.geometry import Parabola


class RecordingSurface(DrawingSurface):
    """DrawingSurface that records every call instead of drawing."""

    def __init__(self, width=200, height=200):
        self._width = width
        self._height = height
        self.calls = []

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def begin_path(self):
        self.calls.append(('begin_path',))

    def move_to(self, x, y):
        self.calls.append(('move_to', x, y))

    def quadratic_curve_to(self, cx, cy, ex, ey):
        self.calls.append(('quadratic_curve_to', cx, cy, ex, ey))

    def stroke(self):
        self.calls.append(('stroke',))

    @property
    def names(self):
        return [call[0] for call in self.calls]


# ── Surfaces ────────────────────────────────────────────────────────────

@pytest.fixture
def surface():
    """200x200 recording surface"""
    return RecordingSurface(200, 200)


@pytest.fixture
def make_surface():
    """Factory for recording surfaces of any size"""
    return RecordingSurface


# ── Sample parabolas ────────────────────────────────────────────────────

@pytest.fixture
def centered_parabola():
    """a=50 with focus in the middle of a 200x200 frame"""
    return Parabola(100.0, 100.0, 50.0, 0.0)


@pytest.fixture
def small_parabola():
    """a=25 with focus at (50, 50), used with explicit ranges"""
    return Parabola(50.0, 50.0, 25.0, 0.0)


@pytest.fixture
def offscreen_parabola():
    """Parabola whose curve passes far above a 200x200 frame"""
    return Parabola(100.0, -500.0, 10.0, 0.0)


# ── Qt ──────────────────────────────────────────────────────────────────

@pytest.fixture(scope='session')
def qapp():
    """Single QApplication shared by all Qt tests"""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
