"""QPainter-backed drawing surface.

Collects path calls into a QPainterPath and strokes it with the painter's
current pen. Pen colour and width are set by the caller on the painter.
"""

import threading

from PyQt5.QtGui import QPainterPath

from components.drawing_surface import DrawingSurface


class PainterSurface(DrawingSurface):
	"""DrawingSurface over an active QPainter.

	Usage:
		painter = QPainter(widget)
		surface = PainterSurface(painter, widget.width(), widget.height())
		render(surface, parabola)
	"""

	def __init__(self, painter, width=None, height=None):
		"""Initialize surface.

		Args:
			painter: Active QPainter
			width: Frame width in pixels (default: painter device width)
			height: Frame height in pixels (default: painter device height)
		"""
		self._painter = painter
		device = painter.device()
		self._width = width if width is not None else device.width()
		self._height = height if height is not None else device.height()
		self._path = QPainterPath()
		self.draw_lock = threading.Lock()

	@property
	def width(self):
		return self._width

	@property
	def height(self):
		return self._height

	def begin_path(self):
		self._path = QPainterPath()

	def move_to(self, x, y):
		self._path.moveTo(x, y)

	def quadratic_curve_to(self, cx, cy, ex, ey):
		self._path.quadTo(cx, cy, ex, ey)

	def stroke(self):
		# Outline only, never fill
		self._painter.strokePath(self._path, self._painter.pen())
