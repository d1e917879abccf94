"""Parabola canvas widget - draws the current parabola with QPainter"""

import logging

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPointF, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QColor, QBrush

from components.painter_surface import PainterSurface
from models.errors import NoVisibleSegmentError, PreconditionError
from models.geometry import AUTO_FIT
from services.parabola_renderer import render
from constants import (
	CANVAS_BACKGROUND, CURVE_COLOR, CURVE_WIDTH, OVERLAY_COLOR, FOCUS_MARKER_RADIUS,
	DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT, EPSILON
)

logger = logging.getLogger(__name__)


class ParabolaCanvas(QWidget):
	"""Widget that renders one parabola segment.

	The widget's own pixel frame is the viewport, so auto-fit follows resizes.
	With the overlay enabled it also marks the focus and draws the Bézier
	control polygon.
	"""

	renderSucceeded = pyqtSignal(object)  # BezierCurve that was drawn
	renderFailed = pyqtSignal(str)        # Reason nothing was drawn

	def __init__(self, parent=None):
		super().__init__(parent)
		self.setMinimumSize(DEFAULT_CANVAS_WIDTH // 2, DEFAULT_CANVAS_HEIGHT // 2)
		self.resize(DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT)

		self.parabola = None
		self.draw_range = AUTO_FIT
		self.show_overlay = False
		self.last_curve = None

	def set_parabola(self, parabola, draw_range=AUTO_FIT):
		"""Set what to draw and schedule a repaint"""
		self.parabola = parabola
		self.draw_range = draw_range
		self.update()

	def clear(self):
		self.parabola = None
		self.last_curve = None
		self.update()

	def set_show_overlay(self, show):
		self.show_overlay = show
		self.update()

	def paintEvent(self, event):
		"""Fill background, then draw the curve and optional overlay."""
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.fillRect(self.rect(), QColor(CANVAS_BACKGROUND))

		if self.parabola is None:
			painter.end()
			return

		pen = QPen(QColor(CURVE_COLOR))
		pen.setWidth(CURVE_WIDTH)
		painter.setPen(pen)

		surface = PainterSurface(painter, self.width(), self.height())
		try:
			self.last_curve = render(surface, self.parabola, self.draw_range, EPSILON)
		except NoVisibleSegmentError as e:
			self.last_curve = None
			self.renderFailed.emit(str(e))
		except PreconditionError as e:
			self.last_curve = None
			logger.warning("Cannot draw parabola: %s", e)
			self.renderFailed.emit(str(e))
		else:
			self.renderSucceeded.emit(self.last_curve)

		if self.show_overlay:
			self._draw_overlay(painter)

		painter.end()

	def _draw_overlay(self, painter):
		"""Mark the focus and draw the control polygon of the last curve."""
		pen = QPen(QColor(OVERLAY_COLOR))
		pen.setWidth(1)
		pen.setStyle(Qt.DashLine)
		painter.setPen(pen)
		painter.setBrush(QBrush(QColor(OVERLAY_COLOR)))

		focus = QPointF(self.parabola.focus_x, self.parabola.focus_y)
		painter.drawEllipse(focus, FOCUS_MARKER_RADIUS, FOCUS_MARKER_RADIUS)

		if self.last_curve is None:
			return

		painter.setBrush(Qt.NoBrush)
		start, control, end = (QPointF(p.x, p.y) for p in
							   (self.last_curve.start, self.last_curve.control, self.last_curve.end))
		painter.drawLine(start, control)
		painter.drawLine(control, end)
