"""Drawing surface capability used by the parabola renderer."""

from abc import ABC, abstractmethod


class DrawingSurface(ABC):
	"""Abstract path-drawing target.

	Subclasses must implement:
	- width / height: pixel size of the frame
	- begin_path(): start a new path
	- move_to(): set the current point
	- quadratic_curve_to(): add a quadratic Bézier from the current point
	- stroke(): outline the current path

	Surfaces shared between threads should set draw_lock to a lock; the
	renderer holds it for the whole begin_path..stroke sequence.
	"""

	draw_lock = None

	@property
	@abstractmethod
	def width(self):
		"""Frame width in pixels."""
		pass

	@property
	@abstractmethod
	def height(self):
		"""Frame height in pixels."""
		pass

	@abstractmethod
	def begin_path(self):
		pass

	@abstractmethod
	def move_to(self, x, y):
		pass

	@abstractmethod
	def quadratic_curve_to(self, cx, cy, ex, ey):
		"""Add a curve through control (cx, cy) ending at (ex, ey)."""
		pass

	@abstractmethod
	def stroke(self):
		pass
