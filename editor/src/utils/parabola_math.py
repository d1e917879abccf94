"""Canonical parabola math.

All functions work on the untransformed parabola y = x^2 / (4a), vertex at
the origin, focus at (0, a), directrix at y = -a. Rotation and translation
into device space happen afterwards (see models.geometry.Parabola).
"""

import math

from constants import EPSILON
from models.errors import PreconditionError
from models.point import Point


def _require_focal_length(focal_length):
	if focal_length == 0:
		raise PreconditionError("focal_length must be nonzero")


def evaluate(offset, focal_length):
	"""Height of the canonical parabola at a horizontal offset.

	Args:
		offset: Canonical x-coordinate
		focal_length: Focal length a (nonzero)

	Returns:
		float: offset^2 / (4a)
	"""
	_require_focal_length(focal_length)
	return offset * offset / (4 * focal_length)


def point_at(offset, focal_length):
	"""Point on the canonical parabola at a horizontal offset."""
	return Point(offset, evaluate(offset, focal_length))


def tangent_intersection(p1, p2, focal_length):
	"""Intersection of the tangents at two points on the canonical parabola.

	This is the control point of the quadratic Bézier that passes through p1
	and p2 and matches the parabola's tangents there. Since any parabola
	segment is exactly a quadratic Bézier, the result is exact, not an
	approximation.

	Args:
		p1: Point on the parabola
		p2: Point on the parabola, p2.x != p1.x
		focal_length: Focal length a (nonzero)

	Returns:
		Point: Tangent intersection

	Raises:
		PreconditionError: If the chord is vertical or focal_length is 0
	"""
	_require_focal_length(focal_length)
	if p1.x == p2.x:
		raise PreconditionError(f"Tangent intersection needs distinct x-coordinates, got x={p1.x}")

	x = p1.x + p2.x + 2 * focal_length * (p2.y - p1.y) / (p1.x - p2.x)
	# Tangent at p1 has slope x1 / (2a)
	y = p1.y + p1.x * (x - p1.x) / (2 * focal_length)
	return Point(x, y)


def intersect(focal_length, p1, p2, epsilon=EPSILON):
	"""Intersect the line through p1 and p2 with the canonical parabola.

	Substitutes y = slope*x + intercept into x^2 = 4a*y and solves
	x^2 - 4a*slope*x - 4a*intercept = 0.

	Args:
		focal_length: Focal length a (nonzero)
		p1: First point on the line
		p2: Second point on the line
		epsilon: Lines with |x1 - x2| below this are treated as vertical

	Returns:
		list[Point]: 0, 1 or 2 intersection points
	"""
	_require_focal_length(focal_length)

	# Vertical line crosses the parabola exactly once
	if abs(p1.x - p2.x) < epsilon:
		return [point_at(p1.x, focal_length)]

	slope = (p2.y - p1.y) / (p2.x - p1.x)
	intercept = p1.y - slope * p1.x
	discriminant = 4 * focal_length * (focal_length * slope * slope + intercept)
	vertex_x = 2 * focal_length * slope

	if discriminant > 0:
		root = math.sqrt(discriminant)
		return [
			point_at(vertex_x + root, focal_length),
			point_at(vertex_x - root, focal_length),
		]
	if discriminant == 0:
		return [point_at(vertex_x, focal_length)]
	return []
