"""Point algebra for moving between the canonical and device frames.

Pure functions on Point values, no UI dependencies:
- translate: shift by (dx, dy)
- rotate: rotate about an arbitrary center
"""

import math

from models.point import Point


def translate(p, dx, dy):
	"""Shift a point by (dx, dy).
	
	Args:
		p: Point to move
		dx: Horizontal offset
		dy: Vertical offset
		
	Returns:
		Point: (p.x + dx, p.y + dy)
	"""
	return Point(p.x + dx, p.y + dy)


def rotate(p, center, angle):
	"""Rotate a point about a center.
	
	Positive angles turn counterclockwise in a y-up frame. On screen (y-down)
	the same angle appears clockwise; callers negate the angle to get the
	opposite sense.
	
	Args:
		p: Point to rotate
		center: Point to rotate about
		angle: Rotation in radians
		
	Returns:
		Point: Rotated point
	"""
	cos_a = math.cos(angle)
	sin_a = math.sin(angle)
	
	# Offset from center
	dx = p.x - center.x
	dy = p.y - center.y
	
	return Point(
		center.x + dx * cos_a - dy * sin_a,
		center.y + dx * sin_a + dy * cos_a
	)
