"""Main window mixins for the Parabola Canvas viewer."""
