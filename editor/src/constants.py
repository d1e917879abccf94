"""
Parabola Canvas - Constants and Configuration

This module contains all constant values used throughout the application:
- Numeric tolerances for the geometry solvers
- Default parabola parameters
- Canvas and pen settings for the interactive viewer
- Headless export settings
"""

# ======================================================================
# GEOMETRY TOLERANCES
# ======================================================================
# Tolerance used by the line/parabola solver for near-vertical lines and by
# the viewport clip when deciding whether a point lies inside the frame
EPSILON = 0.001

# ======================================================================
# DEFAULT PARABOLA
# ======================================================================
# Focus position in device pixels (y grows downward)
DEFAULT_FOCUS_X = 200.0
DEFAULT_FOCUS_Y = 200.0

# Focal length: focus sits at canonical (0, a), directrix at y = -a
DEFAULT_FOCAL_LENGTH = 50.0

# Rotation about the focus, in radians
DEFAULT_ROTATION = 0.0

# Explicit range defaults (equal offsets = auto-fit in the legacy entry point)
DEFAULT_START_OFFSET = -100.0
DEFAULT_END_OFFSET = 100.0

DEFAULT_COUNTERCLOCKWISE = False
DEFAULT_AUTO_FIT = True

# ======================================================================
# CONTROL LIMITS
# ======================================================================
FOCUS_MIN = -10000.0
FOCUS_MAX = 10000.0
FOCAL_LENGTH_MIN = -5000.0
FOCAL_LENGTH_MAX = 5000.0
OFFSET_MIN = -10000.0
OFFSET_MAX = 10000.0
ROTATION_DEGREES_MIN = -360.0
ROTATION_DEGREES_MAX = 360.0
ROTATION_STEP_DEGREES = 5.0

# ======================================================================
# CANVAS / VIEWER
# ======================================================================
DEFAULT_CANVAS_WIDTH = 400
DEFAULT_CANVAS_HEIGHT = 400

CANVAS_BACKGROUND = '#1e1e1e'
CURVE_COLOR = '#e0a030'
CURVE_WIDTH = 2

# Overlay (focus marker and control polygon)
OVERLAY_COLOR = '#5a8fd0'
FOCUS_MARKER_RADIUS = 4

# ======================================================================
# HEADLESS EXPORT
# ======================================================================
# Final PNG is OUTPUT_SIZE; drawing happens at SUPERSAMPLE x resolution and is
# downsampled with LANCZOS
HEADLESS_OUTPUT_WIDTH = 512
HEADLESS_OUTPUT_HEIGHT = 512
HEADLESS_SUPERSAMPLE = 2
HEADLESS_BACKGROUND = (255, 255, 255, 255)
HEADLESS_CURVE_COLOR = (0, 0, 0, 255)

# ======================================================================
# CONFIG
# ======================================================================
CONFIG_DIR_NAME = '.parabola_canvas'
CONFIG_FILE_NAME = 'config.json'
