"""Headless Parabola Renderer Service.

Provides offscreen rendering of a parabola to PNG images. Draws through the
same PainterSurface/render pipeline as the interactive canvas, into a
supersampled QImage, then hands the pixels to Pillow for downsampling and
saving.
"""

import sys
import os
import logging
import numpy as np
from PIL import Image

from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QImage, QPainter, QPen, QColor

from components.painter_surface import PainterSurface
from models.geometry import AUTO_FIT
from services.parabola_renderer import render
from constants import (
    EPSILON, CURVE_WIDTH, HEADLESS_OUTPUT_WIDTH, HEADLESS_OUTPUT_HEIGHT,
    HEADLESS_SUPERSAMPLE, HEADLESS_BACKGROUND, HEADLESS_CURVE_COLOR
)

logger = logging.getLogger(__name__)


class HeadlessRenderer:
    """Offscreen renderer that produces parabola images.

    The viewport seen by the geometry is always width x height; supersampling
    only scales the painter, so auto-fit results match the interactive canvas
    at the same size.
    """

    def __init__(self, width=HEADLESS_OUTPUT_WIDTH, height=HEADLESS_OUTPUT_HEIGHT,
                 supersample=HEADLESS_SUPERSAMPLE, line_width=CURVE_WIDTH,
                 background=HEADLESS_BACKGROUND, color=HEADLESS_CURVE_COLOR):
        if width <= 0 or height <= 0:
            raise ValueError(f"Output size must be positive, got {width}x{height}")
        if supersample < 1:
            raise ValueError(f"Supersample factor must be >= 1, got {supersample}")

        self._app = self._ensure_qapp()
        self.width = int(width)
        self.height = int(height)
        self.supersample = int(supersample)
        self.line_width = line_width
        self.background = background
        self.color = color

    @staticmethod
    def _ensure_qapp():
        """Return existing QApplication or create a headless one."""
        app = QApplication.instance()
        if app is None:
            app = QApplication(sys.argv)
        return app

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_to_array(self, parabola, draw_range=AUTO_FIT, epsilon=EPSILON, trace=None):
        """Render a parabola and return the supersampled RGBA pixels.

        Returns:
            (curve, pixels): BezierCurve drawn and a uint8 array of shape
            (height * supersample, width * supersample, 4)

        Raises:
            NoVisibleSegmentError / PreconditionError: Nothing was drawn
        """
        scale = self.supersample
        image = QImage(self.width * scale, self.height * scale, QImage.Format_RGBA8888)
        image.fill(QColor(*self.background))

        painter = QPainter(image)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.scale(scale, scale)
            pen = QPen(QColor(*self.color))
            pen.setWidthF(self.line_width)
            painter.setPen(pen)

            surface = PainterSurface(painter, self.width, self.height)
            curve = render(surface, parabola, draw_range, epsilon, trace)
        finally:
            painter.end()

        return curve, self._image_to_array(image)

    def render_parabola(self, parabola, output_path, draw_range=AUTO_FIT, epsilon=EPSILON, trace=None):
        """Render a parabola and save it as a width x height PNG.

        Args:
            parabola: Parabola to draw
            output_path: Destination PNG file path
            draw_range: ExplicitRange or AUTO_FIT

        Returns:
            BezierCurve that was drawn
        """
        curve, pixels = self.render_to_array(parabola, draw_range, epsilon, trace)

        img = Image.fromarray(pixels, "RGBA")
        if self.supersample > 1:
            img = img.resize((self.width, self.height), Image.Resampling.LANCZOS)

        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        img.save(output_path, "PNG")
        logger.info("Saved %dx%d parabola render to %s", self.width, self.height, output_path)
        return curve

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _image_to_array(image):
        """Copy an RGBA8888 QImage into a (h, w, 4) uint8 array."""
        height = image.height()
        width = image.width()
        ptr = image.constBits()
        ptr.setsize(image.sizeInBytes())
        # Rows may be padded; keep only width * 4 bytes of each
        rows = np.frombuffer(ptr, dtype=np.uint8).reshape(height, image.bytesPerLine())
        return rows[:, :width * 4].reshape(height, width, 4).copy()
