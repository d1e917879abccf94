import sys
import os

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5.QtWidgets import QMainWindow, QSplitter, QApplication, QFileDialog, QAction
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence

# Component imports
from components.parabola_canvas import ParabolaCanvas
from components.parabola_controls import ParabolaControls

# Model imports
from models.errors import NoVisibleSegmentError, PreconditionError

# Utility imports
from utils.logger import loggerRaise, set_main_window, setup_logging

# Mixin imports
from app.config_mixin import ConfigMixin

from constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from version import get_version


class ParabolaViewer(ConfigMixin, QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(f"Parabola Canvas {get_version()}")
        self.resize(960, 600)

        self.config_dir = os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
        self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)

        # Initialize global logger with main window reference
        set_main_window(self)

        self._setup_ui()
        self._setup_menu()

        self._load_config()
        self._apply_config()
        self._on_parameters_changed()

    def _setup_ui(self):
        splitter = QSplitter(Qt.Horizontal)

        self.controls = ParabolaControls()
        self.controls.setMinimumWidth(240)
        self.controls.parametersChanged.connect(self._on_parameters_changed)
        splitter.addWidget(self.controls)

        self.canvas = ParabolaCanvas()
        self.canvas.renderFailed.connect(self._on_render_failed)
        self.canvas.renderSucceeded.connect(self._on_render_succeeded)
        splitter.addWidget(self.canvas)

        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        self.statusBar().showMessage("Ready")

    def _setup_menu(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        export_action = QAction("&Export PNG...", self)
        export_action.setShortcut(QKeySequence("Ctrl+E"))
        export_action.triggered.connect(self.export_png)
        file_menu.addAction(export_action)
        file_menu.addSeparator()
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence("Alt+F4"))
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        view_menu = menubar.addMenu("&View")
        self.overlay_action = QAction("Show Control &Polygon", self)
        self.overlay_action.setCheckable(True)
        self.overlay_action.toggled.connect(self.canvas.set_show_overlay)
        view_menu.addAction(self.overlay_action)

    def _apply_config(self):
        super()._apply_config()
        self.overlay_action.setChecked(self.canvas.show_overlay)

    def _on_parameters_changed(self):
        """Rebuild the parabola from the controls and repaint"""
        try:
            parabola = self.controls.get_parabola()
        except PreconditionError as e:
            self.canvas.clear()
            self.statusBar().showMessage(f"Invalid parameters: {e}")
            return
        self.canvas.set_parabola(parabola, self.controls.get_draw_range())

    def _on_render_failed(self, message):
        self.statusBar().showMessage(message)

    def _on_render_succeeded(self, curve):
        self.statusBar().showMessage(
            f"start ({curve.start.x:.1f}, {curve.start.y:.1f})  "
            f"control ({curve.control.x:.1f}, {curve.control.y:.1f})  "
            f"end ({curve.end.x:.1f}, {curve.end.y:.1f})"
        )

    def export_png(self):
        """Export the current parabola at canvas size through the headless renderer"""
        filename, _ = QFileDialog.getSaveFileName(self, "Export PNG", "parabola.png", "PNG Files (*.png)")
        if not filename:
            return

        from services.headless_renderer import HeadlessRenderer
        try:
            renderer = HeadlessRenderer(self.canvas.width(), self.canvas.height())
            renderer.render_parabola(self.controls.get_parabola(), filename, self.controls.get_draw_range())
            self.statusBar().showMessage(f"Exported to {filename}")
        except NoVisibleSegmentError as e:
            self.statusBar().showMessage(f"Nothing to export: {e}")
        except PreconditionError as e:
            self.statusBar().showMessage(f"Invalid parameters: {e}")
        except Exception as e:
            loggerRaise(e, "Failed to export PNG")

    def closeEvent(self, event):
        """Save config before closing"""
        self._save_config()
        event.accept()


def main():
    setup_logging()
    app = QApplication(sys.argv)
    window = ParabolaViewer()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
