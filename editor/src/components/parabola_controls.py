"""Parabola parameter controls - spin boxes and toggles for the viewer"""

import math

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QDoubleSpinBox, QCheckBox
from PyQt5.QtCore import pyqtSignal

from models.geometry import Parabola, ExplicitRange, AUTO_FIT
from constants import (
	DEFAULT_FOCUS_X, DEFAULT_FOCUS_Y, DEFAULT_FOCAL_LENGTH, DEFAULT_ROTATION,
	DEFAULT_START_OFFSET, DEFAULT_END_OFFSET, DEFAULT_COUNTERCLOCKWISE, DEFAULT_AUTO_FIT,
	FOCUS_MIN, FOCUS_MAX, FOCAL_LENGTH_MIN, FOCAL_LENGTH_MAX, OFFSET_MIN, OFFSET_MAX,
	ROTATION_DEGREES_MIN, ROTATION_DEGREES_MAX, ROTATION_STEP_DEGREES
)


class ParabolaControls(QWidget):
	"""Side panel editing one parabola.

	Rotation is shown in degrees and stored in radians. The explicit range
	spin boxes are disabled while auto-fit is checked.
	"""

	parametersChanged = pyqtSignal()  # Emitted whenever any control changes

	def __init__(self, parent=None):
		super().__init__(parent)

		self._controls = {}
		self._updating = False

		layout = QVBoxLayout()
		layout.setContentsMargins(8, 8, 8, 8)
		layout.setSpacing(6)

		self._add_spin(layout, 'focus_x', "Focus X:", DEFAULT_FOCUS_X, FOCUS_MIN, FOCUS_MAX, 1.0)
		self._add_spin(layout, 'focus_y', "Focus Y:", DEFAULT_FOCUS_Y, FOCUS_MIN, FOCUS_MAX, 1.0)
		self._add_spin(layout, 'focal_length', "Focal Length:", DEFAULT_FOCAL_LENGTH,
					   FOCAL_LENGTH_MIN, FOCAL_LENGTH_MAX, 1.0)
		self._add_spin(layout, 'rotation', "Rotation (°):", math.degrees(DEFAULT_ROTATION),
					   ROTATION_DEGREES_MIN, ROTATION_DEGREES_MAX, ROTATION_STEP_DEGREES)

		self.counterclockwise_check = QCheckBox("Counterclockwise")
		self.counterclockwise_check.setChecked(DEFAULT_COUNTERCLOCKWISE)
		self.counterclockwise_check.toggled.connect(self._on_changed)
		layout.addWidget(self.counterclockwise_check)

		self.auto_fit_check = QCheckBox("Fit to canvas")
		self.auto_fit_check.setChecked(DEFAULT_AUTO_FIT)
		self.auto_fit_check.toggled.connect(self._on_auto_fit_toggled)
		layout.addWidget(self.auto_fit_check)

		self._add_spin(layout, 'start', "Start Offset:", DEFAULT_START_OFFSET, OFFSET_MIN, OFFSET_MAX, 1.0)
		self._add_spin(layout, 'end', "End Offset:", DEFAULT_END_OFFSET, OFFSET_MIN, OFFSET_MAX, 1.0)

		layout.addStretch()
		self.setLayout(layout)

		self._sync_range_enabled()

	def _add_spin(self, layout, key, label, value, min_val, max_val, step):
		"""Add a labelled QDoubleSpinBox row"""
		row = QHBoxLayout()
		row_label = QLabel(label)
		spin = QDoubleSpinBox()
		spin.setRange(min_val, max_val)
		spin.setSingleStep(step)
		spin.setDecimals(2)
		spin.setValue(value)
		spin.valueChanged.connect(self._on_changed)
		row.addWidget(row_label)
		row.addWidget(spin)
		layout.addLayout(row)

		self._controls[key] = spin

	def _on_changed(self, *args):
		if not self._updating:
			self.parametersChanged.emit()

	def _on_auto_fit_toggled(self, checked):
		self._sync_range_enabled()
		self._on_changed()

	def _sync_range_enabled(self):
		explicit = not self.auto_fit_check.isChecked()
		self._controls['start'].setEnabled(explicit)
		self._controls['end'].setEnabled(explicit)

	def get_parabola(self):
		"""Build a Parabola from the current values.

		Raises:
			PreconditionError: If the focal length is 0
		"""
		return Parabola(
			self._controls['focus_x'].value(),
			self._controls['focus_y'].value(),
			self._controls['focal_length'].value(),
			math.radians(self._controls['rotation'].value()),
			self.counterclockwise_check.isChecked(),
		)

	def get_draw_range(self):
		"""Current drawing range: AUTO_FIT or ExplicitRange"""
		if self.auto_fit_check.isChecked():
			return AUTO_FIT
		return ExplicitRange(self._controls['start'].value(), self._controls['end'].value())

	def get_values(self):
		"""Serialize control values for the config file"""
		values = {key: spin.value() for key, spin in self._controls.items()}
		values['counterclockwise'] = self.counterclockwise_check.isChecked()
		values['auto_fit'] = self.auto_fit_check.isChecked()
		return values

	def set_values(self, values):
		"""Restore control values, emitting parametersChanged once

		Unknown keys are ignored, missing keys keep their current value.
		"""
		self._updating = True
		try:
			for key, spin in self._controls.items():
				if key in values:
					spin.setValue(float(values[key]))
			if 'counterclockwise' in values:
				self.counterclockwise_check.setChecked(bool(values['counterclockwise']))
			if 'auto_fit' in values:
				self.auto_fit_check.setChecked(bool(values['auto_fit']))
		finally:
			self._updating = False
		self._sync_range_enabled()
		self.parametersChanged.emit()
