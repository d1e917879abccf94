"""Configuration management for ParabolaViewer"""

import os
import json
from utils.logger import loggerRaise


class ConfigMixin:
	"""Configuration file operations: last used parabola and window layout

	Expects the host to provide config_dir, config_file and controls
	(a ParabolaControls), plus the QWidget size methods.
	"""

	def _load_config(self):
		"""Load last used settings from config file"""
		self.saved_parameters = {}
		self.saved_window_size = None
		self.saved_show_overlay = False
		try:
			if os.path.exists(self.config_file):
				with open(self.config_file, 'r', encoding='utf-8') as f:
					config = json.load(f)
				self.saved_parameters = config.get('parabola', {})
				self.saved_show_overlay = bool(config.get('show_overlay', False))
				size = config.get('window_size')
				if isinstance(size, list) and len(size) == 2:
					self.saved_window_size = (int(size[0]), int(size[1]))
		except Exception as e:
			loggerRaise(e, "Error loading config")

	def _save_config(self):
		"""Save current settings to config file"""
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)

			config = {
				'parabola': self.controls.get_values(),
				'show_overlay': self.canvas.show_overlay,
				'window_size': [self.width(), self.height()],
			}

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")

	def _apply_config(self):
		"""Push loaded settings into the UI"""
		if self.saved_window_size:
			self.resize(*self.saved_window_size)
		self.canvas.set_show_overlay(self.saved_show_overlay)
		if self.saved_parameters:
			self.controls.set_values(self.saved_parameters)
