"""GUI module using CustomTkinter.

Components:
    MainWindow: Source and destination save pickers, slot menus, copy button
    ConfigDialog: Backup settings dialog

Submodules:
    styles: Theme constants (colors, fonts, padding, window sizes)
    widgets: Reusable widget components (PathSelector)
"""

from .main_window import MainWindow
from .config_dialog import ConfigDialog

__all__ = [
    "MainWindow",
    "ConfigDialog",
]
