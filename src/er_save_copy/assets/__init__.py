"""Asset loading utilities for icons.

This module handles loading assets in both development and packaged (PyInstaller) modes.

Submodules:
    loader: get_asset_path() and load_image() for resolving and opening assets
    icon_generator: Script to generate the icons (run with python -m)

Asset Directory Structure:
    assets/
        icons/
            gear.png      - Settings button icon
            copy.png      - Copy button icon
            app_icon.png  - Application icon (256x256)
            app_icon.ico  - Windows application icon (multi-size)
"""

from .loader import get_asset_path, load_image

__all__ = [
    "get_asset_path",
    "load_image",
]
