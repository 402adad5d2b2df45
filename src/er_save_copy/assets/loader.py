"""Asset loading utilities for both development and packaged modes"""

import sys
from pathlib import Path
from typing import Optional

from PIL import Image

from ..logging_config import get_logger

logger = get_logger("assets")


def get_asset_path(relative_path: str) -> Path:
    """Get the correct path for assets, works in both dev and packaged modes.

    Args:
        relative_path: Path relative to the assets directory (e.g., "icons/gear.png")

    Returns:
        Absolute path to the asset file
    """
    if getattr(sys, 'frozen', False):
        # Running as compiled executable (PyInstaller)
        base_path = Path(sys._MEIPASS) / "assets"
    else:
        base_path = Path(__file__).parent

    return base_path / relative_path


def load_image(relative_path: str) -> Optional[Image.Image]:
    """Open an image asset, or return None if it is missing or unreadable."""
    path = get_asset_path(relative_path)
    if not path.exists():
        return None
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except (OSError, ValueError) as e:
        logger.warning("Could not load image %s: %s", path, e)
        return None
