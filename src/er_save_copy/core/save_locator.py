"""Auto-detect Elden Ring save files"""

import sys
from pathlib import Path
from typing import Optional

from ..config.paths import SavePaths


class SaveLocator:
    """Find save files in the usual places.

    Looks in the application directory first (the tool is often dropped
    next to a save), then in every Steam account folder under the game's
    save root.
    """

    def __init__(self, app_dir: Optional[Path] = None, save_root: Optional[Path] = None):
        self.app_dir = app_dir or self._default_app_dir()
        self.save_root = save_root or SavePaths.GAME_SAVE_ROOT

    @staticmethod
    def _default_app_dir() -> Path:
        if getattr(sys, 'frozen', False):
            # Running as compiled executable (PyInstaller)
            return Path(sys.executable).parent
        return Path.cwd()

    def find_in_directory(self, directory: Path) -> Optional[Path]:
        """Return the first save file directly inside directory.

        ER0000.sl2 is preferred over the Seamless Coop ER0000.co2.
        """
        for name in SavePaths.SAVE_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def profile_saves(self) -> list[Path]:
        """Save files in the per-account folders of the save root."""
        if not self.save_root.is_dir():
            return []

        saves = []
        for profile_dir in sorted(self.save_root.iterdir()):
            if not profile_dir.is_dir():
                continue
            save = self.find_in_directory(profile_dir)
            if save:
                saves.append(save)
        return saves

    def find_save_file(self) -> Optional[Path]:
        """Best guess for the save the user wants to copy from."""
        save = self.find_in_directory(self.app_dir)
        if save:
            return save

        saves = self.profile_saves()
        return saves[0] if saves else None

    def initial_directory(self) -> Optional[Path]:
        """Directory file dialogs should open in."""
        if self.save_root.is_dir():
            return self.save_root
        return None
