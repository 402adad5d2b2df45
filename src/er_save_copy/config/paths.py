"""Default paths for game saves, configuration and backups"""

import os
from pathlib import Path


class SavePaths:
    """Default paths for Elden Ring saves and application data.

    All paths use environment variable expansion for portability.
    """

    # Game save root, one sub-directory per Steam account
    GAME_SAVE_ROOT = Path(os.path.expandvars(r"%APPDATA%\EldenRing"))

    # Save file names, vanilla first then Seamless Coop
    SAVE_FILE_NAMES = ("ER0000.sl2", "ER0000.co2")
    SAVE_FILE_SUFFIXES = (".sl2", ".co2")

    # Sub-directory created next to the save file when no backup location is set
    BACKUP_DIR_NAME = "SaveCopyBackups"

    # Configuration file location
    CONFIG_DIR = Path(os.path.expandvars(r"%APPDATA%\ERSaveCopy"))
    CONFIG_FILE = CONFIG_DIR / "configuration.xml"
    LOG_FILE = CONFIG_DIR / "er_save_copy.log"

    # Error log written beside the destination save
    ERROR_LOG_NAME = "error.log"

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand environment variables in path string.

        Args:
            path_str: Path string potentially containing environment variables

        Returns:
            Path object with expanded variables
        """
        return Path(os.path.expandvars(path_str))

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure the configuration directory exists.

        Returns:
            Path to the configuration directory
        """
        cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        return cls.CONFIG_DIR

    @classmethod
    def default_backup_dir(cls, save_path: Path) -> Path:
        """Backup directory used when the user has not configured one."""
        return save_path.parent / cls.BACKUP_DIR_NAME
