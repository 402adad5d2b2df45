"""Path validation utilities to prevent dangerous file operations.

Provides validation for paths used in file operations to prevent:
- Overwriting files that are not Elden Ring saves
- Operations on protected system directories
"""

import os
from pathlib import Path
from typing import Optional

from .paths import SavePaths
from ..logging_config import get_logger

logger = get_logger("path_validator")

# Protected Windows system directories that should never be modified
PROTECTED_DIRECTORIES = [
    "C:\\Windows",
    "C:\\Program Files",
    "C:\\Program Files (x86)",
    "C:\\ProgramData",
    "C:\\$Recycle.Bin",
    "C:\\System Volume Information",
]

# Additional protected paths based on environment variables
PROTECTED_ENV_PATHS = [
    "WINDIR",
    "SYSTEMROOT",
    "PROGRAMFILES",
    "PROGRAMFILES(X86)",
    "PROGRAMDATA",
]


def _get_protected_paths() -> set[Path]:
    """Build the set of protected paths including environment-based ones."""
    protected = set()

    for dir_path in PROTECTED_DIRECTORIES:
        try:
            protected.add(Path(dir_path).resolve())
        except (OSError, ValueError):
            pass

    for env_var in PROTECTED_ENV_PATHS:
        env_value = os.environ.get(env_var)
        if env_value:
            try:
                protected.add(Path(env_value).resolve())
            except (OSError, ValueError):
                pass

    return protected


def is_safe_path(path: Path, protected: Optional[set[Path]] = None) -> bool:
    """Check if a path is outside the protected system directories.

    Args:
        path: The path to validate
        protected: Optional override of the protected directory set

    Returns:
        True if the path is safe, False otherwise
    """
    try:
        resolved = path.resolve()
    except (OSError, ValueError) as e:
        logger.warning("Failed to resolve path %s: %s", path, e)
        return False

    if protected is None:
        protected = _get_protected_paths()

    for protected_path in protected:
        if resolved == protected_path or protected_path in resolved.parents:
            logger.warning("Path %s is in protected directory %s", path, protected_path)
            return False

    return True


def validate_save_file(save_path: Optional[Path], must_exist: bool = True) -> tuple[bool, str]:
    """Validate a save file path before reading or overwriting it.

    Args:
        save_path: The save file to validate
        must_exist: If True, the file has to exist already

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not save_path:
        return False, "Save path is empty"

    if save_path.suffix.lower() not in SavePaths.SAVE_FILE_SUFFIXES:
        allowed = ", ".join(SavePaths.SAVE_FILE_SUFFIXES)
        return False, f"Not an Elden Ring save file (expected {allowed})"

    if must_exist and not save_path.is_file():
        return False, f"Save file not found: {save_path}"

    if not is_safe_path(save_path):
        return False, "Path is in a protected system directory"

    return True, ""


def validate_backup_dir(backup_dir: Optional[Path]) -> tuple[bool, str]:
    """Validate a backup directory chosen in the settings dialog.

    An empty value is valid and means "next to the destination save".

    Args:
        backup_dir: The directory to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not backup_dir:
        return True, ""

    if backup_dir.exists() and not backup_dir.is_dir():
        return False, "Backup location is not a directory"

    if not is_safe_path(backup_dir):
        return False, "Path is in a protected system directory"

    return True, ""
