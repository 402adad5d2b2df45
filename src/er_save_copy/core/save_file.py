"""Whole-file reads and writes of save containers."""

import os
from pathlib import Path

from .errors import SaveFileError
from ..logging_config import get_logger

logger = get_logger("save_file")


def read_save_file(path: Path) -> bytes:
    """Read a save file into memory.

    Raises:
        SaveFileError: If the file cannot be read
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        raise SaveFileError(f"Could not read {path.name}: {e}", step="read") from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data


def write_save_file(path: Path, data: bytes) -> None:
    """Replace the content of a save file.

    The bytes go to a temporary sibling first and are moved over the save,
    so an interrupted write leaves the previous file in place.

    Raises:
        SaveFileError: If the file cannot be written
    """
    temp_path = path.with_name(path.name + ".tmp")
    try:
        temp_path.write_bytes(data)
        os.replace(temp_path, path)
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}")
        try:
            temp_path.unlink(missing_ok=True)
        except OSError as cleanup_error:
            logger.debug(f"Could not remove {temp_path}: {cleanup_error}")
        raise SaveFileError(f"Could not write {path.name}: {e}", step="write") from e

    logger.info(f"Wrote {len(data)} bytes to {path}")
