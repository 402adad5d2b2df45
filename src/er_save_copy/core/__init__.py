"""Core business logic module.

This module contains the save format knowledge and the copy workflow.

Submodules:
    layout: Fixed offsets of the Elden Ring save container (SaveLayout)
    pattern: Byte pattern search used to locate the owner id
    save_slot: SaveSlot records projected from a save buffer
    checksum: MD5 checksums stored in front of protected ranges
    transplant: Copy of one slot between two save buffers
    save_file: Whole-file reads and writes
    backup_manager: Rotated backups taken before a save is overwritten
    save_locator: Auto-detection of save files
    copy_session: Source/destination workflow driven by the GUI
    errors: Exception hierarchy

layout, pattern, save_slot, checksum and transplant work on explicit byte
buffers and never touch the disk.
"""

from .copy_session import CopyResult, CopySession, MessageType
from .errors import (
    BackupError,
    DigestError,
    FormatError,
    NoActiveSlotsError,
    SaveCopyError,
    SaveFileError,
)
from .layout import ELDEN_RING_LAYOUT, SaveLayout
from .save_slot import EMPTY_SLOT, SaveSlot
from .transplant import transplant

__all__ = [
    "CopyResult",
    "CopySession",
    "MessageType",
    "BackupError",
    "DigestError",
    "FormatError",
    "NoActiveSlotsError",
    "SaveCopyError",
    "SaveFileError",
    "ELDEN_RING_LAYOUT",
    "SaveLayout",
    "EMPTY_SLOT",
    "SaveSlot",
    "transplant",
]
