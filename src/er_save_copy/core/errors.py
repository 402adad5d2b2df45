"""Exceptions raised by the save copy core.

Every error carries an optional ``step`` (which part of the operation
failed) and ``slot`` (which slot index was involved) so the caller can
write a useful error log entry.
"""

from typing import Optional


class SaveCopyError(Exception):
    """Base class for all save copy failures."""

    def __init__(self, message: str, step: Optional[str] = None, slot: Optional[int] = None):
        super().__init__(message)
        self.step = step
        self.slot = slot

    def describe(self) -> str:
        """Message prefixed with the failing step and slot, when known."""
        context = []
        if self.step:
            context.append(f"step '{self.step}'")
        if self.slot is not None:
            context.append(f"slot {self.slot + 1}")
        if not context:
            return str(self)
        return f"{str(self)} ({', '.join(context)})"


class FormatError(SaveCopyError):
    """Buffer too short for the layout, bad slot index or owner id mismatch."""


class DigestError(SaveCopyError):
    """The checksum could not be computed."""


class SaveFileError(SaveCopyError):
    """Reading or writing a save file failed."""


class BackupError(SaveCopyError):
    """Creating or rotating a backup failed."""


class NoActiveSlotsError(SaveCopyError):
    """The source save contains no character to copy."""
