"""Copy workflow between a source and a destination save file.

The session holds the two loaded files and runs a copy end to end:
transplant in memory, back up the destination, write it, clean up the
game's own backup and reload. It knows nothing about widgets; the GUI
passes in the selected slot records and shows the returned messages.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from .backup_manager import BackupManager
from .checksum import verify_headers_checksum, verify_slot_checksum
from .errors import BackupError, NoActiveSlotsError, SaveCopyError
from .layout import ELDEN_RING_LAYOUT, SaveLayout
from .save_file import read_save_file, write_save_file
from .save_slot import SaveSlot, load_slots
from .transplant import read_owner_id, transplant
from ..logging_config import append_error_log, get_logger

logger = get_logger("copy_session")

SELECT_PROMPT = "Select Source and Destination file and characters"


class MessageType(Enum):
    """Kind of status message shown to the user"""
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"


@dataclass
class CopyResult:
    """Outcome of a copy, ready to be shown to the user."""
    success: bool
    message: str
    backup_path: Optional[Path] = None

    @property
    def message_type(self) -> MessageType:
        return MessageType.SUCCESS if self.success else MessageType.ERROR


@dataclass
class LoadedSave:
    """A save file held in memory together with its slot records."""
    path: Path
    data: bytes = field(repr=False)
    slots: list[SaveSlot] = field(repr=False)
    owner_id: bytes

    @property
    def active_slots(self) -> list[SaveSlot]:
        return [slot for slot in self.slots if slot.active]

    def owns(self, slot: SaveSlot) -> bool:
        """True if slot was produced from this load of the file."""
        return any(candidate.id == slot.id for candidate in self.slots)


class CopySession:
    """Source/destination state and the copy operation.

    Attributes:
        source: The loaded source save, if any
        target: The loaded destination save, if any
    """

    def __init__(
        self,
        backup_manager: Optional[BackupManager] = None,
        remove_game_backup: bool = True,
        layout: SaveLayout = ELDEN_RING_LAYOUT,
    ):
        self.backup_manager = backup_manager or BackupManager()
        self.remove_game_backup = remove_game_backup
        self.layout = layout
        self.source: Optional[LoadedSave] = None
        self.target: Optional[LoadedSave] = None

    def _load(self, path: Path, data: bytes) -> LoadedSave:
        slots = load_slots(data, self.layout)
        owner_id = read_owner_id(data, self.layout)

        if not verify_headers_checksum(data, self.layout):
            logger.warning(f"{path.name}: headers checksum does not match")
        for slot in slots:
            if slot.active and not verify_slot_checksum(data, slot.index, self.layout):
                logger.warning(f"{path.name}: checksum of slot {slot.index + 1} does not match")

        return LoadedSave(path=path, data=data, slots=slots, owner_id=owner_id)

    def load_source(self, path: Path) -> list[SaveSlot]:
        """Load the file characters are copied from.

        Returns:
            The active slots only

        Raises:
            SaveFileError: If the file cannot be read
            FormatError: If the file is not a valid save
            NoActiveSlotsError: If the file contains no character
        """
        self.source = None
        loaded = self._load(path, read_save_file(path))
        if not loaded.active_slots:
            raise NoActiveSlotsError("No active save slots found in source file.", step="load source")

        self.source = loaded
        logger.info(f"Loaded source {path} with {len(loaded.active_slots)} character(s)")
        return loaded.active_slots

    def load_target(self, path: Path) -> list[SaveSlot]:
        """Load the file characters are copied into.

        Returns:
            All slots; empty ones display as "Slot N"

        Raises:
            SaveFileError: If the file cannot be read
            FormatError: If the file is not a valid save
        """
        self.target = None
        self.target = self._load(path, read_save_file(path))
        logger.info(f"Loaded destination {path}")
        return self.target.slots

    def can_copy(self, source_slot: SaveSlot, target_slot: SaveSlot) -> bool:
        """True when both files and both slots are selected and the files differ."""
        if self.source is None or self.target is None:
            return False
        if not self.source.data or not self.target.data:
            return False
        if self.source.path.resolve() == self.target.path.resolve():
            return False
        if source_slot.is_empty or target_slot.is_empty:
            return False
        return self.source.owns(source_slot) and self.target.owns(target_slot)

    def describe_copy(self, source_slot: SaveSlot, target_slot: SaveSlot) -> str:
        """Caption for the copy button."""
        if not self.can_copy(source_slot, target_slot):
            return SELECT_PROMPT

        text = f"Copy source character {source_slot.display_name}"
        if target_slot.active:
            return f"{text} over destination character {target_slot.display_name}"
        return f"{text} on destination file {target_slot.display_name}"

    def copy(self, source_slot: SaveSlot, target_slot: SaveSlot) -> CopyResult:
        """Copy source_slot into target_slot and write the destination file.

        The destination is backed up before it is overwritten. On success the
        in-memory destination is replaced by what was written.

        Returns:
            CopyResult describing the outcome; failures are also logged and
            appended to error.log next to the destination file
        """
        if not self.can_copy(source_slot, target_slot):
            return CopyResult(False, SELECT_PROMPT)

        source, target = self.source, self.target
        backup_path = None
        try:
            new_data = transplant(
                source.data,
                source_slot.index,
                target.data,
                target_slot.index,
                source.owner_id,
                target.owner_id,
                self.layout,
            )
            backup_path = self.backup_manager.create_backup(target.path, target.data)
            write_save_file(target.path, new_data)
        except SaveCopyError as e:
            message = f"Copy failed: {e.describe()}"
            logger.error(message)
            self._append_error_log(target.path.parent, message, e)
            return CopyResult(False, message, backup_path)

        self.target = self._load(target.path, new_data)

        message = f"Copy successful! Backup saved as {backup_path.name}."
        game_backup = target.path.with_name(target.path.name + ".bak")
        if self.remove_game_backup:
            try:
                self.backup_manager.remove_game_backup(target.path)
            except BackupError as e:
                logger.warning(e.describe())
                message += f" Delete {game_backup.name} from the save folder before loading the game."
        elif game_backup.exists():
            message += f" Delete {game_backup.name} from the save folder before loading the game."

        return CopyResult(True, message, backup_path)

    def find_target_slot(self, index: int) -> Optional[SaveSlot]:
        """Current record for a destination slot index, after a reload."""
        if self.target is None:
            return None
        for slot in self.target.slots:
            if slot.index == index:
                return slot
        return None

    @staticmethod
    def _append_error_log(directory: Path, message: str, error: Exception) -> None:
        try:
            log_path = append_error_log(directory, message, error)
            logger.debug(f"Error recorded in {log_path}")
        except OSError as e:
            logger.warning(f"Could not write error log in {directory}: {e}")
