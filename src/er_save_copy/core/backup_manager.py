"""Rotated backups of save files taken before they are overwritten.

Backups are plain copies stored in a SaveCopyBackups folder next to the
save, or in a sub-folder of the configured backup location named after the
save's folder (the Steam account id), since every account's save has the same
file name:

    SaveCopyBackups/            or   <backup location>/76561198000000001/
        ER0000_2026-01-16_143052.sl2
        ER0000_2026-01-16_150000.sl2
        ER0000_2026-01-16_150000_1.sl2

Only the newest ``max_backups`` copies of each save are kept. Age is read
from the timestamp and counter in the file name.
"""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.paths import SavePaths
from ..config.schema import DEFAULT_MAX_BACKUPS
from .errors import BackupError
from ..logging_config import get_logger

logger = get_logger("backup_manager")

TIMESTAMP_FORMAT = "%Y-%m-%d_%H%M%S"
TIMESTAMP_LENGTH = len(datetime(2000, 1, 1).strftime(TIMESTAMP_FORMAT))


class BackupManager:
    """Create and rotate backups of save files.

    Also owns the policy for the game's own ``<save>.bak`` file, which the
    game may restore from on the next launch and so undo a copy.
    """

    def __init__(
        self,
        backup_root: Optional[Path] = None,
        max_backups: int = DEFAULT_MAX_BACKUPS,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the backup manager.

        Args:
            backup_root: Directory for backups, None to use one next to each save
            max_backups: Number of backups kept per save file
            clock: Source of the timestamp used in backup names
        """
        if max_backups < 1:
            raise ValueError("max_backups must be at least 1")
        self.backup_root = backup_root
        self.max_backups = max_backups
        self.clock = clock

    def backup_dir_for(self, save_path: Path) -> Path:
        """Directory that holds the backups of save_path."""
        if self.backup_root is None:
            return SavePaths.default_backup_dir(save_path)
        return self.backup_root / save_path.parent.name

    def get_next_backup_path(self, save_path: Path) -> Path:
        """Return an unused backup path for save_path.

        Args:
            save_path: The save file about to be backed up

        Returns:
            Path of the form <dir>/<stem>_<timestamp>[_n]<suffix>
        """
        backup_dir = self.backup_dir_for(save_path)
        base_name = f"{save_path.stem}_{self.clock().strftime(TIMESTAMP_FORMAT)}"

        candidate = backup_dir / f"{base_name}{save_path.suffix}"
        counter = 1
        while candidate.exists():
            candidate = backup_dir / f"{base_name}_{counter}{save_path.suffix}"
            counter += 1
        return candidate

    def create_backup(self, save_path: Path, data: bytes) -> Path:
        """Write data as a new backup of save_path and rotate old backups.

        Args:
            save_path: The save file being backed up
            data: Its current content

        Returns:
            Path to the new backup

        Raises:
            BackupError: If the backup cannot be written
        """
        backup_path = self.get_next_backup_path(save_path)
        try:
            backup_path.parent.mkdir(parents=True, exist_ok=True)
            backup_path.write_bytes(data)
        except OSError as e:
            logger.error(f"Failed to create backup {backup_path}: {e}")
            raise BackupError(f"Could not create backup: {e}", step="backup") from e

        logger.info(f"Backup created at {backup_path}")
        self._enforce_backup_limit(save_path)
        return backup_path

    def list_backups(self, save_path: Path) -> list[Path]:
        """Backups of save_path, newest first."""
        backup_dir = self.backup_dir_for(save_path)
        if not backup_dir.is_dir():
            return []

        backups = [
            path for path in backup_dir.glob(f"{save_path.stem}_*{save_path.suffix}")
            if path.is_file()
        ]
        return sorted(backups, key=lambda p: self._backup_age_key(p, save_path), reverse=True)

    def remove_game_backup(self, save_path: Path) -> bool:
        """Delete the game's own backup of save_path (``<save>.bak``).

        Returns:
            True if a file was deleted

        Raises:
            BackupError: If the file exists but cannot be deleted
        """
        game_backup = save_path.with_name(save_path.name + ".bak")
        if not game_backup.exists():
            return False

        try:
            game_backup.unlink()
        except OSError as e:
            logger.error(f"Failed to delete {game_backup}: {e}")
            raise BackupError(f"Could not delete {game_backup.name}: {e}", step="remove game backup") from e

        logger.info(f"Deleted game backup {game_backup}")
        return True

    @staticmethod
    def _backup_age_key(backup_path: Path, save_path: Path) -> tuple[str, int, str]:
        """Sort key from the <timestamp>[_n] part of a backup name."""
        rest = backup_path.stem[len(save_path.stem) + 1:]
        counter = rest[TIMESTAMP_LENGTH + 1:]
        return rest[:TIMESTAMP_LENGTH], int(counter) if counter.isdigit() else 0, backup_path.name

    def _enforce_backup_limit(self, save_path: Path) -> None:
        """Remove oldest backups of save_path if over the limit."""
        backups = self.list_backups(save_path)

        # Backups are sorted newest first
        for oldest in backups[self.max_backups:]:
            try:
                oldest.unlink()
                logger.debug(f"Removed old backup {oldest}")
            except OSError as e:
                # A backup that cannot be removed only means one extra copy is kept
                logger.warning(f"Could not remove old backup {oldest}: {e}")
