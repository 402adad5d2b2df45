"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DEFAULT_MAX_BACKUPS = 10


@dataclass
class Settings:
    """Application settings"""
    backup_location: Optional[Path] = None  # None = next to the destination save
    max_backups: int = DEFAULT_MAX_BACKUPS
    remove_game_backup: bool = True  # delete the game's <save>.bak after a copy
    last_source_path: Optional[Path] = None
    last_target_path: Optional[Path] = None


@dataclass
class AppConfiguration:
    """Complete application configuration"""
    settings: Settings = field(default_factory=Settings)

    def remember_paths(self, source: Optional[Path], target: Optional[Path]) -> None:
        """Record the most recently used save files.

        Args:
            source: Source save path, or None to keep the stored value
            target: Destination save path, or None to keep the stored value
        """
        if source is not None:
            self.settings.last_source_path = source
        if target is not None:
            self.settings.last_target_path = target
