"""Configuration management - load/save XML configuration"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional
from xml.dom import minidom

from .paths import SavePaths
from .schema import AppConfiguration, DEFAULT_MAX_BACKUPS, Settings
from ..logging_config import get_logger

logger = get_logger("config_manager")


class ConfigurationManager:
    """Manages application configuration persistence.

    Handles loading and saving configuration to XML format. A missing or
    unreadable file yields the default configuration.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or SavePaths.CONFIG_FILE
        self.config: AppConfiguration = AppConfiguration()

    def load_or_default(self) -> AppConfiguration:
        """Load the configuration, falling back to defaults.

        Returns:
            The loaded or default AppConfiguration
        """
        if not self.config_path.exists():
            logger.debug(f"No configuration at {self.config_path}, using defaults")
            self.config = AppConfiguration()
            return self.config

        try:
            return self.load()
        except (ET.ParseError, ValueError, OSError) as e:
            # Corrupted config = start from defaults
            logger.warning(f"Could not load config, using defaults: {e}")
            self.config = AppConfiguration()
            return self.config

    def load(self) -> AppConfiguration:
        """Load configuration from XML file.

        Returns:
            AppConfiguration object with loaded settings

        Raises:
            FileNotFoundError: If config file doesn't exist
            ET.ParseError: If XML is malformed
        """
        logger.debug(f"Loading configuration from {self.config_path}")
        tree = ET.parse(self.config_path)
        root = tree.getroot()

        settings_elem = root.find("Settings")
        if settings_elem is not None:
            settings = Settings(
                backup_location=self._parse_path(settings_elem, "BackupLocation"),
                max_backups=self._parse_int(settings_elem, "MaxBackups", DEFAULT_MAX_BACKUPS),
                remove_game_backup=self._parse_bool(settings_elem, "RemoveGameBackup", True),
                last_source_path=self._parse_path(settings_elem, "LastSourcePath"),
                last_target_path=self._parse_path(settings_elem, "LastTargetPath"),
            )
        else:
            # Missing Settings element - use all defaults
            settings = Settings()

        self.config = AppConfiguration(settings=settings)
        return self.config

    def save(self) -> None:
        """Save current configuration to XML file.

        Creates the configuration directory if it doesn't exist.
        """
        logger.debug(f"Saving configuration to {self.config_path}")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        settings = self.config.settings
        root = ET.Element("ERSaveCopy", version="1.0")

        settings_elem = ET.SubElement(root, "Settings")
        ET.SubElement(settings_elem, "BackupLocation").text = str(settings.backup_location or "")
        ET.SubElement(settings_elem, "MaxBackups").text = str(settings.max_backups)
        ET.SubElement(settings_elem, "RemoveGameBackup").text = str(settings.remove_game_backup).lower()
        ET.SubElement(settings_elem, "LastSourcePath").text = str(settings.last_source_path or "")
        ET.SubElement(settings_elem, "LastTargetPath").text = str(settings.last_target_path or "")

        # Write pretty-printed XML
        xml_str = minidom.parseString(ET.tostring(root, encoding="unicode")).toprettyxml(indent="  ")
        # Remove extra blank lines that minidom adds
        lines = [line for line in xml_str.split('\n') if line.strip()]
        xml_str = '\n'.join(lines)

        self.config_path.write_text(xml_str, encoding="utf-8")

    # Helper methods for XML parsing
    @staticmethod
    def _parse_bool(parent: ET.Element, tag: str, default: bool = False) -> bool:
        """Parse a boolean value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text:
            return elem.text.strip().lower() == "true"
        return default

    @staticmethod
    def _parse_int(parent: ET.Element, tag: str, default: int) -> int:
        """Parse a positive integer from child element."""
        elem = parent.find(tag)
        if elem is None or not elem.text or not elem.text.strip():
            return default
        value = int(elem.text.strip())
        if value < 1:
            raise ValueError(f"{tag} must be at least 1, got {value}")
        return value

    @staticmethod
    def _parse_path(parent: ET.Element, tag: str) -> Optional[Path]:
        """Parse a path value from child element."""
        elem = parent.find(tag)
        if elem is not None and elem.text and elem.text.strip():
            return SavePaths.expand_path(elem.text.strip())
        return None
