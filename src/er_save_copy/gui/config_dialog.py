"""Settings dialog"""

from tkinter import messagebox

import customtkinter as ctk

from ..config.manager import ConfigurationManager
from ..config.path_validator import validate_backup_dir
from ..config.paths import SavePaths
from ..logging_config import get_logger
from .styles import FONTS, PADDING, WINDOW_SIZES
from .widgets.path_selector import PathSelector

logger = get_logger("config_dialog")


class ConfigDialog(ctk.CTkToplevel):
    """Settings dialog with the backup preferences.

    Opened from the gear button of the main window. ``config_changed`` is
    True after the user saved.
    """

    def __init__(self, parent, config_manager: ConfigurationManager):
        """Initialize the settings dialog.

        Args:
            parent: Parent window
            config_manager: Configuration manager instance
        """
        super().__init__(parent)

        self.config_manager = config_manager
        self.config_changed = False

        self.title("Settings")
        width, height = WINDOW_SIZES["config_dialog"]
        self.geometry(f"{width}x{height}")
        self.resizable(False, False)

        # Center on parent
        self.transient(parent)
        self.grab_set()

        self._create_ui()

        self.focus_force()

    def _create_ui(self):
        """Create the dialog UI."""
        container = ctk.CTkFrame(self)
        container.pack(fill="both", expand=True, padx=PADDING["large"], pady=PADDING["large"])

        title = ctk.CTkLabel(container, text="Settings", font=FONTS["title"])
        title.pack(anchor="w", pady=(0, 5))

        subtitle = ctk.CTkLabel(
            container,
            text="Backups are taken before every copy",
            font=FONTS["body"],
            text_color="gray",
        )
        subtitle.pack(anchor="w", pady=(0, PADDING["medium"]))

        self._create_backup_settings_section(container)
        self._create_buttons(container)

    def _create_backup_settings_section(self, parent):
        """Create the backup settings section."""
        settings = self.config_manager.config.settings

        section = ctk.CTkFrame(parent)
        section.pack(fill="x")

        header = ctk.CTkLabel(section, text="Backup Settings", font=FONTS["heading"])
        header.pack(anchor="w", padx=PADDING["medium"], pady=PADDING["small"])

        self.backup_path_selector = PathSelector(
            section,
            label="Backup Folder:",
            initial_path=settings.backup_location,
            directory=True,
            fg_color="transparent",
        )
        self.backup_path_selector.pack(fill="x", padx=PADDING["medium"], pady=PADDING["small"])

        hint = ctk.CTkLabel(
            section,
            text=f"Leave empty to keep backups in a {SavePaths.BACKUP_DIR_NAME} folder next to the save",
            font=FONTS["small"],
            text_color="gray",
        )
        hint.pack(anchor="w", padx=PADDING["medium"])

        # Max backups
        max_frame = ctk.CTkFrame(section, fg_color="transparent")
        max_frame.pack(fill="x", padx=PADDING["medium"], pady=PADDING["small"])

        max_label = ctk.CTkLabel(max_frame, text="Backups kept per save file:", font=FONTS["body"])
        max_label.pack(side="left")

        self.max_backups_var = ctk.IntVar(value=settings.max_backups)
        self.max_backups_label = ctk.CTkLabel(max_frame, text=str(self.max_backups_var.get()), width=30)
        self.max_backups_label.pack(side="right", padx=(10, 0))

        self.max_backups_slider = ctk.CTkSlider(
            max_frame,
            from_=1,
            to=50,
            number_of_steps=49,
            variable=self.max_backups_var,
            command=self._on_slider_change,
        )
        self.max_backups_slider.pack(side="right", padx=10)

        self.remove_game_backup_var = ctk.BooleanVar(value=settings.remove_game_backup)
        remove_cb = ctk.CTkCheckBox(
            section,
            text="Delete the game's ER0000.bak after copying",
            variable=self.remove_game_backup_var,
            font=FONTS["body"],
        )
        remove_cb.pack(anchor="w", padx=PADDING["medium"], pady=(PADDING["small"], PADDING["medium"]))

    def _on_slider_change(self, value):
        """Update the max backups label when slider changes."""
        self.max_backups_label.configure(text=str(int(value)))

    def _create_buttons(self, parent):
        """Create the dialog buttons."""
        button_frame = ctk.CTkFrame(parent, fg_color="transparent")
        button_frame.pack(fill="x", pady=(PADDING["medium"], 0))

        cancel_btn = ctk.CTkButton(
            button_frame,
            text="Cancel",
            width=100,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        )
        cancel_btn.pack(side="left")

        save_btn = ctk.CTkButton(button_frame, text="Save", width=120, command=self._save_and_close)
        save_btn.pack(side="right")

    def _save_and_close(self):
        """Save configuration and close dialog."""
        backup_path = self.backup_path_selector.get_path()
        is_valid, error = validate_backup_dir(backup_path)
        if not is_valid:
            messagebox.showerror("Invalid Backup Folder", error, parent=self)
            return

        settings = self.config_manager.config.settings
        settings.backup_location = backup_path
        settings.max_backups = int(self.max_backups_var.get())
        settings.remove_game_backup = bool(self.remove_game_backup_var.get())

        try:
            self.config_manager.save()
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")
            messagebox.showerror("Settings", f"Could not save settings:\n\n{e}", parent=self)
            return

        self.config_changed = True
        self.destroy()
