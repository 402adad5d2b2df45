"""Main application window: source and destination pickers and the copy button."""

from pathlib import Path
from typing import Optional
import tkinter as tk

import customtkinter as ctk

from .. import __app_name__, __version__
from ..assets.loader import get_asset_path, load_image
from ..config.manager import ConfigurationManager
from ..config.path_validator import validate_save_file
from ..core.backup_manager import BackupManager
from ..core.copy_session import CopySession, MessageType, SELECT_PROMPT
from ..core.errors import SaveCopyError
from ..core.save_locator import SaveLocator
from ..core.save_slot import EMPTY_SLOT, SaveSlot
from ..logging_config import get_logger
from .config_dialog import ConfigDialog
from .styles import COLORS, FONTS, PADDING, STATUS_COLORS, WINDOW_SIZES
from .widgets.path_selector import PathSelector

logger = get_logger("main_window")

NO_SLOTS = "No characters loaded"


def slot_label(slot: SaveSlot) -> str:
    """Option menu label; the slot number keeps labels unique."""
    return f"{slot.index + 1}. {slot.describe()}"


class MainWindow(ctk.CTk):
    """Main application window.

    Layout:
    - Toolbar with the settings button
    - Source file selector and character menu (active slots only)
    - Destination file selector and slot menu (all ten slots)
    - Copy button, enabled when a valid source and destination are selected
    - Status bar
    """

    def __init__(self, config_manager: ConfigurationManager, locator: Optional[SaveLocator] = None):
        super().__init__()

        self.config_manager = config_manager
        self.locator = locator or SaveLocator()
        self.session = CopySession()
        self._apply_settings()

        # Selection state lives here; the session only sees plain records
        self.source_slots: dict[str, SaveSlot] = {}
        self.target_slots: dict[str, SaveSlot] = {}
        self.selected_source: SaveSlot = EMPTY_SLOT
        self.selected_target: SaveSlot = EMPTY_SLOT

        self.title(f"{__app_name__} v{__version__}")
        width, height = WINDOW_SIZES["main"]
        min_width, min_height = WINDOW_SIZES["min_main"]
        self.geometry(f"{width}x{height}")
        self.minsize(min_width, min_height)

        self._set_app_icon()
        self._create_ui()
        self._update_copy_button()
        self._load_initial_source()

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _set_app_icon(self):
        try:
            icon_path = get_asset_path("icons/app_icon.ico")
            if icon_path.exists():
                self.iconbitmap(str(icon_path))
        except (OSError, tk.TclError) as e:
            logger.debug("Could not set app icon: %s", e)

    def _load_icon(self, relative_path: str, size: tuple[int, int] = (20, 20)) -> Optional[ctk.CTkImage]:
        image = load_image(relative_path)
        if image is None:
            return None
        return ctk.CTkImage(light_image=image, dark_image=image, size=size)

    def _apply_settings(self):
        """Push the configured backup settings into the session."""
        settings = self.config_manager.config.settings
        self.session.backup_manager = BackupManager(settings.backup_location, settings.max_backups)
        self.session.remove_game_backup = settings.remove_game_backup

    def _create_ui(self):
        """Create the main UI layout."""
        self._create_toolbar()

        container = ctk.CTkFrame(self, fg_color="transparent")
        container.pack(fill="both", expand=True, padx=PADDING["medium"], pady=(0, PADDING["medium"]))

        initial_dir = self.locator.initial_directory()

        # Source
        source_frame = ctk.CTkFrame(container)
        source_frame.pack(fill="x", pady=(0, PADDING["small"]))
        ctk.CTkLabel(source_frame, text="Source", font=FONTS["heading"]).pack(
            anchor="w", padx=PADDING["small"], pady=(PADDING["small"], 0)
        )
        self.source_selector = PathSelector(
            source_frame,
            label="Save File:",
            initial_dir=initial_dir,
            on_change=self._on_source_file_selected,
            fg_color="transparent",
        )
        self.source_selector.pack(fill="x", padx=PADDING["small"], pady=PADDING["small"])
        self.source_menu = ctk.CTkOptionMenu(
            source_frame, values=[NO_SLOTS], command=self._on_source_slot_changed, width=420
        )
        self.source_menu.pack(anchor="w", padx=PADDING["small"], pady=(0, PADDING["small"]))
        self._create_tooltip(self.source_menu, "Select the character you want to copy from")

        # Destination
        target_frame = ctk.CTkFrame(container)
        target_frame.pack(fill="x", pady=(0, PADDING["small"]))
        ctk.CTkLabel(target_frame, text="Destination", font=FONTS["heading"]).pack(
            anchor="w", padx=PADDING["small"], pady=(PADDING["small"], 0)
        )
        self.target_selector = PathSelector(
            target_frame,
            label="Save File:",
            initial_dir=initial_dir,
            on_change=self._on_target_file_selected,
            fg_color="transparent",
        )
        self.target_selector.pack(fill="x", padx=PADDING["small"], pady=PADDING["small"])
        self.target_menu = ctk.CTkOptionMenu(
            target_frame, values=[NO_SLOTS], command=self._on_target_slot_changed, width=420
        )
        self.target_menu.pack(anchor="w", padx=PADDING["small"], pady=(0, PADDING["small"]))
        self._create_tooltip(self.target_menu, "Select the slot where you want to copy the character to")

        self.copy_btn = ctk.CTkButton(
            container,
            text=SELECT_PROMPT,
            image=self._load_icon("icons/copy.png"),
            height=40,
            font=FONTS["body"],
            command=self._on_copy_clicked,
        )
        self.copy_btn.pack(fill="x", pady=(PADDING["small"], 0))
        self._create_tooltip(self.copy_btn, "Copy the selected character to the destination slot")

        self._create_status_bar()

    def _create_toolbar(self):
        """Create the top toolbar."""
        toolbar = ctk.CTkFrame(self, height=50, fg_color=COLORS["bar"])
        toolbar.pack(fill="x", padx=PADDING["medium"], pady=PADDING["medium"])
        toolbar.pack_propagate(False)

        title = ctk.CTkLabel(toolbar, text=__app_name__, font=FONTS["title"])
        title.pack(side="left", padx=PADDING["small"])

        gear_image = self._load_icon("icons/gear.png", size=(24, 24))
        self.settings_btn = ctk.CTkButton(
            toolbar,
            image=gear_image,
            text="" if gear_image else "Settings",
            width=40 if gear_image else 80,
            height=32,
            fg_color="transparent",
            hover_color=("gray80", "gray30"),
            command=self._show_settings,
        )
        self.settings_btn.pack(side="right", padx=PADDING["small"])
        self._create_tooltip(self.settings_btn, "Settings")

    def _create_status_bar(self):
        """Create the bottom status bar."""
        self.status_bar = ctk.CTkFrame(self, height=30, fg_color=COLORS["bar"])
        self.status_bar.pack(fill="x", side="bottom")
        self.status_bar.pack_propagate(False)

        self.status_label = ctk.CTkLabel(self.status_bar, text="Ready", font=FONTS["small"], anchor="w")
        self.status_label.pack(side="left", fill="x", expand=True, padx=PADDING["medium"])

    def _set_status(self, message: str, message_type: MessageType = MessageType.INFO):
        """Update the status bar text and color."""
        self.status_label.configure(text=message, text_color=STATUS_COLORS[message_type])

    def _load_initial_source(self):
        """Load the last used or an auto-detected source save."""
        settings = self.config_manager.config.settings
        path = settings.last_source_path
        if not path or not path.is_file():
            path = self.locator.find_save_file()

        if path:
            self.source_selector.set_path(path)
            self._on_source_file_selected(path)
        else:
            self._set_status(SELECT_PROMPT)

        if settings.last_target_path and settings.last_target_path.is_file():
            self.target_selector.set_path(settings.last_target_path)
            self._on_target_file_selected(settings.last_target_path)

    # Source / destination loading

    def _on_source_file_selected(self, path: Path):
        """Load the source file and list its characters."""
        self.source_slots = {}
        self.selected_source = EMPTY_SLOT

        is_valid, error = validate_save_file(path)
        if not is_valid:
            self._show_load_error("source", error)
            return

        try:
            slots = self.session.load_source(path)
        except SaveCopyError as e:
            logger.error(f"Failed to load source savegame file {path}: {e.describe()}")
            self._show_load_error("source", str(e))
            return

        self.source_slots = {slot_label(slot): slot for slot in slots}
        self._fill_menu(self.source_menu, self.source_slots)
        self.selected_source = slots[0]
        self._remember_paths(source=path)
        self._set_status("Source savegame file loaded successfully.")
        self._update_copy_button()

    def _on_target_file_selected(self, path: Path):
        """Load the destination file and list all of its slots."""
        self.target_slots = {}
        self.selected_target = EMPTY_SLOT

        is_valid, error = validate_save_file(path)
        if not is_valid:
            self._show_load_error("target", error)
            return

        try:
            slots = self.session.load_target(path)
        except SaveCopyError as e:
            logger.error(f"Failed to load target savegame file {path}: {e.describe()}")
            self._show_load_error("target", str(e))
            return

        self._show_target_slots(slots, select_index=0)
        self._remember_paths(target=path)
        self._set_status("Target savegame file loaded successfully.")

    def _show_target_slots(self, slots: list[SaveSlot], select_index: int):
        self.target_slots = {slot_label(slot): slot for slot in slots}
        self._fill_menu(self.target_menu, self.target_slots)
        self.selected_target = self.session.find_target_slot(select_index) or EMPTY_SLOT
        if not self.selected_target.is_empty:
            self.target_menu.set(slot_label(self.selected_target))
        self._update_copy_button()

    def _show_load_error(self, file_type: str, message: str):
        selector = self.source_selector if file_type == "source" else self.target_selector
        menu = self.source_menu if file_type == "source" else self.target_menu
        selector.set_text("Failed to load")
        self._fill_menu(menu, {})
        self._set_status(f"Failed to load {file_type} savegame file: {message}", MessageType.ERROR)
        self._update_copy_button()

    @staticmethod
    def _fill_menu(menu: ctk.CTkOptionMenu, slots: dict[str, SaveSlot]):
        labels = list(slots) or [NO_SLOTS]
        menu.configure(values=labels)
        menu.set(labels[0])

    def _on_source_slot_changed(self, label: str):
        self.selected_source = self.source_slots.get(label, EMPTY_SLOT)
        self._update_copy_button()

    def _on_target_slot_changed(self, label: str):
        self.selected_target = self.target_slots.get(label, EMPTY_SLOT)
        self._update_copy_button()

    def _update_copy_button(self):
        """Enable the copy button and set its caption from the selection."""
        text = self.session.describe_copy(self.selected_source, self.selected_target)
        if self.session.can_copy(self.selected_source, self.selected_target):
            self.copy_btn.configure(
                state="normal", text=text, fg_color=COLORS["primary"], hover_color=COLORS["primary_hover"]
            )
        else:
            self.copy_btn.configure(state="disabled", text=text, fg_color=COLORS["danger"])

    # Copy

    def _on_copy_clicked(self):
        """Copy the selected character and refresh the destination list."""
        self.copy_btn.configure(state="disabled")
        target_index = self.selected_target.index

        result = self.session.copy(self.selected_source, self.selected_target)
        self._set_status(result.message, result.message_type)

        if result.success and self.session.target is not None:
            self._show_target_slots(self.session.target.slots, select_index=target_index)
            self.copy_btn.configure(text="Copy Successful!", fg_color=COLORS["success"])
        else:
            self._update_copy_button()
            self.copy_btn.configure(text="Copy Failed!", fg_color=COLORS["danger"])

    # Settings

    def _show_settings(self):
        dialog = ConfigDialog(self, self.config_manager)
        self.wait_window(dialog)
        if dialog.config_changed:
            self._apply_settings()
            self._set_status("Settings saved")

    def _remember_paths(self, source: Optional[Path] = None, target: Optional[Path] = None):
        self.config_manager.config.remember_paths(source, target)

    def _on_close(self):
        try:
            self.config_manager.save()
        except OSError as e:
            logger.warning(f"Could not save configuration on exit: {e}")
        self.destroy()

    def _create_tooltip(self, widget, text: str):
        """Create a hover tooltip for a widget (displays above the widget)."""
        tooltip = None

        def show_tooltip(event):
            nonlocal tooltip
            hide_tooltip(None)
            if not widget.winfo_exists():
                return
            x = widget.winfo_rootx()
            y = widget.winfo_rooty() - 30

            tooltip = ctk.CTkToplevel(widget)
            tooltip.wm_overrideredirect(True)
            tooltip.wm_geometry(f"+{x}+{y}")
            label = ctk.CTkLabel(
                tooltip, text=text, font=FONTS["small"], fg_color=("gray85", "gray20"), corner_radius=4
            )
            label.pack(padx=4, pady=2)

        def hide_tooltip(event):
            nonlocal tooltip
            if tooltip is not None:
                tooltip.destroy()
                tooltip = None

        widget.bind("<Enter>", show_tooltip, add="+")
        widget.bind("<Leave>", hide_tooltip, add="+")
