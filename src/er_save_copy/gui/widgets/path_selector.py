"""Reusable path selection widget"""

from pathlib import Path
from tkinter import filedialog
from typing import Callable, Optional

import customtkinter as ctk

# File dialog filter for save files
SAVE_FILE_TYPES = [
    ("Elden Ring Save File", "ER0000.sl2"),
    ("Elden Ring Coop Save File", "ER0000.co2"),
    ("All files", "*.*"),
]


class PathSelector(ctk.CTkFrame):
    """A widget for selecting a save file or a directory.

    Combines a read-only entry showing the chosen path with a browse
    button. ``on_change`` fires only when the user picks a new path, not
    when the path is set programmatically.
    """

    def __init__(
        self,
        master,
        label: str = "Path:",
        initial_path: Optional[Path] = None,
        directory: bool = False,
        initial_dir: Optional[Path] = None,
        on_change: Optional[Callable[[Path], None]] = None,
        **kwargs
    ):
        """Initialize the path selector widget.

        Args:
            master: Parent widget
            label: Label text to display
            initial_path: Initial path value
            directory: If True, select directories; if False, select save files
            initial_dir: Directory the dialog opens in when no path is set
            on_change: Callback function when the user selects a path
            **kwargs: Additional arguments for CTkFrame
        """
        super().__init__(master, **kwargs)

        self.directory = directory
        self.initial_dir = initial_dir
        self.on_change = on_change

        self.grid_columnconfigure(1, weight=1)

        self.label = ctk.CTkLabel(self, text=label, width=90, anchor="w")
        self.label.grid(row=0, column=0, padx=(0, 10), sticky="w")

        self.path_var = ctk.StringVar(value=str(initial_path) if initial_path else "")
        self.entry = ctk.CTkEntry(self, textvariable=self.path_var, width=350)
        self.entry.grid(row=0, column=1, padx=(0, 10), sticky="ew")

        self.browse_btn = ctk.CTkButton(self, text="Browse", width=80, command=self._browse)
        self.browse_btn.grid(row=0, column=2, sticky="e")

    def _browse(self):
        """Open file dialog to select path."""
        initial_dir = self.initial_dir
        current_path = self.get_path()
        if current_path and current_path.exists():
            initial_dir = current_path if current_path.is_dir() else current_path.parent

        if self.directory:
            selected = filedialog.askdirectory(
                initialdir=str(initial_dir) if initial_dir else None,
                title="Select Directory",
            )
        else:
            selected = filedialog.askopenfilename(
                initialdir=str(initial_dir) if initial_dir else None,
                title="Select Save File",
                filetypes=SAVE_FILE_TYPES,
            )

        if selected:
            path = Path(selected)
            self.set_path(path)
            if self.on_change:
                self.on_change(path)

    def get_path(self) -> Optional[Path]:
        """Get the current path value.

        Returns:
            Path object or None if empty
        """
        value = self.path_var.get().strip()
        return Path(value) if value else None

    def set_path(self, path: Optional[Path]):
        """Set the path value without firing on_change."""
        self.path_var.set(str(path) if path else "")

    def set_text(self, text: str):
        """Show a message such as "Failed to load" instead of a path."""
        self.path_var.set(text)
