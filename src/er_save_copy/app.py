"""Main application entry point and orchestrator"""

import sys

import customtkinter as ctk

from .config.manager import ConfigurationManager
from .core.save_locator import SaveLocator
from .gui.main_window import MainWindow
from .logging_config import setup_logging
from . import __version__


class SaveCopyApp:
    """Main application orchestrator.

    Loads the configuration and runs the main window.
    """

    def __init__(self):
        self.config_manager = ConfigurationManager()
        self.main_window: MainWindow | None = None

    def run(self):
        """Run the application."""
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.config_manager.load_or_default()

        self.main_window = MainWindow(self.config_manager, SaveLocator())
        self.main_window.mainloop()


def main():
    """Application entry point."""
    # Initialize logging first
    logger = setup_logging(debug="--debug" in sys.argv)
    logger.info(f"Starting ER Save Copy v{__version__}")

    try:
        app = SaveCopyApp()
        app.run()
    except Exception as e:
        logger.exception("Fatal error during startup")
        # Show error dialog if something goes wrong during startup
        import tkinter as tk
        from tkinter import messagebox

        root = tk.Tk()
        root.withdraw()
        messagebox.showerror(
            "Startup Error",
            f"Failed to start ER Save Copy:\n\n{e}"
        )
        root.destroy()
        sys.exit(1)
    finally:
        logger.info("ER Save Copy shutting down")


if __name__ == "__main__":
    main()
