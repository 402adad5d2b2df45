"""ER Save Copy - character slot copier for Elden Ring save files.

This application provides:
    - Listing of the ten character slots in an ER0000.sl2 / ER0000.co2 save
    - Copying a character from one save file into a slot of another
    - Rewriting of the owner (Steam) identity inside the copied character
    - Recalculation of the MD5 checksums the game uses to detect corruption
    - Automatic rotated backups of the destination file before every write

The application uses CustomTkinter for the GUI and stores its configuration
in %APPDATA%/ERSaveCopy.

Package Structure:
    app: Main application entry point and orchestrator
    config: Configuration management, paths, schemas, and path validation
    core: Save layout, slot parsing, checksums, slot transplant and backups
    gui: User interface components (main window, settings dialog, widgets)
    assets: Icons and asset loading utilities

Quick Start:
    Run from command line::

        er-save-copy

    Or programmatically::

        from er_save_copy.app import main
        main()

Configuration:
    - Config file: %APPDATA%/ERSaveCopy/configuration.xml
    - Log file: %APPDATA%/ERSaveCopy/er_save_copy.log
    - Error log: error.log next to the destination save file
"""

__version__ = "1.0.0"
__app_name__ = "ER Save Copy"
