"""Logging configuration for ER Save Copy.

Provides centralized logging setup with file and console handlers.
Log files are stored in the application's config directory. Copy failures
are additionally appended to an error.log beside the destination save so
the user can find them without knowing where the application keeps its data.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure application-wide logging.

    Sets up logging to both file and console (if debug mode).
    Log file is stored in %APPDATA%/ERSaveCopy/er_save_copy.log

    Args:
        debug: If True, also log to console at DEBUG level

    Returns:
        The root logger for the application
    """
    # config imports this module, so SavePaths is resolved at call time
    from .config.paths import SavePaths

    # Ensure config directory exists for log file
    log_dir = SavePaths.ensure_config_dir()
    log_file = log_dir / SavePaths.LOG_FILE.name

    logger = logging.getLogger("er_save_copy")
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    # File handler - always logs DEBUG and above
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # Console handler - only in debug mode
    if debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_formatter = logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Module name (e.g., 'transplant', 'backup_manager')

    Returns:
        A logger instance for the module
    """
    return logging.getLogger(f"er_save_copy.{name}")


def append_error_log(directory: Path, message: str, exc: Optional[BaseException] = None) -> Path:
    """Append a timestamped entry to error.log in the given directory.

    Args:
        directory: Directory that receives the error.log file
        message: Human readable description of what failed
        exc: Optional exception whose traceback is included

    Returns:
        Path to the error log
    """
    from .config.paths import SavePaths

    log_path = directory / SavePaths.ERROR_LOG_NAME

    error_logger = logging.getLogger("er_save_copy.error_log")
    # error.log only; callers write their own application log entry
    error_logger.propagate = False
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    error_logger.addHandler(handler)
    try:
        error_logger.error(message, exc_info=exc)
    finally:
        error_logger.removeHandler(handler)
        handler.close()

    return log_path
