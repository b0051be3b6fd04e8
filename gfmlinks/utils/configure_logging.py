import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(
    home_dir: Path | None = None,
    level: str = "INFO",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure unified gfmlinks logging.

    Args:
        home_dir: Path to gfmlinks home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR
        max_bytes: Rotate the log file after this many bytes
        backup_count: Number of rotated files to keep
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home_dir is None:
        from ..api.config.get_home_dir import get_home_dir

        home_dir = get_home_dir()

    # Ensure directory exists
    home_dir.mkdir(parents=True, exist_ok=True)
    log_file = home_dir / LOG_FILE_NAME

    root_logger = logging.getLogger("gfmlinks")
    root_logger.setLevel(_LEVELS.get(level, logging.INFO))

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
