# utils/logger.py
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Optional

from vultr_cli.core.constants import LOG_BACKUP_COUNT, LOG_ROTATION_MAX_BYTES

# Process-wide defaults, set once by the CLI from --verbose and settings.yaml
_defaults = {"level": "INFO", "log_dir": None}


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """Set the level and log directory used by every later setup_logger call."""
    _defaults["level"] = level
    _defaults["log_dir"] = log_dir or None


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: Optional[str] = None,
    console: bool = True,
    max_bytes: int = LOG_ROTATION_MAX_BYTES,
    backup_count: int = LOG_BACKUP_COUNT,
) -> logging.Logger:
    """Setup logger with console and optional rotating file output.

    Console output goes to stderr at WARNING and above so that tables
    printed on stdout are never interleaved with log lines. File output
    is only enabled when a log directory is configured (or LOG_PATH is set).
    Calling again for an existing logger re-applies the current level and
    adds the file handler if the log directory appeared since.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or _defaults["level"]).upper()))
    logger.propagate = False

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if not logger.handlers:
        if console:
            stream_handler = logging.StreamHandler(sys.stderr)
            stream_handler.setFormatter(formatter)
            stream_handler.setLevel(logging.WARNING)
            logger.addHandler(stream_handler)
        else:
            # Keeps records away from logging's last-resort stderr handler
            logger.addHandler(logging.NullHandler())

    logs_dir = _defaults["log_dir"] or os.getenv("LOG_PATH")
    if log_file and logs_dir:
        log_path = Path(logs_dir).expanduser() / log_file
        attached = any(
            isinstance(h, logging.FileHandler)
            and h.baseFilename == os.path.abspath(log_path)
            for h in logger.handlers
        )

        if not attached:
            try:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.handlers.RotatingFileHandler(
                    log_path,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8",
                )
                file_handler.setFormatter(formatter)
                file_handler.setLevel(logging.DEBUG)  # All levels to file
                logger.addHandler(file_handler)

            except (OSError, PermissionError) as e:
                logger.warning(
                    f"Failed to create log file {log_path}: {e}. Logging to console only."
                )

    return logger
