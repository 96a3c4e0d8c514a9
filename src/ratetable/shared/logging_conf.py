# src/ratetable/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for the service.
It sets up consistent formatting, log levels and output handlers, and is
also used for uvicorn's own loggers (they propagate to the root logger).

Files that USE this module:
- ratetable.app (setup_logging function for logging initialization)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_stdout: bool = True,
) -> None:
    """
    Configure application-wide logging settings.

    Can output to stdout, file, or both. Supports log rotation for file
    logging.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; ratetable.log is written there
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)
        log_to_stdout: Whether to also log to stdout
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: list[logging.Handler] = []

    if log_to_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        handlers.append(stdout_handler)

    log_file_path: Optional[Path] = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "ratetable.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # If no handlers specified, default to stdout
    if not handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        handlers = [handler]

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path:
        logger.info("Logging configured: file=%s, level=%s", log_file_path, logging.getLevelName(level))
    else:
        logger.info("Logging configured: stdout, level=%s", logging.getLevelName(level))
