"""Logging setup for the blockgraph package."""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Attach a console handler (and optionally a file handler) to the package logger."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    package_logger = logging.getLogger("blockgraph")
    package_logger.setLevel(log_level)

    if not any(type(h) is logging.StreamHandler for h in package_logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        package_logger.addHandler(console)

    log_path = os.path.abspath(log_file) if log_file else None
    if log_path and not any(
        isinstance(h, logging.FileHandler) and h.baseFilename == log_path
        for h in package_logger.handlers
    ):
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger
