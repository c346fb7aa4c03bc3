"""
Logging Configuration Module

Provides consistent logging setup across the document pipeline packages.
Modules log through logging.getLogger(__name__); setup_logging attaches
handlers to the top-level package loggers.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGERS = ("chunking", "pdf_extractor", "llm_json", "document_processing")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> list[logging.Logger]:
    """
    Configure logging for the document pipeline.

    Args:
        level: Logging level (default: INFO), as int or name
        log_file: Optional path to log file
        format_string: Optional custom format string

    Returns:
        The configured package loggers
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    loggers = []
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Remove existing handlers to avoid duplicates
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
        loggers.append(logger)

    return loggers
