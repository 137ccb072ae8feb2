"""Logging helpers shared by the measurement tools.

All diagnostics go through log() and handle_error() so the host can
redirect them (console, file, the application's text window) in one place.
"""

from __future__ import annotations

import logging
import sys
import traceback

from ... import config

_logger = logging.getLogger(config.LOGGER_NAME)


def setup_logging(level: int | None = None, log_file: str | None = None) -> None:
    """
    Configure the package logger.

    Args:
        level: Logging level; DEBUG when config.DEBUG is set, else INFO
        log_file: Optional path to also write logs to
    """
    if level is None:
        level = logging.DEBUG if config.DEBUG else logging.INFO

    _logger.setLevel(level)

    # Avoid duplicate handlers when re-initialised
    if _logger.hasHandlers():
        _logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    _logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        _logger.addHandler(file_handler)


def log(message: str, level: int = logging.INFO) -> None:
    """Write a message to the package log."""
    _logger.log(level, message)


def handle_error(name: str, show_traceback: bool = True) -> None:
    """
    Log the exception currently being handled.

    Call from inside an except block.

    Args:
        name: Where the error happened (function or command name)
        show_traceback: Include the formatted traceback
    """
    log('===== Error =====', logging.ERROR)
    if show_traceback:
        log(f'{name}\n{traceback.format_exc()}', logging.ERROR)
    else:
        log(f'{name}: {sys.exc_info()[1]}', logging.ERROR)
