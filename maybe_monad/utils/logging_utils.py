"""
Logging utilities for maybe-monad.

This module standardizes logger setup across the package. Handlers are only
attached when the configuration asks for them, so an application embedding the
package sees no output unless it opts in.
"""

import sys
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from maybe_monad.utils.config_manager import config, get_debug_mode

PACKAGE_LOGGER_NAME = "maybe_monad"

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s"
)

# Marker attribute so handlers are only attached once per logger
_CONFIGURED_ATTR = "_maybe_monad_configured"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


class RotatingFileHandlerWithHeader(RotatingFileHandler):
    """RotatingFileHandler that writes a header line to every new log file."""

    def __init__(self, filename, header: Optional[str] = None, **kwargs):
        self.header = header
        super().__init__(filename, **kwargs)

        if self.header and self.stream is not None and self.stream.tell() == 0:
            self._write_header()

    def doRollover(self):
        super().doRollover()

        if self.header:
            self._write_header()

    def _write_header(self):
        self.stream.write(self.header + "\n")
        self.stream.flush()


def _short_name(logger_name: str) -> str:
    return logger_name.rsplit(".", 1)[-1]


def get_logger(logger_name: str, log_file_name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger configured from ``config.logging``.

    Args:
        logger_name: Name of the logger, usually ``__name__``
        log_file_name: Name of the log file (without directory path)

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    if getattr(logger, _CONFIGURED_ATTR, False):
        return logger

    if get_debug_mode(_short_name(logger_name)):
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(getattr(logging, config.logging.log_level, logging.WARNING))

    if config.logging.console_logging:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    if config.logging.enable_file_logging:
        if log_file_name is None:
            log_file_name = f"{logger_name.replace('.', '_')}.log"

        log_path = Path(config.logging.log_dir) / log_file_name
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandlerWithHeader(
            filename=str(log_path),
            header=f"--- Log started at {datetime.now().isoformat()} ({logger_name}) ---",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    # Console/file handlers on a child would double up with the package logger
    if logger.handlers and logger_name != PACKAGE_LOGGER_NAME:
        logger.propagate = False

    setattr(logger, _CONFIGURED_ATTR, True)
    return logger


def reset_logger(logger_name: str) -> None:
    """
    Drop the handlers attached by ``get_logger`` so the next call rebuilds them.

    Useful after changing ``config.logging`` at runtime.
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()

    logger.propagate = True
    if hasattr(logger, _CONFIGURED_ATTR):
        delattr(logger, _CONFIGURED_ATTR)
