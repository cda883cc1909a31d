"""
Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-19

ConfigureLogger sets up application-wide logging on the root logger:
console output (INFO+ by default, dev-only records hidden), a rotating
session log file, and an optional DEBUG file. Levels, sizes and switches
come from draftkeep.config.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from draftkeep.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_LEVEL,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from draftkeep.utils.logging.logger_factory import LoggerFactory
from draftkeep.utils.logging.logger_file_helper import add_file_handler
from draftkeep.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """
    Configures application-wide logging.

    Handlers are only installed when the root logger has none yet, so
    constructing this twice is harmless.
    """

    def __init__(
        self,
        log_name: str = "draftkeep",
        log_dir: str = "logs",
        console_enabled: bool = LOG_TO_CONSOLE,
        file_enabled: bool = LOG_TO_FILE,
        debug_enabled: bool = LOG_DEBUG_FILE_ENABLED,
        level: str = LOG_LEVEL,
    ):
        """
        Initializes and configures the root logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            console_enabled (bool): Attach a stdout handler.
            file_enabled (bool): Attach the rotating session log file.
            debug_enabled (bool): Attach an extra DEBUG-level log file.
            level (str): Level of the draftkeep module loggers; DEBUG when the
                debug file is enabled.
        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self.log_file_path: str | None = None
        self.debug_file_path: str | None = None

        if self.logger.handlers:
            return

        module_level = logging.DEBUG if debug_enabled else getattr(logging, level, logging.INFO)
        LoggerFactory.set_global_level(module_level)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if console_enabled:
            self._setup_console_handler(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))

        if file_enabled:
            os.makedirs(log_dir, exist_ok=True)
            self.log_file_path = os.path.join(log_dir, f"{log_name}_{timestamp}.log")
            add_file_handler(
                logger=self.logger,
                log_path=self.log_file_path,
                level=getattr(logging, LOG_FILE_LEVEL, logging.INFO),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )

        if debug_enabled:
            self.debug_file_path = os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log")
            add_file_handler(
                logger=self.logger,
                log_path=self.debug_file_path,
                level=logging.DEBUG,
                max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int):
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)
