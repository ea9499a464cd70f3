"""
Centralized Logging Configuration

Console logging always; when a log directory is given, a general log file and
an errors-only log file are added next to it.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional


class LoggingConfig:
    """Logging configuration with optional file streams."""

    def __init__(self, level: str = "INFO", log_dir: Optional[str] = None):
        self.level = getattr(logging, level.upper(), None)
        if not isinstance(self.level, int):
            raise ValueError(f"Unknown log level: {level}")

        self.log_dir = Path(log_dir) if log_dir else None
        self.log_files: Dict[str, Path] = {}
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d")
            self.log_files = {
                'general': self.log_dir / f"fee_engine_{timestamp}.log",
                'errors': self.log_dir / f"errors_{timestamp}.log"
            }

        self.handlers: Dict[str, logging.Handler] = {}
        self._setup_loggers()

    def _setup_loggers(self):
        """Set up all logger configurations."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(self.level)

        self._create_formatters()
        self._setup_handlers()

        for handler in self.handlers.values():
            root_logger.addHandler(handler)

        # Uvicorn access lines duplicate the request middleware
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    def _create_formatters(self):
        """Create formatters for console and files."""
        self.file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        self.console_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    def _setup_handlers(self):
        """Set up console and file handlers."""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.level)
        console_handler.setFormatter(self.console_formatter)
        self.handlers['console'] = console_handler

        if not self.log_files:
            return

        general_handler = logging.FileHandler(self.log_files['general'], encoding='utf-8')
        general_handler.setLevel(self.level)
        general_handler.setFormatter(self.file_formatter)
        self.handlers['general'] = general_handler

        error_handler = logging.FileHandler(self.log_files['errors'], encoding='utf-8')
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(self.file_formatter)
        self.handlers['errors'] = error_handler

    def close(self):
        """Detach and close every handler this config installed."""
        root_logger = logging.getLogger()
        for handler in self.handlers.values():
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> LoggingConfig:
    """Set up logging configuration."""
    return LoggingConfig(level=level, log_dir=log_dir)
