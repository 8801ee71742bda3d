# pubsub_service/core/logging_service.py
"""
Logging service implementing ILogger interface.
Separated from config for Single Responsibility Principle.
"""

import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from typing import Optional

from flask import Flask

from .interfaces import ILogger, IConfigProvider


class ColorFormatter(logging.Formatter):
    """Console formatter with colors and emojis"""

    _COLORS = {
        logging.DEBUG: "\x1b[38;5;244m",  # gray
        logging.INFO: "\x1b[32;20m",  # green
        logging.WARNING: "\x1b[33;20m",  # yellow
        logging.ERROR: "\x1b[31;20m",  # red
        logging.CRITICAL: "\x1b[31;1m",  # red bold
        "reset": "\x1b[0m",
    }

    _EMOJIS = {
        logging.DEBUG: "🐛 ",
        logging.INFO: "ℹ️ ",
        logging.WARNING: "⚠️ ",
        logging.ERROR: "🛑 ",
        logging.CRITICAL: "💥 ",
    }

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")
        lvl = record.levelno

        color = self._COLORS.get(lvl, "")
        emoji = self._EMOJIS.get(lvl, "")

        base = f"{ts} | {record.levelname:<8} | [{record.name}] | {emoji}{record.getMessage()}"
        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        return f"{color}{base}{self._COLORS['reset']}"


class LoggingService(ILogger):
    """
    Logging service implementing ILogger interface.
    Follows Single Responsibility Principle for logging setup.
    """

    QUIET_LOGGERS = ("werkzeug", "waitress", "urllib3", "google")

    def __init__(self, config: IConfigProvider):
        self.config = config
        self.log_file: Optional[str] = None

    def configure(self, app: Optional[Flask] = None) -> None:
        """Configure root logging, optionally binding a Flask application"""
        try:
            level = logging.getLevelName(self.config.get("LOG_LEVEL", "INFO"))
            if not isinstance(level, int):
                level = logging.INFO

            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(ColorFormatter())

            root_logger = logging.getLogger()
            root_logger.setLevel(logging.DEBUG)

            # Clear existing handlers
            for h in list(root_logger.handlers):
                root_logger.removeHandler(h)

            root_logger.addHandler(console_handler)

            logs_dir = self.config.get("LOG_DIR")
            if logs_dir:
                root_logger.addHandler(self._file_handler(logs_dir))

            for name in self.QUIET_LOGGERS:
                logging.getLogger(name).setLevel(logging.WARNING)

            if app is not None:
                app.logger.setLevel(level)

            self.get_logger(__name__).info(
                "🚀 Logging configured (env=%s, level=%s, file=%s)",
                str(self.config.get("ENV", "")).upper(),
                logging.getLevelName(level),
                self.log_file or "-",
            )

        except Exception as e:
            raise RuntimeError(f"Failed to configure logging: {e}") from e

    def _file_handler(self, logs_dir: str) -> RotatingFileHandler:
        os.makedirs(logs_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        self.log_file = os.path.join(logs_dir, f"app_{timestamp}.log")

        file_handler = RotatingFileHandler(
            filename=self.log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)-8s | [%(name)s] | %(module)s:%(lineno)d\n"
                "→ %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        file_handler.setLevel(logging.DEBUG)
        return file_handler

    def get_logger(self, name: str) -> logging.Logger:
        """Get logger by name"""
        return logging.getLogger(name)
