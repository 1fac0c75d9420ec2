#!/usr/bin/env python3
"""
Logging configuration module for the docs.rs MCP server.

Writes one JSON object per line to a rotating file under the configured
logs directory. Nothing is written to stdout, which carries the MCP
protocol on the stdio transport.
"""

import datetime
import json
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import Settings

LOGGER_NAME = "DocsRsServer"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


class JsonFormatter(logging.Formatter):
    """Formats a record as JSON, flattening ``extra_data`` into the top level."""

    def format(self, record):
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        entry.update(getattr(record, 'extra_data', None) or {})
        if record.exc_info:
            entry['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(settings: Optional[Settings] = None, name: str = LOGGER_NAME):
    """
    Configure the server's JSON file logger.

    Args:
        settings: Source of the logs directory and level. Defaults to Settings()
        name: Logger name

    Returns:
        Configured logger instance. Calling again only updates the level.
    """
    if settings is None:
        settings = Settings()

    logger = logging.getLogger(name)
    logger.setLevel(settings.log_level)
    logger.propagate = False

    if logger.handlers:
        return logger

    settings.logs_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        settings.logs_dir / f"{datetime.date.today()}.log",
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding='utf-8'
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    return logger
