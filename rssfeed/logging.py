"""Logging configuration for rssfeed."""

import json
import logging
import sys
import time

from rssfeed.config import get_settings


class JsonFormatter(logging.Formatter):
    """One JSON object per record, timestamped in UTC."""

    converter = time.gmtime

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname,
            "logger": record.name,
            "func": record.funcName,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base)


def setup_logging() -> None:
    """Configure root logging from the current settings.

    Production (`RSS_ENV=prod`) emits one JSON object per line so the host's
    log collector can ingest it; development uses a readable line format.
    """
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)

    if settings.env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())
