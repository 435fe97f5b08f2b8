"""Console logging for the webhook service and the polling runner."""

import logging
import logging.config
import re
from typing import Any

from telegate.core.context import get_request_id

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(request_id)s %(name)s: %(message)s"

# Bot API URLs carry the token as a path segment: /bot<id>:<secret>/<method>
_BOT_TOKEN_PATH = re.compile(r"/bot\d+:[\w-]+")
# httpx and httpcore log every request URL at INFO/DEBUG.
_URL_LOGGING_LIBRARIES = ("httpx", "httpcore")


def redact_token(text: str) -> str:
    """Replace any Bot API token embedded in a URL path with ``***``."""
    return _BOT_TOKEN_PATH.sub("/bot***", text)


class RequestContextFilter(logging.Filter):
    """Stamp ``request_id`` on each record and scrub bot tokens from its message."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        message = record.getMessage()
        redacted = redact_token(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def build_logging_config(level: str) -> dict[str, Any]:
    root_level = level.strip().upper()
    if root_level not in LOG_LEVELS:
        raise ValueError(
            f"Invalid LOG_LEVEL '{level}'. Expected one of: {', '.join(sorted(LOG_LEVELS))}"
        )
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"console": {"format": LOG_FORMAT}},
        "filters": {"request_context": {"()": RequestContextFilter}},
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "console",
                "filters": ["request_context"],
            }
        },
        "loggers": {name: {"level": "WARNING"} for name in _URL_LOGGING_LIBRARIES},
        "root": {"level": root_level, "handlers": ["stdout"]},
    }


def configure_logging(level: str) -> None:
    logging.config.dictConfig(build_logging_config(level))
