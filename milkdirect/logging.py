"""
Logging setup shared by the API, services and scripts.

    from milkdirect.logging import get_logger
    logger = get_logger(__name__)

The root handler is installed once when this module is first imported.
`LOG_LEVEL` picks the level; on Vercel (`VERCEL=1`) the timestamp is left
to the platform.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Chatty client libraries under every Supabase and assistant call
QUIET_LOGGERS = ("httpx", "httpcore", "hpack")

ID_LOG_LENGTH = 8


def _level_from_env() -> int:
    return getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)


def _install_root_handler() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = _level_from_env()
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    on_vercel = os.environ.get("VERCEL") == "1"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if on_vercel else LOG_FORMAT))

    root.setLevel(level)
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_install_root_handler()


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for a module, usually called with `__name__`."""
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | int | None) -> str:
    """
    Shorten a user or order id for a log line.

    Only the first 8 characters are kept. Control characters are escaped so
    an id taken from a request cannot forge extra log lines (CWE-117).
    """
    if id_value is None or id_value == "":
        return "N/A"
    text = (
        str(id_value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    return text[:ID_LOG_LENGTH]


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_id_for_logging",
]
