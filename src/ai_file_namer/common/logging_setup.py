"""Central logging setup for the project."""
from __future__ import annotations
import logging
import os
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
QUIET_LOGGERS = ("httpx", "httpcore")

def resolve_level(level: int | str | None = None) -> int:
    """
    Turn a level name, number or ``$LOG_LEVEL`` into a logging level.

    Args:
        level: Explicit level; falls back to ``$LOG_LEVEL``, then INFO.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved

def setup_logging(level: int | str | None = None) -> None:
    """
    Send all project logs to stdout in one format.

    Args:
        level: Logging level for the root logger.
    """
    resolved = resolve_level(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved)
    # request lines from the provider client only at WARNING and above
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
