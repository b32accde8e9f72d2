"""Structured logging shared by every module."""

import logging
import sys
from pathlib import Path
from typing import Optional, Set

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Names of loggers configured through get_logger, so set_log_level can reach them.
_configured: Set[str] = set()


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a configured logger (creates handler only once per name)."""
    from src.utils.config import settings

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    effective_level = getattr(logging, (level or settings.log_level).upper(), logging.WARNING)
    logger.setLevel(effective_level)
    logger.propagate = False

    # stdout belongs to the chat transcript
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)

    # Optional file handler
    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(fh)

    _configured.add(name)
    return logger


def set_log_level(level: str) -> None:
    """Change the level of every logger handed out by ``get_logger``."""
    effective_level = getattr(logging, level.upper(), logging.WARNING)
    for name in _configured:
        logging.getLogger(name).setLevel(effective_level)
