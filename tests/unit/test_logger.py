"""Unit tests for logger setup and --verbose level changes."""

import logging
import uuid
from unittest.mock import patch

from src.utils.config import Settings
from src.utils.logger import get_logger, set_log_level


def _name():
    return f"test.logger.{uuid.uuid4().hex}"


def _close(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_default_logger_has_only_stderr_handler():
    with patch("src.utils.config.settings", Settings(log_level="WARNING", log_file="")):
        logger = get_logger(_name())
    try:
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
    finally:
        _close(logger)


def test_handler_created_once_per_name():
    name = _name()
    with patch("src.utils.config.settings", Settings(log_file="")):
        first = get_logger(name)
        second = get_logger(name)
    try:
        assert first is second
        assert len(first.handlers) == 1
    finally:
        _close(first)


def test_log_file_handler_writes(tmp_path):
    path = tmp_path / "logs" / "agent.log"
    with patch("src.utils.config.settings", Settings(log_level="INFO", log_file=str(path))):
        logger = get_logger(_name())
    try:
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        logger.info("hello file")
        for handler in logger.handlers:
            handler.flush()
        assert "hello file" in path.read_text(encoding="utf-8")
    finally:
        _close(logger)


def test_set_log_level_reaches_configured_loggers():
    with patch("src.utils.config.settings", Settings(log_level="WARNING", log_file="")):
        logger = get_logger(_name())
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("error")
        assert logger.level == logging.ERROR
    finally:
        set_log_level("WARNING")
        _close(logger)


def test_unknown_level_falls_back_to_warning():
    with patch("src.utils.config.settings", Settings(log_file="")):
        logger = get_logger(_name())
    try:
        set_log_level("chatty")
        assert logger.level == logging.WARNING
    finally:
        _close(logger)
