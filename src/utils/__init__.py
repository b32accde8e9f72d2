"""Utils module -- config, logging, errors."""

from src.utils.config import Settings, settings
from src.utils.logger import get_logger, set_log_level

__all__ = ["Settings", "settings", "get_logger", "set_log_level"]
