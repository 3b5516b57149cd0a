"""Configuration module for application settings."""

from .settings import Settings, get_settings, parse_list
from .logger import setup_logger, get_logger

__all__ = ["Settings", "get_settings", "parse_list", "setup_logger", "get_logger"]
