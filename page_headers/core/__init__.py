"""Core package initialization."""
from page_headers.core.config import Config, config_by_name, get_config
from page_headers.core.logging import setup_logging

__all__ = [
    "Config",
    "config_by_name",
    "get_config",
    "setup_logging",
]
