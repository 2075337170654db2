"""Core functionality for SlashVibeRepo: configuration and logging."""

from slashviberepo.core.config import Config, load_config, load_config_from_env
from slashviberepo.core.logging import parse_log_level, setup_logging

__all__ = [
    "Config",
    "load_config",
    "load_config_from_env",
    "parse_log_level",
    "setup_logging",
]
