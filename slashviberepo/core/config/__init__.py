"""Configuration package for SlashVibeRepo.

This package provides Pydantic configuration models and loading utilities.
"""

from slashviberepo.core.config.loader import (
    check_unexpanded_vars,
    expand_env_vars,
    expand_env_vars_recursive,
    load_config,
    load_config_from_env,
)
from slashviberepo.core.config.models import (
    Config,
    DispatchConfig,
    GithubConfig,
    LoggingConfig,
    RedisConfig,
    SlackConfig,
)

__all__ = [
    # Models
    "Config",
    "DispatchConfig",
    "GithubConfig",
    "LoggingConfig",
    "RedisConfig",
    "SlackConfig",
    # Loaders
    "check_unexpanded_vars",
    "expand_env_vars",
    "expand_env_vars_recursive",
    "load_config",
    "load_config_from_env",
]
