"""Configuration loading utilities.

Configuration comes either from a YAML file (with ``${VAR}`` expansion) or
directly from the process environment, the way the container deployment
supplies it.
"""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from slashviberepo.core.config.models import Config

_VAR_PATTERN = r'\$\{([^}]+)\}'


def expand_env_vars(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Expand ${VAR} patterns in a string with environment variable values.

    Args:
        value: String potentially containing ${VAR_NAME} patterns.
        environ: Mapping to resolve variables from (defaults to os.environ).

    Returns:
        String with all ${VAR_NAME} patterns replaced by their values.
        If a variable is not found, the pattern is left unchanged.

    Examples:
        >>> expand_env_vars('org: ${GITHUB_ORG}', {'GITHUB_ORG': 'acme'})
        'org: acme'
    """
    env = os.environ if environ is None else environ

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        return env.get(var_name, match.group(0))

    return re.sub(_VAR_PATTERN, replacer, value)


def expand_env_vars_recursive(obj: Any, environ: Mapping[str, str] | None = None) -> Any:
    """Recursively expand environment variables in nested dicts and lists."""
    if isinstance(obj, dict):
        return {key: expand_env_vars_recursive(value, environ) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [expand_env_vars_recursive(item, environ) for item in obj]
    elif isinstance(obj, str):
        return expand_env_vars(obj, environ)
    else:
        return obj


def check_unexpanded_vars(data: Any, source: str) -> None:
    """Recursively check for unresolved ${VAR} patterns after expansion.

    Args:
        data: Expanded configuration data (dict, list, str, or other).
        source: Human-readable label for error messages (e.g., file path).

    Raises:
        ValueError: If any ${VAR} patterns remain unresolved.
    """
    unresolved: list[str] = []
    _collect_unexpanded_vars(data, unresolved)
    if unresolved:
        unique = sorted(set(unresolved))
        raise ValueError(
            f"Unresolved environment variable(s) in {source}: {', '.join(unique)}. "
            f"Set these variables or remove the ${{VAR}} references."
        )


def _collect_unexpanded_vars(obj: Any, found: list[str]) -> None:
    """Walk data structure collecting unresolved ${VAR} patterns."""
    if isinstance(obj, dict):
        for value in obj.values():
            _collect_unexpanded_vars(value, found)
    elif isinstance(obj, list):
        for item in obj:
            _collect_unexpanded_vars(item, found)
    elif isinstance(obj, str):
        for match in re.finditer(_VAR_PATTERN, obj):
            found.append(f"${{{match.group(1)}}}")


def load_config(path: Path | str) -> Config:
    """Load configuration from a YAML file with environment variable expansion.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Parsed Config object with all ${VAR} patterns expanded.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If variables are unresolved or required values are missing.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open() as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    data = expand_env_vars_recursive(data)
    check_unexpanded_vars(data, source=str(config_path))

    return Config(**data)


def _get_env(environ: Mapping[str, str], key: str, default: str) -> str:
    # Empty values count as unset.
    return environ.get(key) or default


def load_config_from_env(environ: Mapping[str, str] | None = None) -> Config:
    """Build configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        Parsed Config object.

    Raises:
        ValueError: If SLACK_BOT_TOKEN or GITHUB_ORG is unset.
    """
    env = os.environ if environ is None else environ

    slack_token = _get_env(env, "SLACK_BOT_TOKEN", "")
    if not slack_token:
        raise ValueError("SLACK_BOT_TOKEN must be set via environment variable")

    github_org = _get_env(env, "GITHUB_ORG", "")
    if not github_org:
        raise ValueError("GITHUB_ORG must be set via environment variable")

    return Config(
        redis={
            "addr": _get_env(env, "REDIS_ADDR", "localhost:6379"),
            "password": _get_env(env, "REDIS_PASSWORD", ""),
            "command_channel": _get_env(env, "REDIS_CHANNEL", "slack-commands"),
            "view_submission_channel": _get_env(
                env, "REDIS_VIEW_SUBMISSION_CHANNEL", "slack-relay-view-submission"
            ),
            "poppit_list": _get_env(env, "REDIS_POPPIT_LIST", "poppit:notifications"),
            "slackliner_list": _get_env(env, "REDIS_SLACKLINER_LIST", "slack_liner:notifications"),
        },
        slack={
            "bot_token": slack_token,
            "notification_channel": _get_env(env, "SLACK_NOTIFICATION_CHANNEL", "#general"),
        },
        github={
            "org": github_org,
            "working_dir": _get_env(env, "WORKING_DIR", "/tmp"),
        },
        dispatch={
            "inbound_queue_size": int(_get_env(env, "INBOUND_QUEUE_SIZE", "100")),
        },
        logging={"level": _get_env(env, "LOG_LEVEL", "INFO")},
    )
