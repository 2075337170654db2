"""Tests for configuration models and loaders."""

import pytest
from pydantic import ValidationError

from slashviberepo.core.config import Config, load_config, load_config_from_env
from slashviberepo.core.config.loader import expand_env_vars, expand_env_vars_recursive

REQUIRED_ENV = {"SLACK_BOT_TOKEN": "xoxb-1", "GITHUB_ORG": "acme"}


class TestLoadConfigFromEnv:
    """Environment-variable configuration."""

    def test_defaults(self):
        """Only the required variables set: everything else has defaults."""
        config = load_config_from_env(REQUIRED_ENV)

        assert config.redis.addr == "localhost:6379"
        assert config.redis.password == ""
        assert config.redis.command_channel == "slack-commands"
        assert config.redis.view_submission_channel == "slack-relay-view-submission"
        assert config.redis.poppit_list == "poppit:notifications"
        assert config.redis.slackliner_list == "slack_liner:notifications"
        assert config.slack.bot_token == "xoxb-1"
        assert config.slack.notification_channel == "#general"
        assert config.github.org == "acme"
        assert config.github.working_dir == "/tmp"
        assert config.dispatch.inbound_queue_size == 100
        assert config.logging.level == "INFO"

    def test_overrides(self):
        """Every variable is honoured."""
        env = {
            **REQUIRED_ENV,
            "REDIS_ADDR": "redis.internal:6380",
            "REDIS_PASSWORD": "hunter2",
            "REDIS_CHANNEL": "cmds",
            "REDIS_VIEW_SUBMISSION_CHANNEL": "views",
            "REDIS_POPPIT_LIST": "poppit",
            "REDIS_SLACKLINER_LIST": "liner",
            "SLACK_NOTIFICATION_CHANNEL": "#repos",
            "WORKING_DIR": "/srv/work",
            "LOG_LEVEL": "debug",
            "INBOUND_QUEUE_SIZE": "5",
        }
        config = load_config_from_env(env)

        assert config.redis.host == "redis.internal"
        assert config.redis.port == 6380
        assert config.redis.password == "hunter2"
        assert config.redis.command_channel == "cmds"
        assert config.redis.view_submission_channel == "views"
        assert config.redis.poppit_list == "poppit"
        assert config.redis.slackliner_list == "liner"
        assert config.slack.notification_channel == "#repos"
        assert config.github.working_dir == "/srv/work"
        assert config.logging.level == "debug"
        assert config.dispatch.inbound_queue_size == 5

    def test_empty_value_uses_default(self):
        """An empty variable counts as unset."""
        config = load_config_from_env({**REQUIRED_ENV, "WORKING_DIR": ""})
        assert config.github.working_dir == "/tmp"

    def test_missing_slack_token(self):
        with pytest.raises(ValueError, match="SLACK_BOT_TOKEN"):
            load_config_from_env({"GITHUB_ORG": "acme"})

    def test_missing_github_org(self):
        with pytest.raises(ValueError, match="GITHUB_ORG"):
            load_config_from_env({"SLACK_BOT_TOKEN": "xoxb-1"})


class TestRedisAddress:
    """host/port split of redis.addr."""

    def test_host_and_port(self, config):
        config.redis.addr = "cache:7000"
        assert config.redis.host == "cache"
        assert config.redis.port == 7000

    def test_host_only(self, config):
        config.redis.addr = "cache"
        assert config.redis.host == "cache"
        assert config.redis.port == 6379

    def test_ipv6_literal_with_port(self, config):
        config.redis.addr = "[::1]:6380"
        assert config.redis.host == "::1"
        assert config.redis.port == 6380

    def test_ipv6_literal_without_port(self, config):
        config.redis.addr = "[::1]"
        assert config.redis.host == "::1"
        assert config.redis.port == 6379


class TestConfigModel:
    def test_blank_org_rejected(self):
        with pytest.raises(ValidationError, match="GITHUB_ORG"):
            Config(slack={"bot_token": "xoxb"}, github={"org": "  "})

    def test_blank_token_rejected(self):
        with pytest.raises(ValidationError, match="SLACK_BOT_TOKEN"):
            Config(slack={"bot_token": ""}, github={"org": "acme"})

    def test_queue_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            Config(
                slack={"bot_token": "xoxb"},
                github={"org": "acme"},
                dispatch={"inbound_queue_size": 0},
            )


class TestLoadConfigYaml:
    """YAML configuration files."""

    def test_load_with_expansion(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEST_SLACK_TOKEN", "xoxb-from-env")
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "slack:\n"
            "  bot_token: ${TEST_SLACK_TOKEN}\n"
            "github:\n"
            "  org: acme\n"
            "redis:\n"
            "  poppit_list: custom:list\n"
        )

        config = load_config(config_file)

        assert config.slack.bot_token == "xoxb-from-env"
        assert config.github.org == "acme"
        assert config.redis.poppit_list == "custom:list"
        assert config.redis.command_channel == "slack-commands"

    def test_unresolved_variable(self, tmp_path, monkeypatch):
        monkeypatch.delenv("TEST_MISSING_TOKEN", raising=False)
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "slack:\n  bot_token: ${TEST_MISSING_TOKEN}\ngithub:\n  org: acme\n"
        )

        with pytest.raises(ValueError, match="TEST_MISSING_TOKEN"):
            load_config(config_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")


class TestExpandEnvVars:
    def test_explicit_mapping(self):
        assert expand_env_vars("org: ${ORG}", {"ORG": "acme"}) == "org: acme"

    def test_unknown_left_unchanged(self):
        assert expand_env_vars("${UNKNOWN}", {}) == "${UNKNOWN}"

    def test_recursive(self):
        data = {"a": ["${X}", 1], "b": {"c": "${X}-y"}}
        assert expand_env_vars_recursive(data, {"X": "x"}) == {"a": ["x", 1], "b": {"c": "x-y"}}
