"""Shared fixtures for SlashVibeRepo tests."""

import json
from typing import Any

import pytest

from slashviberepo.core.config import Config


@pytest.fixture
def config() -> Config:
    """Minimal valid configuration."""
    return Config(
        slack={"bot_token": "xoxb-test", "notification_channel": "#repos"},
        github={"org": "acme", "working_dir": "/work"},
    )


def _make_submission(
    values: dict[str, str | None],
    callback_id: str = "new_repo_modal",
    payload_type: str = "view_submission",
) -> str:
    """Build a raw view submission payload with one input per block."""
    state: dict[str, Any] = {
        block_id: {f"{block_id}_input": {"type": "plain_text_input", "value": value}}
        for block_id, value in values.items()
    }
    return json.dumps(
        {
            "type": payload_type,
            "view": {"callback_id": callback_id, "state": {"values": state}},
        }
    )


def _make_command(command: str = "/new-repo", text: str = "", trigger_id: str = "trig-1") -> str:
    """Build a raw slash command payload."""
    return json.dumps(
        {
            "token": "tok",
            "team_id": "T1",
            "team_domain": "acme",
            "channel_id": "C1",
            "channel_name": "general",
            "user_id": "U1",
            "user_name": "alice",
            "command": command,
            "text": text,
            "response_url": "https://hooks.slack.com/commands/1",
            "trigger_id": trigger_id,
            "api_app_id": "A1",
        }
    )


@pytest.fixture
def make_submission():
    """Factory for raw view submission payloads."""
    return _make_submission


@pytest.fixture
def make_command():
    """Factory for raw slash command payloads."""
    return _make_command
