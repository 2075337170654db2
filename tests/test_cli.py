"""Tests for CLI configuration handling and startup failures."""

from unittest.mock import AsyncMock, patch

import pytest

from slashviberepo import cli


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch.object(cli, "load_dotenv"):
        yield


def test_resolve_config_from_env(monkeypatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-env")
    monkeypatch.setenv("GITHUB_ORG", "acme")

    config = cli.resolve_config(None)

    assert config.slack.bot_token == "xoxb-env"
    assert config.github.org == "acme"


def test_resolve_config_from_file(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("slack:\n  bot_token: xoxb-file\ngithub:\n  org: widgets\n")

    config = cli.resolve_config(config_file)

    assert config.github.org == "widgets"


@pytest.mark.asyncio
async def test_main_exits_on_missing_config(monkeypatch):
    monkeypatch.delenv("SLACK_BOT_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_ORG", raising=False)

    with patch.object(cli, "setup_logging"), pytest.raises(SystemExit) as exc_info:
        await cli.main([])

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_main_exits_on_malformed_yaml(tmp_path, caplog):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("slack: [unclosed\n")

    with patch.object(cli, "setup_logging"), pytest.raises(SystemExit) as exc_info:
        await cli.main(["-c", str(config_file)])

    assert exc_info.value.code == 1
    assert "Failed to load configuration" in caplog.text


@pytest.mark.asyncio
async def test_main_exits_on_startup_failure(monkeypatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-env")
    monkeypatch.setenv("GITHUB_ORG", "acme")
    run_relay = AsyncMock(side_effect=RuntimeError("Failed to connect to Redis"))

    with (
        patch.object(cli, "setup_logging"),
        patch.object(cli, "run_relay", run_relay),
        pytest.raises(SystemExit) as exc_info,
    ):
        await cli.main([])

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_main_verbose_forces_debug(monkeypatch):
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-env")
    monkeypatch.setenv("GITHUB_ORG", "acme")
    monkeypatch.setenv("LOG_LEVEL", "error")

    with (
        patch.object(cli, "setup_logging") as setup_logging,
        patch.object(cli, "run_relay", AsyncMock()) as run_relay,
    ):
        await cli.main(["-v"])

    setup_logging.assert_called_once_with("DEBUG")
    run_relay.assert_awaited_once()
