"""Pydantic configuration models for SlashVibeRepo.

For loading logic (YAML files and environment variables), see loader.py.
"""

from pydantic import BaseModel, Field, field_validator


class RedisConfig(BaseModel):
    """Redis connection plus the channels and lists the relay talks to."""

    addr: str = Field(default="localhost:6379", description="Redis address as host:port")
    password: str = Field(default="", description="Redis password (empty means no auth)")
    command_channel: str = Field(
        default="slack-commands",
        description="Pub/sub channel carrying slash-command payloads",
    )
    view_submission_channel: str = Field(
        default="slack-relay-view-submission",
        description="Pub/sub channel carrying modal view submissions",
    )
    poppit_list: str = Field(
        default="poppit:notifications",
        description="List receiving task descriptors for the Poppit runner",
    )
    slackliner_list: str = Field(
        default="slack_liner:notifications",
        description="List receiving notification records for SlackLiner",
    )
    reconnect_delay: float = Field(
        default=1.0,
        gt=0,
        description="Initial seconds to wait before resubscribing after a lost connection",
    )

    def _split_addr(self) -> tuple[str, int]:
        host, sep, port = self.addr.rpartition(":")
        if not sep or not host or not port.isdigit():
            host, port = self.addr, ""
        # IPv6 literals are written as [::1]:6379
        host = host.removeprefix("[").removesuffix("]")
        return host, int(port) if port else 6379

    @property
    def host(self) -> str:
        """Host part of ``addr``, without IPv6 brackets."""
        return self._split_addr()[0]

    @property
    def port(self) -> int:
        """Port part of ``addr`` (6379 when absent)."""
        return self._split_addr()[1]


class SlackConfig(BaseModel):
    """Slack API credentials and notification target."""

    bot_token: str = Field(description="Slack bot token used to open modals")
    notification_channel: str = Field(
        default="#general",
        description="Channel that receives repository confirmations",
    )

    @field_validator("bot_token")
    @classmethod
    def validate_bot_token(cls, v: str) -> str:
        """Reject an empty token."""
        if not v.strip():
            raise ValueError("SLACK_BOT_TOKEN must be set via environment variable")
        return v


class GithubConfig(BaseModel):
    """Where new repositories are created and checked out."""

    org: str = Field(description="GitHub organization that owns new repositories")
    working_dir: str = Field(default="/tmp", description="Directory the task runner executes in")

    @field_validator("org")
    @classmethod
    def validate_org(cls, v: str) -> str:
        """Reject an empty organization."""
        if not v.strip():
            raise ValueError("GITHUB_ORG must be set via environment variable")
        return v


class DispatchConfig(BaseModel):
    """Tuning for the inbound dispatch loop."""

    inbound_queue_size: int = Field(
        default=100,
        ge=1,
        description="Max messages buffered between the listeners and the handler",
    )


class LoggingConfig(BaseModel):
    """Configuration for logging system."""

    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARN, ERROR)")


class Config(BaseModel):
    """Root configuration for SlashVibeRepo."""

    redis: RedisConfig = Field(default_factory=RedisConfig, description="Redis configuration")
    slack: SlackConfig
    github: GithubConfig
    dispatch: DispatchConfig = Field(default_factory=DispatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")
