"""Records pushed onto the downstream Redis lists."""

from pydantic import BaseModel, ConfigDict, Field


class PoppitCommand(BaseModel):
    """Task descriptor consumed by the Poppit runner.

    Attributes:
        repo: Target repository as ``owner/name``.
        branch: Git ref the runner checks out.
        type: Workflow tag so Poppit can route completions.
        dir: Working directory the commands execute in.
        commands: Shell commands, executed in order.
    """

    repo: str
    branch: str
    type: str
    dir: str
    commands: list[str] = Field(min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_json(self) -> str:
        return self.model_dump_json()


class SlackLinerMessage(BaseModel):
    """Notification record consumed by SlackLiner.

    Attributes:
        channel: Slack channel to post in.
        text: Message body (Slack mrkdwn).
        ttl: Seconds before SlackLiner deletes the message; 0 means keep it.
    """

    channel: str
    text: str
    ttl: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_json(self) -> str:
        """Serialize, leaving out ``ttl`` when it is zero."""
        if self.ttl:
            return self.model_dump_json()
        return self.model_dump_json(exclude={"ttl"})
