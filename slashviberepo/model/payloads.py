"""Inbound Slack payloads as relayed over Redis pub/sub.

Slack sends far more keys than the relay reads, so unknown keys are ignored
and absent string fields default to empty strings.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

VIEW_SUBMISSION_TYPE = "view_submission"


class SlashCommandPayload(BaseModel):
    """A slash command invocation forwarded from Slack.

    Only ``command``, ``text``, ``trigger_id`` and ``user_name`` are used;
    the rest is carried for logging and completeness.
    """

    token: str = ""
    team_id: str = ""
    team_domain: str = ""
    channel_id: str = ""
    channel_name: str = ""
    user_id: str = ""
    user_name: str = ""
    command: str = ""
    text: str = ""
    response_url: str = ""
    trigger_id: str = ""
    api_app_id: str = ""

    model_config = ConfigDict(extra="ignore")


class ViewStateValue(BaseModel):
    """A single submitted input element value."""

    type: str = ""
    value: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("value", mode="before")
    @classmethod
    def none_as_empty(cls, v: str | None) -> str:
        """Slack reports an untouched optional input as null."""
        return "" if v is None else v


class ViewState(BaseModel):
    """Submitted values keyed by block id, then action id."""

    values: dict[str, dict[str, ViewStateValue]] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")


class View(BaseModel):
    """The submitted modal view."""

    callback_id: str = ""
    state: ViewState = Field(default_factory=ViewState)

    model_config = ConfigDict(extra="ignore")


class ViewSubmissionPayload(BaseModel):
    """A modal submission forwarded from Slack."""

    type: str = ""
    view: View = Field(default_factory=View)

    model_config = ConfigDict(extra="ignore")

    @property
    def callback_id(self) -> str:
        return self.view.callback_id

    @property
    def is_view_submission(self) -> bool:
        return self.type == VIEW_SUBMISSION_TYPE
