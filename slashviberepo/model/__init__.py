"""SlashVibeRepo wire models.

Inbound payloads decoded from the Redis pub/sub channels and the outbound
records pushed onto Redis lists. These models carry no I/O.
"""

from slashviberepo.model.outbound import PoppitCommand, SlackLinerMessage
from slashviberepo.model.payloads import (
    VIEW_SUBMISSION_TYPE,
    SlashCommandPayload,
    View,
    ViewState,
    ViewStateValue,
    ViewSubmissionPayload,
)

__all__ = [
    # Inbound
    "SlashCommandPayload",
    "View",
    "ViewState",
    "ViewStateValue",
    "ViewSubmissionPayload",
    "VIEW_SUBMISSION_TYPE",
    # Outbound
    "PoppitCommand",
    "SlackLinerMessage",
]
