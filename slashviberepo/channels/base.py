"""Base interfaces for inbound channels and the modal presenter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class MessageSource(Enum):
    """Which inbound stream a message arrived on."""

    COMMAND = "command"
    VIEW_SUBMISSION = "view_submission"


@dataclass
class InboundMessage:
    """A raw payload received from one of the inbound streams.

    The payload is left undecoded; the dispatcher decides how to parse it
    based on ``source``.
    """

    source: MessageSource
    payload: str
    channel: str = ""
    received_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class ModalPresenter(ABC):
    """Capability to show the ``/new-repo`` form to a user.

    Implementations talk to the chat platform. The dispatcher only depends
    on this interface so it can be exercised without a real client.
    """

    @abstractmethod
    async def open_new_repo_modal(self, trigger_id: str, repo_name: str = "") -> None:
        """Open the new-repository modal.

        Args:
            trigger_id: Short-lived trigger from the slash command invocation.
            repo_name: Text typed after the command, used to pre-fill the form.
        """
        ...
