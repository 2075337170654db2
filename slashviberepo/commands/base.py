"""Base abstractions for the slash command system."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slashviberepo.channels.base import ModalPresenter
    from slashviberepo.model.payloads import SlashCommandPayload


@dataclass
class CommandDefinition:
    """Metadata for a registered command."""

    name: str  # e.g., "new-repo" for /new-repo
    description: str
    args_description: str | None = None  # e.g., "[repo-name]"


@dataclass
class CommandContext:
    """Runtime collaborators passed to command handlers."""

    presenter: "ModalPresenter"


class CommandHandler(ABC):
    """Base class for command implementations."""

    @property
    @abstractmethod
    def definition(self) -> CommandDefinition:
        """Command metadata."""
        ...

    @abstractmethod
    async def handle(
        self,
        command: "SlashCommandPayload",
        context: CommandContext,
    ) -> None:
        """Execute the command."""
        ...
