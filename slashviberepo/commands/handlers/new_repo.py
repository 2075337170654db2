"""/new-repo command handler."""

import logging
from typing import TYPE_CHECKING

from slashviberepo.commands.base import CommandDefinition, CommandHandler

if TYPE_CHECKING:
    from slashviberepo.commands.base import CommandContext
    from slashviberepo.model.payloads import SlashCommandPayload

logger = logging.getLogger(__name__)


class NewRepoCommand(CommandHandler):
    """Open the new-repository modal, pre-filled with the command text."""

    @property
    def definition(self) -> CommandDefinition:
        """Command metadata."""
        return CommandDefinition(
            name="new-repo",
            description="Create a new GitHub repository",
            args_description="[repo-name]",
        )

    async def handle(
        self,
        command: "SlashCommandPayload",
        context: "CommandContext",
    ) -> None:
        """Execute the new-repo command.

        Args:
            command: Slash command payload; ``text`` pre-fills the name.
            context: Command execution context.

        Raises:
            slack_sdk.errors.SlackApiError: If the modal could not be opened.
        """
        logger.info(f"Handling /new-repo command with trigger_id: {command.trigger_id}")
        await context.presenter.open_new_repo_modal(command.trigger_id, command.text)
        logger.info("Successfully opened new-repo modal")
