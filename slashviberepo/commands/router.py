"""Command routing system."""

from typing import TYPE_CHECKING

from slashviberepo.commands.base import CommandDefinition, CommandHandler

if TYPE_CHECKING:
    from slashviberepo.commands.base import CommandContext
    from slashviberepo.model.payloads import SlashCommandPayload


COMMAND_PREFIX = "/"


class CommandRouter:
    """Routes slash commands to registered handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(self, handler: CommandHandler) -> None:
        """Register a command handler.

        Args:
            handler: Command handler to register.
        """
        self._handlers[handler.definition.name] = handler

    def get_handler(self, command_name: str) -> CommandHandler | None:
        """Get handler for an exact slash command such as ``/new-repo``."""
        if not command_name.startswith(COMMAND_PREFIX):
            return None
        return self._handlers.get(command_name[len(COMMAND_PREFIX) :])

    def list_commands(self) -> list[CommandDefinition]:
        return [h.definition for h in self._handlers.values()]

    async def route(
        self, command: "SlashCommandPayload", context: "CommandContext"
    ) -> bool:
        """Route a slash command to its handler.

        Args:
            command: Decoded slash command payload.
            context: Command execution context.

        Returns:
            True if a handler ran, False for an unknown command.
        """
        handler = self.get_handler(command.command)
        if handler is None:
            return False

        await handler.handle(command, context)
        return True
