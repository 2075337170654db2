"""Slash command routing."""

from slashviberepo.commands.base import CommandContext, CommandDefinition, CommandHandler
from slashviberepo.commands.router import COMMAND_PREFIX, CommandRouter

__all__ = [
    "CommandContext",
    "CommandDefinition",
    "CommandHandler",
    "CommandRouter",
    "COMMAND_PREFIX",
]
