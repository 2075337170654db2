"""Slash command handlers."""

from slashviberepo.commands.base import CommandHandler
from slashviberepo.commands.handlers.new_repo import NewRepoCommand


def get_commands() -> list[CommandHandler]:
    """Return all command handlers for registration.

    Returns:
        List of command handler instances.
    """
    return [
        NewRepoCommand(),
    ]


__all__ = [
    "get_commands",
    "NewRepoCommand",
]
