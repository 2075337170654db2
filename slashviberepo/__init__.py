"""SlashVibeRepo: relays Slack ``/new-repo`` requests from Redis to Poppit."""

__version__ = "0.1.0"
