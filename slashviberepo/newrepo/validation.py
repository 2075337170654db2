"""Repository name validation and shell quoting."""

import re

MAX_REPO_NAME_LENGTH = 100

# GitHub allows ASCII alphanumerics, hyphens, underscores and dots.
_REPO_NAME_PATTERN = re.compile(r"[A-Za-z0-9._-]+")


def is_valid_repo_name(name: str) -> bool:
    """Check that a repository name is safe to pass to ``gh``.

    Args:
        name: Candidate repository name.

    Returns:
        True if the name is 1-100 characters from ``[A-Za-z0-9._-]``.
    """
    if not name or len(name) > MAX_REPO_NAME_LENGTH:
        return False
    return _REPO_NAME_PATTERN.fullmatch(name) is not None


def escape_single_quotes(value: str) -> str:
    """Escape a string for interpolation inside a single-quoted shell word.

    Each ``'`` becomes ``'\\''``: close the quote, emit an escaped quote,
    reopen. Nothing else needs escaping inside single quotes.

    Examples:
        >>> escape_single_quotes("It's mine")
        "It'\\\\''s mine"
    """
    return value.replace("'", "'\\''")
