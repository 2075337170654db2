"""The ``/new-repo`` workflow: modal, validation and task translation."""

from slashviberepo.newrepo.builder import (
    CONFIRMATION_TTL_SECONDS,
    DEFAULT_BRANCH,
    GITHUB_BASE_URL,
    POPPIT_COMMAND_TYPE,
    build_confirmation,
    build_poppit_command,
    repo_full_name,
)
from slashviberepo.newrepo.form import (
    AI_PROMPT_BLOCK,
    NEW_REPO_CALLBACK_ID,
    REPO_DESCRIPTION_BLOCK,
    REPO_NAME_BLOCK,
    build_new_repo_modal,
    extract_view_values,
)
from slashviberepo.newrepo.validation import escape_single_quotes, is_valid_repo_name

__all__ = [
    "AI_PROMPT_BLOCK",
    "CONFIRMATION_TTL_SECONDS",
    "DEFAULT_BRANCH",
    "GITHUB_BASE_URL",
    "NEW_REPO_CALLBACK_ID",
    "POPPIT_COMMAND_TYPE",
    "REPO_DESCRIPTION_BLOCK",
    "REPO_NAME_BLOCK",
    "build_confirmation",
    "build_new_repo_modal",
    "build_poppit_command",
    "escape_single_quotes",
    "extract_view_values",
    "is_valid_repo_name",
    "repo_full_name",
]
