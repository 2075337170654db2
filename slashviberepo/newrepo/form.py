"""The ``/new-repo`` modal: how it is built and how its submission is read."""

from collections.abc import Mapping

from slack_sdk.models.blocks import InputBlock, PlainTextInputElement, PlainTextObject
from slack_sdk.models.views import View

from slashviberepo.model.payloads import ViewStateValue

NEW_REPO_CALLBACK_ID = "new_repo_modal"

REPO_NAME_BLOCK = "repo-name"
REPO_DESCRIPTION_BLOCK = "repo-description"
AI_PROMPT_BLOCK = "ai-prompt"


def build_new_repo_modal(repo_name: str = "") -> View:
    """Build the modal shown for ``/new-repo``.

    The form has three inputs: a required repository name (pre-filled with
    ``repo_name`` when given), an optional description and an optional
    Copilot issue prompt.

    Args:
        repo_name: Text typed after the slash command, used as initial value.

    Returns:
        Slack modal view tagged with NEW_REPO_CALLBACK_ID.
    """
    repo_name = repo_name.strip()

    repo_name_block = InputBlock(
        block_id=REPO_NAME_BLOCK,
        label=PlainTextObject(text="Repository Name"),
        hint=PlainTextObject(text="Letters, numbers, hyphens only (no spaces)"),
        element=PlainTextInputElement(
            action_id="repo_name_input",
            placeholder=PlainTextObject(text="my-awesome-repo"),
            initial_value=repo_name or None,
        ),
    )

    repo_desc_block = InputBlock(
        block_id=REPO_DESCRIPTION_BLOCK,
        label=PlainTextObject(text="Repository Description"),
        optional=True,
        element=PlainTextInputElement(
            action_id="repo_desc_input",
            placeholder=PlainTextObject(text="A short description of this project"),
        ),
    )

    ai_prompt_block = InputBlock(
        block_id=AI_PROMPT_BLOCK,
        label=PlainTextObject(text="Copilot Issue Prompt"),
        hint=PlainTextObject(text="Describe what Copilot should generate as the first issue"),
        optional=True,
        element=PlainTextInputElement(
            action_id="ai_prompt_input",
            placeholder=PlainTextObject(text="A simple Go service"),
            multiline=True,
        ),
    )

    return View(
        type="modal",
        callback_id=NEW_REPO_CALLBACK_ID,
        title=PlainTextObject(text="New Repo"),
        close=PlainTextObject(text="Cancel"),
        submit=PlainTextObject(text="Submit"),
        blocks=[repo_name_block, repo_desc_block, ai_prompt_block],
    )


def extract_view_values(values: Mapping[str, Mapping[str, ViewStateValue]]) -> dict[str, str]:
    """Flatten submitted view state to one value per block.

    Every block in this modal holds exactly one input, so the value of
    whichever input the mapping yields first is taken. For a block with
    several inputs that choice is not a contract.

    Args:
        values: ``view.state.values``: block id -> action id -> value.

    Returns:
        Block id -> submitted string. Blocks without inputs are omitted.
    """
    result: dict[str, str] = {}
    for block_id, block_values in values.items():
        for value_obj in block_values.values():
            result[block_id] = value_obj.value
            break
    return result
