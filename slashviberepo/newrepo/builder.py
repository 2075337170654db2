"""Turn a validated submission into downstream records."""

from slashviberepo.model.outbound import PoppitCommand, SlackLinerMessage
from slashviberepo.newrepo.validation import escape_single_quotes

DEFAULT_BRANCH = "refs/heads/main"
POPPIT_COMMAND_TYPE = "slash-vibe-new-repo"
GITHUB_BASE_URL = "https://github.com/"

# SlackLiner deletes the confirmation after 7 days.
CONFIRMATION_TTL_SECONDS = 7 * 24 * 60 * 60


def repo_full_name(org: str, repo_name: str) -> str:
    return f"{org}/{repo_name}"


def build_poppit_command(
    org: str,
    repo_name: str,
    description: str,
    working_dir: str,
) -> PoppitCommand:
    """Assemble the create/clone/init task for a new repository.

    Args:
        org: GitHub organization that will own the repository.
        repo_name: Repository name, already validated.
        description: Optional description; omitted from ``gh`` when empty.
        working_dir: Directory Poppit runs the commands in.

    Returns:
        Task descriptor whose commands run in order: create, clone, init.
    """
    full_name = repo_full_name(org, repo_name)

    create_cmd = f"gh repo create {full_name} --public --add-readme --gitignore Go"
    if description:
        create_cmd = f"{create_cmd} --description '{escape_single_quotes(description)}'"

    clone_cmd = f"gh repo clone {full_name}"
    init_cmd = f"gh vibe init {full_name}"

    return PoppitCommand(
        repo=full_name,
        branch=DEFAULT_BRANCH,
        type=POPPIT_COMMAND_TYPE,
        dir=working_dir,
        commands=[create_cmd, clone_cmd, init_cmd],
    )


def build_confirmation(channel: str, full_name: str, description: str) -> SlackLinerMessage:
    """Build the Slack confirmation posted after a task is queued.

    Args:
        channel: Slack channel to post in.
        full_name: Repository as ``owner/name``.
        description: Optional description, quoted on its own line when set.

    Returns:
        Notification record that expires after seven days.
    """
    text = f":white_check_mark: Repository created: <{GITHUB_BASE_URL}{full_name}|{full_name}>"
    if description:
        text = f"{text}\n>{description}"

    return SlackLinerMessage(
        channel=channel,
        text=text,
        ttl=CONFIRMATION_TTL_SECONDS,
    )
