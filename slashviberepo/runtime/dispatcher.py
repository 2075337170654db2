"""Dispatch loop routing inbound messages to the command and submission handlers."""

import asyncio
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from slashviberepo.channels.base import InboundMessage, MessageSource, ModalPresenter
from slashviberepo.commands.base import CommandContext
from slashviberepo.commands.router import CommandRouter
from slashviberepo.model.payloads import SlashCommandPayload, ViewSubmissionPayload
from slashviberepo.newrepo.builder import build_confirmation, build_poppit_command
from slashviberepo.newrepo.form import (
    NEW_REPO_CALLBACK_ID,
    REPO_DESCRIPTION_BLOCK,
    REPO_NAME_BLOCK,
    extract_view_values,
)
from slashviberepo.newrepo.validation import is_valid_repo_name
from slashviberepo.queue.publisher import PublishError, QueuePublisher

logger = logging.getLogger(__name__)


@dataclass
class DispatchStats:
    """Per-process counters, reported at shutdown."""

    received: int = 0
    discarded: int = 0
    commands_handled: int = 0
    tasks_pushed: int = 0
    notifications_pushed: int = 0
    push_failures: int = 0

    def summary(self) -> str:
        return (
            f"received={self.received} discarded={self.discarded} "
            f"commands={self.commands_handled} tasks={self.tasks_pushed} "
            f"notifications={self.notifications_pushed} push_failures={self.push_failures}"
        )


class Dispatcher:
    """Serial consumer of both inbound streams.

    Listeners put raw messages on a bounded queue; ``run`` takes them off one
    at a time and handles each to completion before taking the next. Every
    per-message failure is logged and the message dropped; nothing is retried.
    """

    def __init__(
        self,
        router: CommandRouter,
        presenter: ModalPresenter,
        publisher: QueuePublisher,
        github_org: str,
        working_dir: str,
        notification_channel: str,
        queue_size: int = 100,
    ):
        """Initialize the dispatcher.

        Args:
            router: Slash command router with handlers registered.
            presenter: Opens modals on the chat platform.
            publisher: Pushes task and notification records.
            github_org: Organization that owns new repositories.
            working_dir: Directory Poppit runs commands in.
            notification_channel: Slack channel for confirmations.
            queue_size: Capacity of the inbound queue.
        """
        self.router = router
        self.publisher = publisher
        self.github_org = github_org
        self.working_dir = working_dir
        self.notification_channel = notification_channel
        self.stats = DispatchStats()

        self._context = CommandContext(presenter=presenter)
        self._inbound: asyncio.Queue[InboundMessage] = asyncio.Queue(maxsize=queue_size)

    @property
    def inbound(self) -> "asyncio.Queue[InboundMessage]":
        """Queue the listeners feed."""
        return self._inbound

    async def run(self) -> None:
        """Consume the inbound queue until cancelled."""
        logger.info("Dispatcher started")
        try:
            while True:
                message = await self._inbound.get()
                try:
                    await self.handle(message)
                except Exception as e:
                    self.stats.discarded += 1
                    logger.error(f"Unhandled error processing {message.source.value} message: {e}")
                finally:
                    self._inbound.task_done()
        finally:
            logger.info(f"Dispatcher stopped ({self.stats.summary()})")

    async def handle(self, message: InboundMessage) -> None:
        """Handle one inbound message."""
        self.stats.received += 1
        if message.source is MessageSource.COMMAND:
            await self.handle_command(message.payload)
        else:
            await self.handle_view_submission(message.payload)

    async def handle_command(self, payload: str) -> None:
        """Decode a slash command and route it."""
        logger.debug(f"Received message: {payload}")

        try:
            command = SlashCommandPayload.model_validate_json(payload)
        except ValidationError as e:
            self.stats.discarded += 1
            logger.error(f"Failed to unmarshal payload: {e}")
            return

        logger.info(f"Processing command: {command.command} from user: {command.user_name}")

        try:
            handled = await self.router.route(command, self._context)
        except Exception as e:
            self.stats.discarded += 1
            logger.error(f"Failed to handle command {command.command}: {e}")
            return

        if not handled:
            self.stats.discarded += 1
            logger.info(f"Unknown command: {command.command}")
            return

        self.stats.commands_handled += 1

    async def handle_view_submission(self, payload: str) -> None:
        """Translate a new-repo modal submission into a Poppit task and a confirmation."""
        logger.debug(f"Received view submission: {payload}")

        try:
            submission = ViewSubmissionPayload.model_validate_json(payload)
        except ValidationError as e:
            self.stats.discarded += 1
            logger.error(f"Failed to unmarshal view submission payload: {e}")
            return

        if not submission.is_view_submission or submission.callback_id != NEW_REPO_CALLBACK_ID:
            self.stats.discarded += 1
            logger.debug(
                f"Ignoring {submission.type or 'untyped'} payload for callback_id "
                f"{submission.callback_id!r}"
            )
            return

        values = extract_view_values(submission.view.state.values)
        logger.debug(f"Extracted values: {values}")

        repo_name = values.get(REPO_NAME_BLOCK, "")
        if not repo_name:
            self.stats.discarded += 1
            logger.error("Missing repository name in view submission")
            return

        if not is_valid_repo_name(repo_name):
            self.stats.discarded += 1
            logger.error(f"Invalid repository name: {repo_name!r}")
            return

        description = values.get(REPO_DESCRIPTION_BLOCK, "")
        task = build_poppit_command(self.github_org, repo_name, description, self.working_dir)

        try:
            await self.publisher.push_task(task)
        except PublishError as e:
            self.stats.push_failures += 1
            logger.error(f"Failed to push to Poppit list: {e}")
            return
        self.stats.tasks_pushed += 1

        confirmation = build_confirmation(self.notification_channel, task.repo, description)
        try:
            await self.publisher.push_notification(confirmation)
        except PublishError as e:
            # The task is already queued; nothing to roll back.
            self.stats.push_failures += 1
            logger.error(f"Failed to push to SlackLiner list: {e}")
            return
        self.stats.notifications_pushed += 1
