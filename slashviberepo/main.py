"""Relay runner for SlashVibeRepo."""

import asyncio
import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from slashviberepo.channels.base import MessageSource, ModalPresenter
from slashviberepo.channels.redis_pubsub import RedisSubscriber
from slashviberepo.channels.slack import SlackModalPresenter
from slashviberepo.commands.handlers import get_commands
from slashviberepo.commands.router import CommandRouter
from slashviberepo.core.config import Config
from slashviberepo.queue.publisher import QueuePublisher
from slashviberepo.runtime.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class RelayRunner:
    """Owns the Redis and Slack clients, the two listeners and the dispatcher."""

    def __init__(
        self,
        config: Config,
        redis_client: Redis | None = None,
        presenter: ModalPresenter | None = None,
    ):
        """Initialize RelayRunner.

        Args:
            config: Application configuration.
            redis_client: Redis client to use instead of one built from config.
            presenter: Modal presenter to use instead of the Slack one.
        """
        self.config = config

        self._redis = redis_client or Redis(
            host=config.redis.host,
            port=config.redis.port,
            password=config.redis.password or None,
            decode_responses=True,
        )
        self._presenter = presenter or SlackModalPresenter.from_token(config.slack.bot_token)

        self._command_router = CommandRouter()
        for handler in get_commands():
            self._command_router.register(handler)

        self._publisher = QueuePublisher(
            self._redis,
            poppit_list=config.redis.poppit_list,
            slackliner_list=config.redis.slackliner_list,
        )
        self._dispatcher = Dispatcher(
            router=self._command_router,
            presenter=self._presenter,
            publisher=self._publisher,
            github_org=config.github.org,
            working_dir=config.github.working_dir,
            notification_channel=config.slack.notification_channel,
            queue_size=config.dispatch.inbound_queue_size,
        )
        self._subscribers = [
            RedisSubscriber(
                self._redis,
                config.redis.command_channel,
                MessageSource.COMMAND,
                reconnect_delay=config.redis.reconnect_delay,
            ),
            RedisSubscriber(
                self._redis,
                config.redis.view_submission_channel,
                MessageSource.VIEW_SUBMISSION,
                reconnect_delay=config.redis.reconnect_delay,
            ),
        ]
        self._tasks: list[asyncio.Task[None]] = []
        self._running = False

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    async def start(self) -> None:
        """Check connectivity, subscribe, and start listening.

        Raises:
            RuntimeError: If Redis is unreachable or a subscription fails.
        """
        try:
            await self._redis.ping()
        except RedisError as e:
            raise RuntimeError(f"Failed to connect to Redis at {self.config.redis.addr}: {e}") from e
        logger.info(f"Connected to Redis at {self.config.redis.addr}")

        for subscriber in self._subscribers:
            await subscriber.start()

        self._tasks.append(asyncio.create_task(self._dispatcher.run(), name="dispatcher"))
        for subscriber in self._subscribers:
            self._tasks.append(
                asyncio.create_task(
                    subscriber.listen(self._dispatcher.inbound),
                    name=f"listener:{subscriber.channel}",
                )
            )

        for task in self._tasks:
            task.add_done_callback(self._log_task_exit)

        self._running = True
        logger.info("SlashVibeRepo relay started")

    def _log_task_exit(self, task: "asyncio.Task[None]") -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Task {task.get_name()} exited with error: {error}")

    async def stop(self) -> None:
        """Stop listeners and the dispatcher, then release connections.

        Logs errors but does not raise; shutdown completes for every resource.
        """
        if self._running:
            logger.info("Shutting down...")
        self._running = False

        for task in self._tasks:
            task.cancel()
        # Failures were already logged by _log_task_exit.
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks.clear()

        for subscriber in self._subscribers:
            try:
                await subscriber.stop()
            except RedisError as e:
                logger.error(f"Error closing subscription to {subscriber.channel}: {e}")

        await self._redis.aclose()
        logger.info("SlashVibeRepo relay stopped")
