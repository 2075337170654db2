"""Pushes outbound records onto Redis lists."""

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from slashviberepo.model.outbound import PoppitCommand, SlackLinerMessage

logger = logging.getLogger(__name__)


class PublishError(RuntimeError):
    """Raised when a record could not be pushed to its list."""

    def __init__(self, list_name: str, cause: Exception):
        super().__init__(f"Failed to push to {list_name}: {cause}")
        self.list_name = list_name
        self.cause = cause


class QueuePublisher:
    """Serializes records to JSON and ``RPUSH``es them onto Redis lists."""

    def __init__(self, client: Redis, poppit_list: str, slackliner_list: str):
        """Initialize the publisher.

        Args:
            client: Connected Redis client.
            poppit_list: List consumed by the Poppit task runner.
            slackliner_list: List consumed by the SlackLiner notifier.
        """
        self.client = client
        self.poppit_list = poppit_list
        self.slackliner_list = slackliner_list

    async def push_task(self, command: PoppitCommand) -> None:
        """Queue a task descriptor for Poppit.

        Raises:
            PublishError: If Redis rejects the push.
        """
        await self._push(self.poppit_list, command.to_json())

    async def push_notification(self, message: SlackLinerMessage) -> None:
        """Queue a notification for SlackLiner.

        Raises:
            PublishError: If Redis rejects the push.
        """
        await self._push(self.slackliner_list, message.to_json())

    async def _push(self, list_name: str, payload: str) -> None:
        try:
            await self.client.rpush(list_name, payload)
        except RedisError as e:
            raise PublishError(list_name, e) from e
        logger.info(f"Pushed to list {list_name}: {payload}")
