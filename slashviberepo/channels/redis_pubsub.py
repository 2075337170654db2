"""Redis pub/sub listener feeding the dispatcher's inbound queue."""

import asyncio
import logging
from typing import Any

from redis.asyncio import Redis
from redis.asyncio.client import PubSub
from redis.exceptions import RedisError

from slashviberepo.channels.base import InboundMessage, MessageSource

logger = logging.getLogger(__name__)

MAX_RECONNECT_DELAY = 30.0


class RedisSubscriber:
    """Listens on one Redis pub/sub channel.

    Handles:
    - Subscribing and waiting for the subscription confirmation
    - Forwarding each published payload, in delivery order, to a queue
    - Resubscribing with exponential backoff when the connection drops
    - Closing the pub/sub connection on stop
    """

    def __init__(
        self,
        client: Redis,
        channel: str,
        source: MessageSource,
        confirm_timeout: float = 5.0,
        reconnect_delay: float = 1.0,
    ):
        """Initialize the subscriber.

        Args:
            client: Connected Redis client (``decode_responses=True``).
            channel: Pub/sub channel name.
            source: Tag attached to every message from this channel.
            confirm_timeout: Seconds to wait for the subscribe confirmation.
            reconnect_delay: Initial backoff before resubscribing, doubled per
                failed attempt up to ``MAX_RECONNECT_DELAY``.
        """
        self.client = client
        self.channel = channel
        self.source = source
        self.confirm_timeout = confirm_timeout
        self.reconnect_delay = reconnect_delay
        self._pubsub: PubSub | None = None

    async def start(self) -> None:
        """Subscribe and wait until Redis confirms the subscription.

        Raises:
            RuntimeError: If no confirmation arrives in time.
        """
        logger.info(f"Subscribing to Redis channel: {self.channel}")
        self._pubsub = self.client.pubsub()
        await self._pubsub.subscribe(self.channel)

        confirmation = await self._pubsub.get_message(timeout=self.confirm_timeout)
        if not confirmation or confirmation.get("type") != "subscribe":
            raise RuntimeError(f"Failed to subscribe to Redis channel: {self.channel}")

        logger.info(f"Successfully subscribed to Redis channel: {self.channel}")

    async def stop(self) -> None:
        """Unsubscribe and close the pub/sub connection."""
        if self._pubsub is None:
            return
        pubsub, self._pubsub = self._pubsub, None
        await pubsub.unsubscribe(self.channel)
        await pubsub.aclose()
        logger.info(f"Unsubscribed from Redis channel: {self.channel}")

    async def listen(self, sink: "asyncio.Queue[InboundMessage]") -> None:
        """Forward published payloads to ``sink`` until cancelled.

        Subscription bookkeeping frames are skipped. A full sink blocks the
        listener, so Redis buffers the backlog. A dropped connection is logged
        and the channel is resubscribed; messages published while disconnected
        are lost.

        Args:
            sink: Queue consumed by the dispatcher.
        """
        if self._pubsub is None:
            raise RuntimeError("Subscriber not started")

        while True:
            try:
                async for frame in self._pubsub.listen():
                    payload = self._payload_of(frame)
                    if payload is None:
                        continue
                    await sink.put(
                        InboundMessage(source=self.source, payload=payload, channel=self.channel)
                    )
                return
            except RedisError as e:
                logger.error(f"Lost subscription to Redis channel {self.channel}: {e}")
                await self._resubscribe()

    async def _resubscribe(self) -> None:
        delay = self.reconnect_delay
        while True:
            await self._discard_pubsub()
            logger.info(f"Resubscribing to Redis channel {self.channel} in {delay:.1f}s")
            await asyncio.sleep(delay)
            try:
                await self.start()
                return
            except (RedisError, RuntimeError) as e:
                logger.error(f"Failed to resubscribe to Redis channel {self.channel}: {e}")
                delay = min(delay * 2, MAX_RECONNECT_DELAY)

    async def _discard_pubsub(self) -> None:
        if self._pubsub is None:
            return
        pubsub, self._pubsub = self._pubsub, None
        try:
            await pubsub.aclose()
        except RedisError as e:
            logger.warning(f"Error closing broken subscription to {self.channel}: {e}")

    @staticmethod
    def _payload_of(frame: dict[str, Any] | None) -> str | None:
        if not frame or frame.get("type") != "message":
            return None
        data = frame.get("data")
        if isinstance(data, bytes):
            return data.decode("utf-8", errors="replace")
        return data
