"""Inbound Redis channels and the Slack modal presenter."""

from slashviberepo.channels.base import InboundMessage, MessageSource, ModalPresenter
from slashviberepo.channels.redis_pubsub import RedisSubscriber
from slashviberepo.channels.slack import SlackModalPresenter

__all__ = [
    "InboundMessage",
    "MessageSource",
    "ModalPresenter",
    "RedisSubscriber",
    "SlackModalPresenter",
]
