"""Outbound Redis list publishing."""

from slashviberepo.queue.publisher import PublishError, QueuePublisher

__all__ = ["PublishError", "QueuePublisher"]
