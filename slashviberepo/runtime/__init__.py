"""Runtime dispatch for inbound messages."""

from slashviberepo.runtime.dispatcher import Dispatcher, DispatchStats

__all__ = ["Dispatcher", "DispatchStats"]
