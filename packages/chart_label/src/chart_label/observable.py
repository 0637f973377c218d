"""Synchronous publish/subscribe primitive shared by the chart observables."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from itertools import count

from loguru import logger

Handler = Callable[["Observable"], None]

_handle_ids = count(1)


@dataclass(frozen=True)
class Subscription:
    """Opaque handle returned by ``Observable.subscribe``."""

    id: int
    source: str


class Observable:
    """Base class for objects that push change notifications.

    Handlers receive the observable itself and run synchronously, in
    registration order, after the state change has been applied.
    """

    def __init__(self) -> None:
        self._handlers: dict[Subscription, Handler] = {}

    def subscribe(self, handler: Handler) -> Subscription:
        handle = Subscription(id=next(_handle_ids), source=type(self).__name__)
        self._handlers[handle] = handler
        logger.debug("{src}: subscription {id} added", src=handle.source, id=handle.id)
        return handle

    def unsubscribe(self, handle: Subscription) -> None:
        """Remove a handler. Unknown or already removed handles are ignored."""
        if self._handlers.pop(handle, None) is not None:
            logger.debug("{src}: subscription {id} removed", src=handle.source, id=handle.id)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def notify(self) -> None:
        """Deliver a change notification to every current subscriber."""
        # Snapshot so a handler may unsubscribe itself mid-delivery.
        for handler in list(self._handlers.values()):
            handler(self)
