"""Lightweight in-process pub/sub event bus."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Hashable
from typing import Any

logger = logging.getLogger(__name__)


class EventBus:
    """Simple synchronous event bus for availability notifications.

    Not thread-safe.  Callbacks run on the caller's thread, in subscription
    order, over a snapshot of the subscriber list so a callback may
    unsubscribe itself while being notified.
    """

    def __init__(self) -> None:
        self._subscribers: dict[Hashable, list[Callable[..., Any]]] = defaultdict(list)

    def subscribe(self, event: Hashable, callback: Callable[..., Any]) -> None:
        self._subscribers[event].append(callback)

    def unsubscribe(self, event: Hashable, callback: Callable[..., Any]) -> None:
        if callback in self._subscribers[event]:
            self._subscribers[event].remove(callback)

    def subscriber_count(self, event: Hashable) -> int:
        return len(self._subscribers.get(event, []))

    def publish(self, event: Hashable, **kwargs: Any) -> None:
        callbacks = list(self._subscribers.get(event, []))
        for callback in callbacks:
            try:
                callback(**kwargs)
            except Exception:
                logger.exception("EventBus callback error on '%s'", event)
