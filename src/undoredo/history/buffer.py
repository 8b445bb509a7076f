"""HistoryBuffer: linear undo/redo history over opaque snapshots."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from undoredo.core.bus import EventBus
from undoredo.core.types import HistoryEvent, HistoryState, StorageMode
from undoredo.history.backing import make_backing
from undoredo.history.config import HistoryConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 100


@runtime_checkable
class Validatable(Protocol):
    """Element types that can reject themselves before insertion."""

    def is_valid(self) -> bool: ...


def default_validator(value: Any) -> bool:
    """Accept any non-None value, deferring to ``is_valid()`` when present."""
    if value is None:
        return False
    if isinstance(value, Validatable):
        return bool(value.is_valid())
    return True


class HistoryBuffer(Generic[T]):
    """Undo/redo history with truncate-on-branch semantics.

    The valid window is ``[start, end]`` in logical indices; ``current``
    is the selected element or ``None`` when the history is empty.  With
    a fixed capacity the backing store is a ring and inserting past the
    capacity evicts the oldest element.  A capacity of 0 grows without
    bound.

    Inserting after an undo discards everything beyond the new element:
    there is a single line of history, never a tree.

    Availability changes are published on :attr:`events` as
    :class:`HistoryEvent` notifications.  Subscribers are called with
    ``source=<buffer>`` and ``value=<new flag>``, exactly once per flip.

    Not thread-safe: callers sharing a buffer between threads must
    synchronize externally.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        validator: Callable[[T], bool] | None = None,
        notify_on_clear: bool = False,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._backing = make_backing(capacity)
        self._validator = validator or default_validator
        self._notify_on_clear = notify_on_clear
        self._events = EventBus()
        self._start = 0
        self._end = 0
        self._current: int | None = None

    @classmethod
    def from_config(
        cls, config: HistoryConfig, validator: Callable[[T], bool] | None = None
    ) -> HistoryBuffer[T]:
        return cls(
            capacity=config.capacity,
            validator=validator,
            notify_on_clear=config.notify_on_clear,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def mode(self) -> StorageMode:
        return self._backing.mode

    @property
    def events(self) -> EventBus:
        return self._events

    @property
    def can_undo(self) -> bool:
        return self._current is not None and self._current > self._start

    @property
    def can_redo(self) -> bool:
        return self._current is not None and self._current < self._end

    @property
    def valid_count(self) -> int:
        if self._current is None:
            return 0
        return self._end - self._start + 1

    def __len__(self) -> int:
        return self.valid_count

    @property
    def current(self) -> T | None:
        """Element at the cursor, or ``None`` when empty."""
        if self._current is None:
            return None
        return self._backing.get(self._current)

    @property
    def state(self) -> HistoryState:
        if self._current is None:
            return HistoryState.EMPTY
        if self._start == self._end:
            return HistoryState.SINGLETON
        if self._current == self._start:
            return HistoryState.AT_OLDEST
        if self._current == self._end:
            return HistoryState.AT_NEWEST
        return HistoryState.MIDDLE

    def entries(self) -> list[T]:
        """Return the valid window, oldest first, including the redo tail."""
        if self._current is None:
            return []
        return [self._backing.get(i) for i in range(self._start, self._end + 1)]

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def subscribe(self, event: HistoryEvent, callback: Callable[..., Any]) -> None:
        self._events.subscribe(event, callback)

    def unsubscribe(self, event: HistoryEvent, callback: Callable[..., Any]) -> None:
        self._events.unsubscribe(event, callback)

    def _notify(self, old_can_undo: bool, old_can_redo: bool) -> None:
        can_undo = self.can_undo
        can_redo = self.can_redo
        if old_can_undo != can_undo:
            self._events.publish(HistoryEvent.CAN_UNDO_CHANGED, source=self, value=can_undo)
        if old_can_redo != can_redo:
            self._events.publish(HistoryEvent.CAN_REDO_CHANGED, source=self, value=can_redo)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def try_insert(self, value: T) -> bool:
        """Insert *value* after the cursor, discarding any redo tail.

        Returns False, without touching the history, for rejected values
        (None, invalid, or equal to the current element).
        """
        if value is None or not self._validator(value):
            logger.debug("Rejected invalid history entry")
            return False
        if self._current is not None and value == self._backing.get(self._current):
            return False

        old_can_undo = self.can_undo
        old_can_redo = self.can_redo

        current = 0 if self._current is None else self._current + 1
        self._backing.set(current, value)
        if self.mode is StorageMode.FIXED and current - self._start == self._capacity:
            self._start += 1
            logger.debug("History full (capacity %d), evicted oldest entry", self._capacity)
        self._current = current
        self._end = current

        self._notify(old_can_undo, old_can_redo)
        return True

    def try_undo(self) -> tuple[bool, T | None]:
        """Step back one element.  Returns ``(False, None)`` at the oldest."""
        if not self.can_undo:
            return False, None
        assert self._current is not None

        old_can_undo = self.can_undo
        old_can_redo = self.can_redo
        self._current -= 1
        value = self._backing.get(self._current)
        self._notify(old_can_undo, old_can_redo)
        return True, value

    def try_redo(self) -> tuple[bool, T | None]:
        """Step forward one element.  Returns ``(False, None)`` at the newest."""
        if not self.can_redo:
            return False, None
        assert self._current is not None

        old_can_undo = self.can_undo
        old_can_redo = self.can_redo
        self._current += 1
        value = self._backing.get(self._current)
        self._notify(old_can_undo, old_can_redo)
        return True, value

    def clear(self) -> None:
        """Reset to the empty state.  The ring keeps its slot count."""
        old_can_undo = self.can_undo
        old_can_redo = self.can_redo

        self._start = 0
        self._end = 0
        self._current = None
        self._backing.reset()
        logger.debug("History cleared")

        if self._notify_on_clear:
            self._notify(old_can_undo, old_can_redo)
