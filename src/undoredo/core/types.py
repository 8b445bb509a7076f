"""Core enumerations for the undo/redo history manager."""

from __future__ import annotations

import enum


class StorageMode(enum.Enum):
    """Backing store layout selected from the configured capacity."""

    FIXED = "fixed"  # capacity > 0, ring of exactly ``capacity`` slots
    UNBOUNDED = "unbounded"  # capacity == 0, growable list

    @classmethod
    def for_capacity(cls, capacity: int) -> StorageMode:
        return cls.UNBOUNDED if capacity == 0 else cls.FIXED


class HistoryEvent(enum.Enum):
    """Notifications raised when undo/redo availability flips."""

    CAN_UNDO_CHANGED = "can_undo_changed"
    CAN_REDO_CHANGED = "can_redo_changed"


class HistoryState(enum.Enum):
    """Position of the cursor within the valid window."""

    EMPTY = "empty"
    SINGLETON = "singleton"  # start == end == current
    AT_OLDEST = "at_oldest"
    AT_NEWEST = "at_newest"
    MIDDLE = "middle"
