"""Backing stores for HistoryBuffer: fixed ring or growable list.

Both stores are addressed by *logical* index.  The ring maps a logical
index onto ``index % capacity`` so cursors can grow without bound while
the physical array stays at ``capacity`` slots.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from undoredo.core.types import StorageMode

T = TypeVar("T")

DEFAULT_RESERVE = 100


class Backing(Generic[T]):
    """Common interface of the two backing stores."""

    mode: StorageMode

    @property
    def size(self) -> int:
        raise NotImplementedError

    def get(self, index: int) -> T:
        raise NotImplementedError

    def set(self, index: int, value: T) -> None:
        raise NotImplementedError

    def append(self, value: T) -> None:
        raise NotImplementedError

    def reset(self) -> None:
        raise NotImplementedError


class RingBacking(Backing[T]):
    """Fixed array of ``capacity`` slots indexed modulo ``capacity``."""

    mode = StorageMode.FIXED

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._slots: list[Any] = [None] * capacity

    @property
    def size(self) -> int:
        return len(self._slots)

    def get(self, index: int) -> T:
        return self._slots[index % len(self._slots)]

    def set(self, index: int, value: T) -> None:
        self._slots[index % len(self._slots)] = value

    def append(self, value: T) -> None:
        raise TypeError("RingBacking has a fixed size; use set()")

    def reset(self) -> None:
        """Drop references to stored elements.  The slot count is kept."""
        for i in range(len(self._slots)):
            self._slots[i] = None


class GrowableBacking(Backing[T]):
    """Unbounded list.  Writing at ``index == size`` appends."""

    mode = StorageMode.UNBOUNDED

    def __init__(self, reserve: int = DEFAULT_RESERVE) -> None:
        # Python lists grow on demand; the reserve is only a sizing hint.
        self._reserve = reserve
        self._items: list[T] = []

    @property
    def reserve(self) -> int:
        return self._reserve

    @property
    def size(self) -> int:
        return len(self._items)

    def get(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for size {len(self._items)}")
        return self._items[index]

    def set(self, index: int, value: T) -> None:
        if index == len(self._items):
            self._items.append(value)
        elif 0 <= index < len(self._items):
            self._items[index] = value
        else:
            raise IndexError(f"index {index} out of range for size {len(self._items)}")

    def append(self, value: T) -> None:
        self._items.append(value)

    def reset(self) -> None:
        self._items.clear()


def make_backing(capacity: int) -> Backing[Any]:
    """Select the backing store for *capacity* (0 = unbounded)."""
    if capacity < 0:
        raise ValueError(f"capacity must be >= 0, got {capacity}")
    if StorageMode.for_capacity(capacity) is StorageMode.UNBOUNDED:
        return GrowableBacking()
    return RingBacking(capacity)
