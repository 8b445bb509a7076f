"""Undo/redo history buffer."""

from undoredo.history.backing import Backing, GrowableBacking, RingBacking, make_backing
from undoredo.history.buffer import HistoryBuffer, Validatable, default_validator
from undoredo.history.config import HistoryConfig

__all__ = [
    "Backing",
    "GrowableBacking",
    "HistoryBuffer",
    "HistoryConfig",
    "RingBacking",
    "Validatable",
    "default_validator",
    "make_backing",
]
