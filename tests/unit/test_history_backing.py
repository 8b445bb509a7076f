"""Tests for undoredo.history.backing: ring and growable stores."""

from __future__ import annotations

import pytest

from undoredo.core.types import StorageMode
from undoredo.history.backing import (
    DEFAULT_RESERVE,
    GrowableBacking,
    RingBacking,
    make_backing,
)


class TestMakeBacking:
    def test_zero_is_growable(self):
        b = make_backing(0)
        assert isinstance(b, GrowableBacking)
        assert b.mode is StorageMode.UNBOUNDED
        assert b.reserve == DEFAULT_RESERVE

    def test_positive_is_ring(self):
        b = make_backing(7)
        assert isinstance(b, RingBacking)
        assert b.mode is StorageMode.FIXED
        assert b.size == 7

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            make_backing(-3)

    def test_storage_mode_for_capacity(self):
        assert StorageMode.for_capacity(0) is StorageMode.UNBOUNDED
        assert StorageMode.for_capacity(1) is StorageMode.FIXED


class TestRingBacking:
    def test_invalid_capacity(self):
        with pytest.raises(ValueError, match="capacity must be >= 1"):
            RingBacking(0)

    def test_logical_index_wraps(self):
        b = RingBacking(3)
        b.set(0, "a")
        b.set(4, "b")
        assert b.get(3) == "a"
        assert b.get(1) == "b"
        assert b.size == 3

    def test_append_unsupported(self):
        with pytest.raises(TypeError):
            RingBacking(2).append("x")

    def test_reset_releases_slots(self):
        b = RingBacking(2)
        b.set(0, "a")
        b.set(1, "b")
        b.reset()
        assert b.size == 2
        assert b.get(0) is None
        assert b.get(1) is None


class TestGrowableBacking:
    def test_set_at_size_appends(self):
        b = GrowableBacking()
        b.set(0, "a")
        b.set(1, "b")
        assert b.size == 2
        assert b.get(1) == "b"

    def test_set_overwrites(self):
        b = GrowableBacking()
        b.append("a")
        b.append("b")
        b.set(0, "x")
        assert b.get(0) == "x"
        assert b.size == 2

    def test_set_past_end_rejected(self):
        b = GrowableBacking()
        with pytest.raises(IndexError):
            b.set(2, "a")

    def test_get_out_of_range(self):
        b = GrowableBacking()
        with pytest.raises(IndexError):
            b.get(0)
        with pytest.raises(IndexError):
            b.get(-1)

    def test_reset_truncates(self):
        b = GrowableBacking(reserve=10)
        for v in "abc":
            b.append(v)
        b.reset()
        assert b.size == 0
        assert b.reserve == 10
