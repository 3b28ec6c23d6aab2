"""Pin allocator tests."""

from __future__ import annotations

import pytest

from potential_grid.pins import PinAllocator


def test_allocates_from_zero_in_order() -> None:
    allocator = PinAllocator()

    assert [allocator.allocate() for _ in range(5)] == [0, 1, 2, 3, 4]
    assert allocator.issued == 5


def test_peek_does_not_consume() -> None:
    allocator = PinAllocator(start=7)

    assert allocator.peek() == 7
    assert allocator.peek() == 7
    assert allocator.allocate() == 7
    assert allocator.peek() == 8


def test_independent_allocators_do_not_share_state() -> None:
    a = PinAllocator()
    b = PinAllocator()
    a.allocate()
    a.allocate()

    assert b.allocate() == 0


def test_negative_start_rejected() -> None:
    with pytest.raises(ValueError):
        PinAllocator(start=-1)
