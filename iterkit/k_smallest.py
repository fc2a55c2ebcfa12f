"""Selection of the k smallest items of an iterable."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def k_smallest(iterable: Iterable[T], k: int) -> list[T]:
    """Return the ``k`` smallest items of ``iterable`` in ascending order.

    The whole iterable is consumed, but at most ``k`` items are held at once.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    if k == 0:
        return []
    return heapq.nsmallest(k, iterable)