"""Insert a separator between consecutive items of an iterable."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def intersperse_with(iterable: Iterable[T], make_element: Callable[[], T]) -> Iterator[T]:
    """Yield the items of ``iterable`` with ``make_element()`` between each pair.

    ``make_element`` is only called when another item actually follows.
    The result stops for good as soon as the source is exhausted.
    """
    it = iter(iterable)
    for first in it:
        yield first
        break
    else:
        return
    for item in it:
        yield make_element()
        yield item


def intersperse(iterable: Iterable[T], element: T) -> Iterator[T]:
    """Yield the items of ``iterable`` with ``element`` between each pair."""
    return intersperse_with(iterable, lambda: element)