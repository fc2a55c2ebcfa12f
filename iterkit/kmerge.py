"""Merge any number of sorted iterables into one sorted stream."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_EXHAUSTED = object()


class _HeadTail(Generic[T]):
    """A non-empty iterator split into its first item and the rest."""

    __slots__ = ("head", "tail")

    def __init__(self, head: T, tail: Iterator[T]) -> None:
        self.head = head
        self.tail = tail

    @classmethod
    def start(cls, iterable: Iterable[T]) -> _HeadTail[T] | None:
        it = iter(iterable)
        head = next(it, _EXHAUSTED)
        if head is _EXHAUSTED:
            return None
        return cls(head, it)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"_HeadTail(head={self.head!r})"


def _sift_down(heap: list[Any], index: int, less_than: Callable[[Any, Any], bool]) -> None:
    """Move ``heap[index]`` down until the min-heap property holds again."""
    size = len(heap)
    pos = index
    child = 2 * pos + 1
    while child + 1 < size:
        if less_than(heap[child + 1], heap[child]):
            child += 1
        if not less_than(heap[child], heap[pos]):
            return
        heap[pos], heap[child] = heap[child], heap[pos]
        pos = child
        child = 2 * pos + 1
    if child + 1 == size and less_than(heap[child], heap[pos]):
        heap[pos], heap[child] = heap[child], heap[pos]


def _merge(heap: list[_HeadTail[T]], by_head: Callable[[Any, Any], bool]) -> Iterator[T]:
    while heap:
        top = heap[0]
        following = next(top.tail, _EXHAUSTED)
        if following is _EXHAUSTED:
            result = top.head
            last = heap.pop()
            if heap:
                heap[0] = last
        else:
            result, top.head = top.head, following
        _sift_down(heap, 0, by_head)
        yield result


def kmerge_by(
    iterables: Iterable[Iterable[T]], less_than: Callable[[T, T], bool]
) -> Iterator[T]:
    """Merge ``iterables`` using ``less_than(a, b)`` as the ordering.

    If every input is sorted with respect to ``less_than``, so is the output.
    The first item of each input is read immediately.
    """

    def by_head(a: _HeadTail[T], b: _HeadTail[T]) -> bool:
        return less_than(a.head, b.head)

    heap = [ht for ht in map(_HeadTail.start, iterables) if ht is not None]
    for i in reversed(range(len(heap) // 2)):
        _sift_down(heap, i, by_head)
    return _merge(heap, by_head)


def kmerge(iterables: Iterable[Iterable[T]]) -> Iterator[T]:
    """Merge ``iterables`` in ascending order."""
    return kmerge_by(iterables, operator.lt)