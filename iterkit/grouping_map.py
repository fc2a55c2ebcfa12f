"""Group-and-fold operations over keyed items, without building groups first."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")


@dataclass(frozen=True)
class OneElement(Generic[V]):
    """The only element of a group; it is both its minimum and its maximum."""

    value: V


@dataclass(frozen=True)
class MinMax(Generic[V]):
    """The minimum and maximum of a group holding at least two elements."""

    min: V
    max: V


def _natural_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _add_to_collection(collection: Any, value: Any) -> None:
    if hasattr(collection, "append"):
        collection.append(value)
    elif hasattr(collection, "add"):
        collection.add(value)
    else:
        raise TypeError(
            f"cannot add items to a collection of type {type(collection).__name__}"
        )


class GroupingMap(Generic[K, V]):
    """Groups ``(key, value)`` pairs by key and folds each group as it goes.

    Every operation consumes the source pairs and returns a ``dict`` mapping
    each key to the result for its group. A ``GroupingMap`` can be used once.

    Comparison functions follow the ``cmp`` convention: they receive the group
    key and two values and return a negative number, zero or a positive number
    when the first value is less than, equal to or greater than the second.
    """

    def __init__(self, pairs: Iterable[tuple[K, V]]) -> None:
        self._pairs: Iterator[tuple[K, V]] | None = iter(pairs)

    def _take(self) -> Iterator[tuple[K, V]]:
        if self._pairs is None:
            raise RuntimeError("GroupingMap has already been consumed")
        pairs, self._pairs = self._pairs, None
        return pairs

    def __repr__(self) -> str:
        state = "consumed" if self._pairs is None else "pending"
        return f"GroupingMap({state})"

    def aggregate(self, operation: Callable[[R | None, K, V], R | None]) -> dict[K, R]:
        """Fold each group with ``operation(acc, key, value)``.

        ``acc`` is ``None`` when the group has no accumulator yet. When
        ``operation`` returns ``None`` the accumulator is discarded; a group
        whose last step discards it has no entry in the result.
        """
        result: dict[K, R] = {}
        for key, value in self._take():
            acc = result.pop(key, None)
            new_acc = operation(acc, key, value)
            if new_acc is not None:
                result[key] = new_acc
        return result

    def fold(self, init: R, operation: Callable[[R, K, V], R]) -> dict[K, R]:
        """Fold each group starting from a fresh copy of ``init``."""
        result: dict[K, R] = {}
        for key, value in self._take():
            acc = result[key] if key in result else copy.deepcopy(init)
            result[key] = operation(acc, key, value)
        return result

    def fold_first(self, operation: Callable[[V, K, V], V]) -> dict[K, V]:
        """Fold each group, using its first element as the initial accumulator."""
        result: dict[K, V] = {}
        for key, value in self._take():
            if key in result:
                result[key] = operation(result[key], key, value)
            else:
                result[key] = value
        return result

    def collect(self, factory: Callable[[], Any] = list) -> dict[K, Any]:
        """Gather each group's elements, in order, into a collection from ``factory``.

        The collection must support ``append`` or ``add``.
        """
        result: dict[K, Any] = {}
        for key, value in self._take():
            if key not in result:
                result[key] = factory()
            _add_to_collection(result[key], value)
        return result

    def max(self) -> dict[K, V]:
        """Maximum of each group; among equal maxima the last one wins."""
        return self.max_by(lambda _key, a, b: _natural_cmp(a, b))

    def max_by(self, compare: Callable[[K, V, V], int]) -> dict[K, V]:
        """Maximum of each group under ``compare``; the last of equal maxima wins."""
        return self.fold_first(
            lambda acc, key, value: value if compare(key, acc, value) <= 0 else acc
        )

    def max_by_key(self, key: Callable[[K, V], Any]) -> dict[K, V]:
        """Element of each group with the largest ``key(group_key, value)``."""
        return self.max_by(lambda k, a, b: _natural_cmp(key(k, a), key(k, b)))

    def min(self) -> dict[K, V]:
        """Minimum of each group; among equal minima the first one wins."""
        return self.min_by(lambda _key, a, b: _natural_cmp(a, b))

    def min_by(self, compare: Callable[[K, V, V], int]) -> dict[K, V]:
        """Minimum of each group under ``compare``; the first of equal minima wins."""
        return self.fold_first(
            lambda acc, key, value: acc if compare(key, acc, value) <= 0 else value
        )

    def min_by_key(self, key: Callable[[K, V], Any]) -> dict[K, V]:
        """Element of each group with the smallest ``key(group_key, value)``."""
        return self.min_by(lambda k, a, b: _natural_cmp(key(k, a), key(k, b)))

    def minmax(self) -> dict[K, OneElement[V] | MinMax[V]]:
        """Minimum and maximum of each group (first minimum, last maximum)."""
        return self.minmax_by(lambda _key, a, b: _natural_cmp(a, b))

    def minmax_by(
        self, compare: Callable[[K, V, V], int]
    ) -> dict[K, OneElement[V] | MinMax[V]]:
        """Minimum and maximum of each group under ``compare``."""

        def step(
            acc: OneElement[V] | MinMax[V] | None, key: K, value: V
        ) -> OneElement[V] | MinMax[V]:
            if acc is None:
                return OneElement(value)
            if isinstance(acc, OneElement):
                if compare(key, value, acc.value) < 0:
                    return MinMax(value, acc.value)
                return MinMax(acc.value, value)
            if compare(key, value, acc.min) < 0:
                return MinMax(value, acc.max)
            if compare(key, value, acc.max) >= 0:
                return MinMax(acc.min, value)
            return acc

        return self.aggregate(step)

    def minmax_by_key(
        self, key: Callable[[K, V], Any]
    ) -> dict[K, OneElement[V] | MinMax[V]]:
        """Elements of each group with the smallest and largest ``key(group_key, value)``."""
        return self.minmax_by(lambda k, a, b: _natural_cmp(key(k, a), key(k, b)))

    def sum(self) -> dict[K, V]:
        """Sum of each group's elements, added left to right."""
        return self.fold_first(lambda acc, _key, value: acc + value)

    def product(self) -> dict[K, V]:
        """Product of each group's elements, multiplied left to right."""
        return self.fold_first(lambda acc, _key, value: acc * value)


def into_grouping_map(pairs: Iterable[tuple[K, V]]) -> GroupingMap[K, V]:
    """Make a ``GroupingMap`` from ``(key, value)`` pairs."""
    return GroupingMap(pairs)


def into_grouping_map_by(iterable: Iterable[V], key: Callable[[V], K]) -> GroupingMap[K, V]:
    """Make a ``GroupingMap`` keying each item of ``iterable`` with ``key(item)``."""
    return GroupingMap((key(value), value) for value in iterable)