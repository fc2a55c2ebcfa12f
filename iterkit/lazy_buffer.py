"""A buffer that pulls items from an iterator only when asked to."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")


class LazyBuffer(Generic[T]):
    """Remembers every item drawn from an iterator, drawing more on demand.

    Once the underlying iterator reports exhaustion it is never asked again.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self.it: Iterator[T] = iter(iterable)
        self._done = False
        self._buffer: list[T] = []

    def __len__(self) -> int:
        return len(self._buffer)

    @property
    def done(self) -> bool:
        """True once the underlying iterator has been found exhausted."""
        return self._done

    def get_next(self) -> bool:
        """Draw one more item into the buffer; return whether one was drawn."""
        if self._done:
            return False
        try:
            item = next(self.it)
        except StopIteration:
            self._done = True
            return False
        self._buffer.append(item)
        return True

    def prefill(self, length: int) -> None:
        """Draw items until the buffer holds ``length`` of them or the source ends."""
        missing = length - len(self._buffer)
        if self._done or missing <= 0:
            return
        self._buffer.extend(islice(self.it, missing))
        self._done = len(self._buffer) < length

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: Any) -> Any:
        return self._buffer[index]

    def __repr__(self) -> str:
        return f"LazyBuffer(buffer={self._buffer!r}, done={self._done!r})"