import pytest
from hypothesis import given, strategies as st

from iterkit.lazy_buffer import LazyBuffer


class _Unfused:
    """Yields its items, stops once, then yields ``extra`` forever after."""

    def __init__(self, items, extra):
        self._items = list(items)
        self._stopped = False
        self._extra = extra

    def __iter__(self):
        return self

    def __next__(self):
        if self._items:
            return self._items.pop(0)
        if not self._stopped:
            self._stopped = True
            raise StopIteration
        return self._extra


def test_starts_empty():
    buf = LazyBuffer(range(5))
    assert len(buf) == 0
    assert not buf.done


def test_get_next_pulls_one_item_at_a_time():
    buf = LazyBuffer(["a", "b"])
    assert buf.get_next() is True
    assert len(buf) == 1
    assert buf[0] == "a"
    assert buf.get_next() is True
    assert buf[1] == "b"
    assert buf.get_next() is False
    assert buf.done
    assert len(buf) == 2


def test_get_next_never_touches_exhausted_source_again():
    source = _Unfused([1], extra=99)
    buf = LazyBuffer(source)
    assert buf.get_next() is True
    assert buf.get_next() is False
    assert buf.get_next() is False
    assert buf[:] == [1]


def test_prefill_takes_only_what_is_needed():
    source = iter(range(10))
    buf = LazyBuffer(source)
    buf.prefill(4)
    assert buf[:] == [0, 1, 2, 3]
    assert not buf.done
    assert next(source) == 4


def test_prefill_shorter_than_buffer_does_nothing():
    buf = LazyBuffer(range(10))
    buf.prefill(5)
    buf.prefill(2)
    assert len(buf) == 5


def test_prefill_past_end_marks_done():
    buf = LazyBuffer(range(3))
    buf.prefill(7)
    assert len(buf) == 3
    assert buf.done
    assert buf.get_next() is False


def test_prefill_after_done_does_not_pull():
    source = _Unfused([1, 2], extra=42)
    buf = LazyBuffer(source)
    buf.prefill(5)
    assert buf.done
    buf.prefill(10)
    assert buf[:] == [1, 2]


def test_indexing_out_of_range_raises():
    buf = LazyBuffer(range(3))
    buf.prefill(2)
    assert buf[1] == 1
    with pytest.raises(IndexError):
        buf[2]
    assert len(buf) == 2
    assert buf[:] == [0, 1]


def test_slicing_and_negative_index():
    buf = LazyBuffer("hello")
    buf.prefill(5)
    assert buf[1:3] == ["e", "l"]
    assert buf[-1] == "o"


@given(st.lists(st.integers()), st.integers(min_value=0, max_value=50))
def test_prefill_invariants(items, length):
    buf = LazyBuffer(items)
    buf.prefill(length)
    assert len(buf) == min(length, len(items))
    assert buf[:] == items[: len(buf)]
    assert buf.done == (length > len(items))


@given(st.lists(st.integers()))
def test_get_next_collects_everything(items):
    buf = LazyBuffer(items)
    pulled = 0
    while buf.get_next():
        pulled += 1
    assert pulled == len(items)
    assert buf[:] == items