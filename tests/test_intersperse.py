from itertools import islice, count

from hypothesis import given, strategies as st

from iterkit.intersperse import intersperse, intersperse_with


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


def test_basic():
    assert list(intersperse([1, 2, 3], 0)) == [1, 0, 2, 0, 3]


def test_empty():
    assert list(intersperse([], 0)) == []


def test_single():
    assert list(intersperse(["x"], ",")) == ["x"]


def test_strings():
    assert "".join(intersperse("abc", "-")) == "a-b-c"


def test_with_counts_calls():
    calls = []

    def make():
        calls.append(None)
        return len(calls)

    result = list(intersperse_with(["a", "b", "c"], make))
    assert result == ["a", 1, "b", 2, "c"]
    assert len(calls) == 2


def test_with_not_called_for_single_item():
    calls = []
    result = list(intersperse_with([7], lambda: calls.append(None)))
    assert result == [7]
    assert calls == []


def test_lazy_on_infinite_source():
    assert list(islice(intersperse(count(), -1), 5)) == [0, -1, 1, -1, 2]


def test_fused_after_exhaustion():
    it = intersperse(_Unfused([1, 2], extra=5), 0)
    assert list(it) == [1, 0, 2]
    assert [next(it, None) for _ in range(10)] == [None] * 10


@given(st.lists(st.integers()), st.integers())
def test_equal_intersperse(data, sep):
    result = list(intersperse(data, sep))
    assert result[::2] == data
    assert all(x == sep for x in result[1::2])


@given(st.lists(st.integers()), st.integers())
def test_length(data, sep):
    result = list(intersperse(iter(data), sep))
    assert len(result) == max(0, 2 * len(data) - 1)