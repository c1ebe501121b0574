import typing as ty

import pytest

from pluginutils.sources import IterableSource, SeekableSource


def test_has_next_is_idempotent() -> None:
    source = IterableSource(iter([1, 2]))
    assert source.has_next() and source.has_next()
    assert source.next() == 1
    assert source.next() == 2
    assert source.has_next() is False
    assert source.has_next() is False


def test_next_past_end() -> None:
    source = IterableSource([])
    with pytest.raises(RuntimeError, match="exhausted"):
        source.next()


def test_python_iterator_protocol() -> None:
    """Tests that sources can be consumed by ordinary for loops."""
    source = IterableSource("abc")
    assert list(source) == ["a", "b", "c"]
    assert list(source) == []


def test_seekable_close() -> None:
    source = SeekableSource([1, 2, 3])
    assert source.next() == 1
    source.close()
    source.close()
    assert source.closed is True
    assert source.close_count == 2
    assert source.has_next() is False
    with pytest.raises(RuntimeError, match="closed"):
        source.next()


def test_seekable_closes_generators() -> None:
    """Tests that closing a source also finalises a wrapped generator."""
    finalised: ty.List[bool] = []

    def numbers() -> ty.Generator[int, None, None]:
        try:
            yield 1
            yield 2
        finally:
            finalised.append(True)

    source = SeekableSource(numbers())
    assert source.next() == 1
    source.close()
    assert finalised == [True]


def test_repr() -> None:
    source = SeekableSource([1])
    assert repr(source) == "SeekableSource(has_next=True)"
    source.close()
    assert repr(source) == "SeekableSource(closed=True)"


def test_seekable_closes_on_python_exhaustion() -> None:
    """Tests that for loops and ``list()`` release a seekable source once
    it runs out.
    """
    source = SeekableSource([1, 2])
    assert list(source) == [1, 2]
    assert source.closed is True
    assert source.close_count == 1

    partial = SeekableSource([1, 2, 3])
    for item in partial:
        if item == 2:
            break
    assert partial.closed is False
