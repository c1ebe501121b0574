"""
``pluginutils.sources``
=======================

In-process implementations of the host cursor and container
interfaces, wrapping ordinary Python iterables. They let the traversal
helpers run outside the host platform.
"""
import collections as cl
import typing as ty
from collections.abc import Generator

from pluginutils import base

__all__ = ["IterableSource", "SeekableSource", "ListCollection"]


T = ty.TypeVar("T")


class IterableSource(base.SourceAdapter[T]):
    """Pull-based cursor over a Python iterable, looking ahead by one
    item to answer ``has_next()``.

    :group: Sources

    Parameters
    ----------
    iterable : iterable
        The items to emit, in order.

    Raises
    ------
    RuntimeError
        If ``next()`` is called once the source is exhausted.
    """

    def __init__(self, iterable: ty.Iterable[T]) -> None:
        self._iterator = iter(iterable)
        self._buffer: ty.Deque[T] = cl.deque(maxlen=1)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(has_next={self.has_next()})"

    def has_next(self) -> bool:
        if self._buffer:
            return True
        try:
            self._buffer.append(next(self._iterator))
        except StopIteration:
            return False
        return True

    def next(self) -> T:
        if not self.has_next():
            raise RuntimeError(
                f"{self.__class__.__name__} is exhausted. "
                "Check has_next() before calling next()."
            )
        return self._buffer.popleft()


class SeekableSource(IterableSource, base.SeekableSourceAdapter):
    """Cursor which must be closed when done, like the host's seekable
    iterators over query results.

    :group: Sources

    Attributes
    ----------
    closed : bool
        Whether ``close()`` has been called.
    close_count : int
        Number of times ``close()`` has been called.
    """

    def __init__(self, iterable: ty.Iterable[T]) -> None:
        super().__init__(iterable)
        self.closed = False
        self.close_count = 0

    def __repr__(self) -> str:
        name = self.__class__.__name__
        if self.closed:
            return f"{name}(closed=True)"
        return f"{name}(has_next={self.has_next()})"

    def has_next(self) -> bool:
        if self.closed:
            return False
        return super().has_next()

    def next(self) -> T:
        if self.closed:
            raise RuntimeError(f"{self.__class__.__name__} is closed.")
        return super().next()

    def close(self) -> None:
        self.close_count = self.close_count + 1
        if self.closed:
            return
        self.closed = True
        self._buffer.clear()
        if isinstance(self._iterator, Generator):
            self._iterator.close()


class ListCollection(base.CollectionAdapter[T]):
    """Bulk container backed by a list. Every call to ``iterator()``
    returns an independent cursor.

    :group: Sources

    Parameters
    ----------
    items : iterable, optional
        Initial contents.
    seekable : bool
        Whether cursors are ``SeekableSource`` instances, which are
        closed after traversal. Default is ``True``.
    """

    def __init__(
        self, items: ty.Iterable[T] = (), seekable: bool = True
    ) -> None:
        self._items: ty.List[T] = list(items)
        self.seekable = seekable

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(len={len(self)})"

    def add(self, *items: T) -> None:
        """Appends ``items`` to the end of the collection."""
        self._items.extend(items)

    def iterator(self) -> IterableSource[T]:
        if self.seekable:
            return SeekableSource(tuple(self._items))
        return IterableSource(tuple(self._items))
