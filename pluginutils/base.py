from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Any, Protocol
from collections.abc import Sized, Iterable, Iterator


__all__ = [
    "SourceAdapter",
    "SeekableSourceAdapter",
    "CollectionAdapter",
    "CookieAdapter",
    "ResponseAdapter",
    "LoggerLike",
]


T = TypeVar("T")


class SourceAdapter(ABC, Iterator, Generic[T]):
    """Adapter pattern interface for pull-based host iterators.

    Implementations expose the host's two-method cursor protocol. The
    cursor is stateful and single pass: once drained it cannot be
    rewound.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Whether another item is available."""

    @abstractmethod
    def next(self) -> T:
        """Advances the cursor and returns the item under it.

        Behaviour is implementation defined if ``has_next()`` is
        ``False``.
        """

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()


class SeekableSourceAdapter(SourceAdapter[T]):
    """Source bound to a host resource, which must be released once the
    traversal is over.
    """

    @abstractmethod
    def close(self) -> None:
        """Releases the resources held by the cursor."""

    def __next__(self) -> T:
        if not self.has_next():
            self.close()
            raise StopIteration
        return self.next()


class CollectionAdapter(ABC, Sized, Iterable, Generic[T]):
    """Adapter pattern interface for bulk containers handing out
    cursors.
    """

    @abstractmethod
    def iterator(self) -> SourceAdapter[T]:
        """Returns a new cursor positioned before the first item."""

    def __iter__(self) -> SourceAdapter[T]:
        return self.iterator()


class CookieAdapter(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def value(self) -> str:
        pass

    @property
    @abstractmethod
    def path(self) -> str:
        pass

    @property
    @abstractmethod
    def max_age(self) -> int:
        """Lifetime in seconds. -1 lasts for the browser session, 0
        expires the cookie.
        """

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def set_path(self, path: str) -> None:
        pass

    @abstractmethod
    def set_max_age(self, max_age: int) -> None:
        pass


class ResponseAdapter(ABC):
    """Response-side sink for outgoing cookies."""

    @abstractmethod
    def add_http_cookie(self, cookie: CookieAdapter) -> None:
        pass


class LoggerLike(Protocol):
    def error(self, msg: Any) -> None:
        ...
