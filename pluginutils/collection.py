"""
``pluginutils.collection``
==========================

The iterator traversals, applied to bulk containers. Every call asks
the container for a fresh cursor, so the container itself is never
consumed.
"""
import typing as ty

from pluginutils import base, iterators
from pluginutils._base import MISSING

__all__ = ["for_each", "map", "filter", "reduce"]


T = ty.TypeVar("T")
R = ty.TypeVar("R")
A = ty.TypeVar("A")


def for_each(
    collection: base.CollectionAdapter[T],
    callback: ty.Callable[[T, int], ty.Any],
) -> None:
    """Calls ``callback(item, index)`` on each item of ``collection``.

    :group: Collections
    """
    iterators.for_each(collection.iterator(), callback)


def map(
    collection: base.CollectionAdapter[T],
    callback: ty.Callable[[T, int], R],
) -> ty.List[R]:
    """Returns a list of ``callback(item, index)`` over ``collection``.

    :group: Collections
    """
    return iterators.map(collection.iterator(), callback)


def filter(
    collection: base.CollectionAdapter[T],
    callback: ty.Callable[[T, int], ty.Any],
) -> ty.List[T]:
    """Returns a list of items in ``collection`` passing ``callback``.

    :group: Collections
    """
    return iterators.filter(collection.iterator(), callback)


def reduce(
    collection: base.CollectionAdapter[T],
    callback: ty.Callable[[A, T, int], A],
    initial: ty.Any = MISSING,
) -> ty.Optional[A]:
    """Folds ``collection`` into a single value, starting from
    ``initial`` if given. See ``pluginutils.iterators.reduce``.

    :group: Collections
    """
    return iterators.reduce(collection.iterator(), callback, initial)
