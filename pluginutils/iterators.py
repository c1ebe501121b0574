"""
``pluginutils.iterators``
=========================

Eager traversal over pull-based host iterators. Each function takes a
``SourceAdapter``, drains it in a single pass, and pushes every item to
a callback together with its zero-based index.

Sources bound to a host resource (``SeekableSourceAdapter``) are closed
once they have been drained. If a callback raises, the exception
propagates immediately and the source is left open.
"""
import typing as ty

from pluginutils import base
from pluginutils._base import MISSING

__all__ = ["for_each", "map", "filter", "reduce"]


T = ty.TypeVar("T")
R = ty.TypeVar("R")
A = ty.TypeVar("A")


def _check_source(source: ty.Any) -> None:
    if not isinstance(source, base.SourceAdapter):
        raise TypeError(
            f"Expected a SourceAdapter, got {type(source).__name__}. "
            "Plain Python iterables may be wrapped with "
            "pluginutils.sources.IterableSource."
        )


def for_each(
    source: base.SourceAdapter[T], callback: ty.Callable[[T, int], ty.Any]
) -> None:
    """Calls ``callback`` on each item of ``source``, in order.

    :group: Iterators

    Parameters
    ----------
    source : SourceAdapter
        The cursor to drain. It cannot be reused afterwards.
    callback : callable
        Called as ``callback(item, index)``. Return value is ignored.

    Raises
    ------
    TypeError
        If ``source`` is not a ``SourceAdapter``.
    """
    _check_source(source)
    index = 0
    while source.has_next():
        item = source.next()
        callback(item, index)
        index = index + 1
    if isinstance(source, base.SeekableSourceAdapter):
        source.close()


def map(
    source: base.SourceAdapter[T], callback: ty.Callable[[T, int], R]
) -> ty.List[R]:
    """Returns a list of ``callback(item, index)`` for each item of
    ``source``, in traversal order.

    :group: Iterators
    """
    mapped: ty.List[R] = []
    for_each(source, lambda item, idx: mapped.append(callback(item, idx)))
    return mapped


def filter(
    source: base.SourceAdapter[T], callback: ty.Callable[[T, int], ty.Any]
) -> ty.List[T]:
    """Returns a list of the items of ``source`` for which
    ``callback(item, index)`` is truthy, preserving their order.

    :group: Iterators
    """
    kept: ty.List[T] = []

    def keep(item: T, index: int) -> None:
        if callback(item, index):
            kept.append(item)

    for_each(source, keep)
    return kept


def reduce(
    source: base.SourceAdapter[T],
    callback: ty.Callable[[A, T, int], A],
    initial: ty.Any = MISSING,
) -> ty.Optional[A]:
    """Folds the items of ``source`` into a single value.

    :group: Iterators

    Parameters
    ----------
    source : SourceAdapter
        The cursor to drain.
    callback : callable
        Called as ``callback(accumulator, item, index)``, returning the
        new accumulator.
    initial : any, optional
        Starting value of the accumulator. If omitted, the first item is
        used instead, and ``callback`` is first called on the second
        item, with ``index`` equal to 1.

    Returns
    -------
    accumulator : any
        The final accumulator. If ``source`` is empty, ``initial`` is
        returned untouched, or ``None`` when it was omitted.

    Notes
    -----
    ``None`` is a valid explicit initial value; only omitting the
    argument makes the first item seed the accumulator.
    """
    accumulator = initial

    def step(item: T, index: int) -> None:
        nonlocal accumulator
        if accumulator is MISSING:
            accumulator = item
        else:
            accumulator = callback(accumulator, item, index)

    for_each(source, step)
    if accumulator is MISSING:
        return None
    return accumulator
