"""
``pluginutils.arrays``
======================

Order-preserving set operations on lists. Items need not be hashable;
they are compared by value, with booleans kept distinct from integers
and NaN matching itself.
"""
import typing as ty

import numpy as np

from pluginutils._base import structurally_equal

__all__ = ["unique", "flatten", "difference"]


T = ty.TypeVar("T")


def _contains(values: ty.Iterable[ty.Any], target: ty.Any) -> bool:
    return any(structurally_equal(value, target) for value in values)


def _is_nested(value: ty.Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (list, tuple))


def unique(array: ty.Iterable[T]) -> ty.List[T]:
    """Returns the distinct values of ``array``, in order of first
    appearance.

    :group: Arrays

    Examples
    --------
    >>> unique(["DE", "BE", "DE", "CZ", "NL", "DK", "NL", "EE"])
    ['DE', 'BE', 'CZ', 'NL', 'DK', 'EE']
    >>> unique([1, True, 0, False, 1])
    [1, True, 0, False]
    """
    distinct: ty.List[T] = []
    for value in array:
        if not _contains(distinct, value):
            distinct.append(value)
    return distinct


def flatten(
    array: ty.Iterable[ty.Any], depth: ty.Optional[int] = None
) -> ty.List[ty.Any]:
    """Flattens nested lists, tuples and NumPy arrays into a single
    list.

    :group: Arrays

    Parameters
    ----------
    array : iterable
        The values to flatten.
    depth : int, optional
        Maximum number of nesting levels to remove. If ``None``, the
        result contains no nested sequences at all. Default is
        ``None``.

    Returns
    -------
    flat : list
        New list of the values of ``array``.

    Raises
    ------
    ValueError
        If ``depth`` is negative.

    Examples
    --------
    >>> flatten([1, [2, [3, [4]]], (5,)])
    [1, 2, 3, 4, 5]
    >>> flatten([1, [2, [3, [4]]]], depth=1)
    [1, 2, [3, [4]]]
    """
    if depth is not None and depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}.")
    flat: ty.List[ty.Any] = []
    for value in array:
        if _is_nested(value) and (depth is None or depth > 0):
            flat.extend(flatten(value, None if depth is None else depth - 1))
        else:
            flat.append(value)
    return flat


def difference(
    array: ty.Iterable[T], *others: ty.Iterable[ty.Any]
) -> ty.List[T]:
    """Returns the values of ``array`` which appear in none of
    ``others``. Order and duplicates within ``array`` are kept.

    :group: Arrays

    Examples
    --------
    >>> difference(["DE", "CZ", "NL", "DE"], ["CZ"], ["EE", "NL"])
    ['DE', 'DE']
    """
    excluded = [list(other) for other in others]
    return [
        value
        for value in array
        if not any(_contains(other, value) for other in excluded)
    ]
