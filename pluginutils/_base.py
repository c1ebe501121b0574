import itertools as it
import numbers
import typing as ty
from collections.abc import Mapping

import numpy as np


MISSING = object()


def _is_nan(value: ty.Any) -> bool:
    return isinstance(value, numbers.Number) and value != value


def _is_bool(value: ty.Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def same_value(first: ty.Any, second: ty.Any) -> bool:
    """Scalar equality without Python's bool / int coercion.

    ``True == 1`` holds in Python, but here booleans only ever match
    booleans. NaN matches NaN, and arrays are compared element-wise.
    Containers are not inspected, see ``structurally_equal``.
    """
    if first is second:
        return True
    if isinstance(first, np.ndarray) or isinstance(second, np.ndarray):
        return (
            isinstance(first, np.ndarray)
            and isinstance(second, np.ndarray)
            and np.array_equal(first, second)
        )
    if _is_bool(first) or _is_bool(second):
        return _is_bool(first) and _is_bool(second) and bool(first == second)
    if _is_nan(first) and _is_nan(second):
        return True
    return bool(first == second)


def _is_sequence(value: ty.Any) -> bool:
    return isinstance(value, (list, tuple))


def structurally_equal(first: ty.Any, second: ty.Any) -> bool:
    """Recursive equality over mappings, lists, tuples and arrays, with
    ``same_value`` semantics at the leaves.
    """
    if first is second:
        return True
    if isinstance(first, Mapping) and isinstance(second, Mapping):
        if len(first) != len(second):
            return False
        return all(
            key in second and structurally_equal(value, second[key])
            for key, value in first.items()
        )
    if _is_sequence(first) and _is_sequence(second):
        if len(first) != len(second):
            return False
        return all(it.starmap(structurally_equal, zip(first, second)))
    containers = (Mapping, list, tuple)
    if isinstance(first, containers) or isinstance(second, containers):
        return False
    if isinstance(first, np.ndarray) and first.dtype == object:
        return (
            isinstance(second, np.ndarray)
            and first.shape == second.shape
            and structurally_equal(first.tolist(), second.tolist())
        )
    return same_value(first, second)
