"""
``pluginutils.objects``
=======================

Helpers for reading, selecting, comparing and copying plain data
objects: parsed JSON, dicts, lists, and host objects exposing their
data as attributes.

Malformed input never raises here. It is reported through a logging
sink and ``None`` is returned instead.
"""
import json
import logging
import re
import typing as ty
from collections.abc import Mapping
from copy import deepcopy

from pluginutils import base
from pluginutils._base import structurally_equal

__all__ = ["parse_json", "get", "pick", "pick_by", "is_equal", "deep_clone"]


_logger = logging.getLogger(__name__)
_SEGMENT = re.compile(r"(\w+)((?:\[\d+\])*)")
_INDEX = re.compile(r"\[(\d+)\]")


def parse_json(
    json_string: ty.Any, logger: ty.Optional[base.LoggerLike] = None
) -> ty.Any:
    """Parses a JSON document, returning ``None`` if it is malformed.

    :group: Objects

    Parameters
    ----------
    json_string : str | bytes
        The serialised JSON value.
    logger : LoggerLike, optional
        Sink receiving the parsing error. Defaults to this module's
        logger.

    Examples
    --------
    >>> parse_json('{"countryCode":"CZ"}')
    {'countryCode': 'CZ'}
    >>> parse_json("invalid-json") is None
    True
    """
    try:
        return json.loads(json_string)
    except (TypeError, ValueError) as parsing_error:
        (logger or _logger).error(parsing_error)
    return None


def _step(obj: ty.Any, key: str) -> ty.Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    if key.startswith("_"):
        return None
    value = getattr(obj, key, None)
    if callable(value):
        return None
    return value


def _index(obj: ty.Any, idx: int) -> ty.Any:
    if obj is None:
        return None
    try:
        return obj[idx]
    except (IndexError, KeyError, TypeError):
        return None


def get(
    obj: ty.Any, path: str, logger: ty.Optional[base.LoggerLike] = None
) -> ty.Any:
    """Retrieves a nested value from ``obj``.

    :group: Objects

    Parameters
    ----------
    obj : any
        Mapping, sequence or object to read from. Mappings are read by
        key, other objects by attribute.
    path : str
        Dot separated keys, each optionally followed by bracketed
        indices, eg. ``'pageMetaTags[0].ID'`` or ``'grid[1][0]'``.
    logger : LoggerLike, optional
        Sink receiving unexpected errors. Defaults to this module's
        logger.

    Returns
    -------
    value : any
        The value at ``path``, or ``None`` if any step along it is
        missing.

    Examples
    --------
    >>> customer = {"addressBook": {"preferredAddress": {"city": "Brno"}}}
    >>> get(customer, "addressBook.preferredAddress.city")
    'Brno'
    >>> get({"tags": [{"ID": "title"}]}, "tags[0].ID")
    'title'
    >>> get({"tags": []}, "tags[0].ID") is None
    True
    """
    try:
        value = obj
        for segment in path.split("."):
            match = _SEGMENT.fullmatch(segment)
            if match is None:
                return None
            value = _step(value, match.group(1))
            for idx in _INDEX.findall(match.group(2)):
                value = _index(value, int(idx))
        return value
    except (AttributeError, TypeError, ValueError) as error:
        (logger or _logger).error(error)
    return None


def pick(obj: ty.Mapping[str, ty.Any], *keys: str) -> ty.Dict[str, ty.Any]:
    """Returns a new dict with the entries of ``obj`` named by ``keys``.
    Names absent from ``obj`` are skipped.

    :group: Objects

    Examples
    --------
    >>> pick({"id": 1, "name": "productName", "size": 500}, "id", "name")
    {'id': 1, 'name': 'productName'}
    """
    return {key: obj[key] for key in keys if key in obj}


def pick_by(
    obj: ty.Mapping[str, ty.Any],
    predicate: ty.Callable[[str, ty.Any], ty.Any],
) -> ty.Dict[str, ty.Any]:
    """Returns a new dict with the entries of ``obj`` for which
    ``predicate(key, value)`` is truthy.

    :group: Objects

    Examples
    --------
    >>> pick_by({"id": 1, "size": 500}, lambda key, value: value >= 500)
    {'size': 500}
    """
    return {key: value for key, value in obj.items() if predicate(key, value)}


def is_equal(first: ty.Any, second: ty.Any) -> bool:
    """Recursively compares two values by structure and content.

    :group: Objects

    Notes
    -----
    Mappings must have the same keys, with equal values. Lists and
    tuples must have the same length, with equal items, but a list may
    equal a tuple. NumPy arrays are compared with
    ``numpy.array_equal``. Everything else is compared by value, except
    that booleans never equal numbers.

    Examples
    --------
    >>> is_equal({"id": 1, "category": {"name": "Other"}},
    ...          {"id": 1, "category": {"name": "Other"}})
    True
    >>> is_equal({"id": 1}, {"id": 1, "category": {"name": "Other"}})
    False
    """
    return structurally_equal(first, second)


def deep_clone(obj: ty.Any) -> ty.Any:
    """Returns a copy of ``obj`` sharing no mutable state with it.

    :group: Objects
    """
    return deepcopy(obj)
