import logging
import typing as ty
from types import SimpleNamespace

import numpy as np
import pytest
from hypothesis import given, strategies as st

from pluginutils.objects import (
    deep_clone,
    get,
    is_equal,
    parse_json,
    pick,
    pick_by,
)


json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=10),
    lambda children: st.lists(children, max_size=5)
    | st.dictionaries(st.text(max_size=5), children, max_size=5),
    max_leaves=25,
)


class ErrorSink:
    """Logging sink keeping hold of every reported error."""

    def __init__(self) -> None:
        self.errors: ty.List[ty.Any] = []

    def error(self, msg: ty.Any) -> None:
        self.errors.append(msg)


PRODUCT = {
    "id": "P-1",
    "stock": 0,
    "pageMetaTags": [{"ID": "title"}, {"ID": "description"}],
    "grid": [[1, 2], [3, 4]],
    "brand": SimpleNamespace(name="Acme", address=None),
}


def test_parse_json() -> None:
    assert parse_json('{"countryCode":"CZ"}') == {"countryCode": "CZ"}
    assert parse_json(b"[1, 2]") == [1, 2]


@pytest.mark.parametrize("malformed", ["", "invalid-json", None, 42])
def test_parse_json_malformed(malformed: ty.Any) -> None:
    """Tests that malformed input is logged to the sink, not raised."""
    sink = ErrorSink()
    assert parse_json(malformed, logger=sink) is None
    assert len(sink.errors) == 1
    assert isinstance(sink.errors[0], (TypeError, ValueError))


def test_parse_json_default_logger(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="pluginutils.objects"):
        assert parse_json("{") is None
    assert len(caplog.records) == 1
    assert caplog.records[0].name == "pluginutils.objects"


def test_get_paths() -> None:
    assert get(PRODUCT, "id") == "P-1"
    assert get(PRODUCT, "pageMetaTags[1].ID") == "description"
    assert get(PRODUCT, "grid[1][0]") == 3
    assert get(PRODUCT, "brand.name") == "Acme"
    assert get(PRODUCT, "stock") == 0


@pytest.mark.parametrize(
    "path",
    [
        "missing",
        "missing.deeper",
        "pageMetaTags[5].ID",
        "brand.address.city",
        "stock[0]",
        "",
        "a b",
        "id.upper",
        "brand.__class__",
        "brand._private",
    ],
)
def test_get_missing(path: str) -> None:
    """Tests that missing steps give ``None`` without logging."""
    sink = ErrorSink()
    assert get(PRODUCT, path, logger=sink) is None
    assert sink.errors == []


def test_get_bad_path_logged() -> None:
    sink = ErrorSink()
    assert get(PRODUCT, None, logger=sink) is None  # type: ignore
    assert len(sink.errors) == 1


def test_pick() -> None:
    product = {"id": 1, "name": "productName", "size": 500}
    assert pick(product, "id", "name") == {"id": 1, "name": "productName"}
    assert pick(product, "id", "colour") == {"id": 1}
    assert pick({}, "id") == {}
    assert pick(product) == {}


def test_pick_by() -> None:
    product = {"id": 1, "name": "productName", "size": 500}
    assert pick_by(
        product, lambda key, value: isinstance(value, int) and value >= 500
    ) == {"size": 500}
    assert pick_by(product, lambda key, value: key != "name") == {
        "id": 1,
        "size": 500,
    }
    assert pick_by({}, lambda key, value: True) == {}


def test_is_equal() -> None:
    assert is_equal({"id": 1, "name": "productName"}, {"name": "productName", "id": 1})
    assert is_equal(
        {"id": 1, "category": {"name": "Other"}},
        {"id": 1, "category": {"name": "Other"}},
    )
    assert not is_equal({"id": 1}, {"id": 1, "category": {"name": "Other"}})
    assert not is_equal({"id": 1, "a": None}, {"id": 1, "b": None})
    assert not is_equal({"count": 1}, {"count": True})
    assert is_equal({"count": 1}, {"count": 1.0})
    assert not is_equal([1, 2], [2, 1])
    assert is_equal([1, [2, 3]], (1, (2, 3)))
    assert not is_equal([1], {"0": 1})
    assert not is_equal(None, {})
    assert is_equal(float("nan"), float("nan"))


def test_is_equal_arrays() -> None:
    assert is_equal({"pmu": np.arange(4)}, {"pmu": np.arange(4)})
    assert not is_equal({"pmu": np.arange(4)}, {"pmu": np.arange(1, 5)})
    assert not is_equal(np.arange(2), [0, 1])


@given(json_values)
def test_clone_is_equal(value: ty.Any) -> None:
    """Tests that clones are structurally equal to their originals."""
    assert is_equal(value, deep_clone(value))


def test_clone_is_independent() -> None:
    original = {"lines": [{"quantity": 40}], "grid": np.zeros(2)}
    clone = deep_clone(original)
    clone["lines"][0]["quantity"] = 25
    clone["lines"].append({"quantity": 35})
    clone["grid"][0] = 1.0
    assert original["lines"] == [{"quantity": 40}]
    assert original["grid"][0] == 0.0
    assert not is_equal(original, clone)


def test_get_skips_methods_and_private_names() -> None:
    """Tests that attribute lookups only reach data, never methods or
    underscore names.
    """
    assert get({"items": [1, 2]}, "items.count") is None
    assert get(SimpleNamespace(_secret="x", public="y"), "_secret") is None
    assert get(SimpleNamespace(_secret="x", public="y"), "public") == "y"
    assert get({"_meta": 1}, "_meta") == 1
