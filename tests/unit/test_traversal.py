"""Pytest coverage for key-value traversal and transforms."""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest


_ROOT = Path(__file__).resolve().parents[2]
_SRC_PATH = _ROOT / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from objkit.traversal import (
    fit_callback,
    for_each_key,
    map_object,
    map_object_to_array,
    reduce_object,
)


def test_map_object_doubles_values_and_keeps_order():
    source = {"b": 2, "a": 1}
    result = map_object(source, lambda key, value: value * 2)
    assert result == {"b": 4, "a": 2}
    assert list(result) == ["b", "a"]
    assert source == {"b": 2, "a": 1}
    assert result is not source


def test_map_object_returns_plain_dict_for_instances():
    result = map_object(SimpleNamespace(x=1, y=2), lambda key, value: value + 10)
    assert result == {"x": 11, "y": 12}
    assert type(result) is dict


def test_callbacks_receive_key_value_index_and_source():
    source = {"a": 1, "b": 2}
    calls = []
    for_each_key(source, lambda key, value, index, obj: calls.append((key, value, index, obj)))
    assert calls == [("a", 1, 0, source), ("b", 2, 1, source)]
    assert calls[0][3] is source


def test_for_each_key_returns_none():
    assert for_each_key({"a": 1}, lambda key: key) is None


def test_variadic_callbacks_receive_every_argument():
    seen = []
    for_each_key({"a": 1}, lambda *args: seen.append(args))
    assert len(seen[0]) == 4


def test_map_object_to_array():
    result = map_object_to_array({"a": 1, "b": 2, "c": 3}, lambda key, value, index: f"{index}:{key}={value}")
    assert result == ["0:a=1", "1:b=2", "2:c=3"]


def test_map_object_to_array_length_matches_key_count():
    assert map_object_to_array({}, lambda key: key) == []
    assert len(map_object_to_array({"a": 1, "b": None}, lambda key: key)) == 2


def test_reduce_object_builds_mapping():
    result = reduce_object({"a": 1, "b": 2}, lambda acc, key, value: {**acc, key: value + 1}, {})
    assert result == {"a": 2, "b": 3}


def test_reduce_object_defaults_to_fresh_mapping():
    def collect(acc, key, value):
        acc[key] = value
        return acc

    first = reduce_object({"a": 1}, collect)
    second = reduce_object({"b": 2}, collect)
    assert first == {"a": 1}
    assert second == {"b": 2}


def test_reduce_object_honours_explicit_seeds():
    assert reduce_object({"a": 1, "b": 2}, lambda acc, key, value: acc + value, 0) == 3
    assert reduce_object({"a": 1}, lambda acc, key, value: acc, None) is None
    indexes = reduce_object({"a": 1, "b": 2}, lambda acc, key, value, index, obj: acc + [index], [])
    assert indexes == [0, 1]


@pytest.mark.parametrize("source", [[1, 2], "ab", None, 3, {1, 2}])
def test_non_objects_are_no_ops(source):
    calls = []

    def callback(*args):
        calls.append(args)

    assert for_each_key(source, callback) is None
    assert map_object(source, callback) == {}
    assert map_object_to_array(source, callback) == []
    assert reduce_object(source, callback, 0) == {}
    assert calls == []


@pytest.mark.parametrize("callback", [None, "not callable", 42])
def test_non_callable_callbacks_are_no_ops(callback):
    source = {"a": 1}
    assert for_each_key(source, callback) is None
    assert map_object(source, callback) == {}
    assert map_object_to_array(source, callback) == []
    assert reduce_object(source, callback, 0) == {}


def test_callback_errors_propagate():
    with pytest.raises(ZeroDivisionError):
        map_object({"a": 0}, lambda key, value: 1 / value)


def test_fit_callback_trims_surplus_arguments():
    fitted = fit_callback(lambda a, b: (a, b), 4)
    assert fitted(1, 2, 3, 4) == (1, 2)

    def full(a, b, c, d):
        return a

    assert fit_callback(full, 4) is full
