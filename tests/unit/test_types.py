"""Pytest coverage for type tags and the predicate family."""

import asyncio
import datetime
import re
import sys
from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction
from pathlib import Path
from types import SimpleNamespace

import pytest


_ROOT = Path(__file__).resolve().parents[2]
_SRC_PATH = _ROOT / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from objkit.types import (
    TYPE_STRINGS,
    UNDEFINED,
    TypeTag,
    get_type,
    is_array,
    is_based_on_object,
    is_clean_number,
    is_date,
    is_function,
    is_integer,
    is_number,
    is_object,
    is_promise,
    is_string,
)


class Thenable:
    def then(self, on_resolved):
        return on_resolved(1)


class LazyThenable(Thenable):
    pass


async def _coroutine_fn():
    return 1


def _generator():
    yield 1


_TAG_CASES = [
    ([], "array"),
    ((1, 2), "array"),
    ({}, "object"),
    (OrderedDict(a=1), "object"),
    (SimpleNamespace(a=1), "object"),
    (len, "function"),
    (lambda: None, "function"),
    (dict, "function"),
    ("text", "string"),
    (0, "number"),
    (-1.5, "number"),
    (float("nan"), "number"),
    (Decimal("2.5"), "number"),
    (Fraction(1, 3), "number"),
    (True, "boolean"),
    (datetime.date(2020, 1, 1), "date"),
    (datetime.datetime(2020, 1, 1, 12, 0), "date"),
    (UNDEFINED, "undefined"),
    (None, "null"),
    (re.compile("a"), "regexp"),
    (ValueError("boom"), "error"),
    ({1, 2}, "set"),
    (frozenset(), "set"),
    (b"raw", "bytes"),
    (_generator(), "generator"),
    (Thenable(), "promise"),
]


@pytest.mark.parametrize("value, expected", _TAG_CASES)
def test_get_type_tags(value, expected):
    tag = get_type(value)
    assert tag == expected
    assert isinstance(tag, TypeTag)


@pytest.mark.parametrize("value, _expected", _TAG_CASES)
def test_get_type_is_stable(value, _expected):
    assert get_type(value) is get_type(value)


def test_tag_prints_as_label():
    assert str(get_type([])) == "array"
    assert f"{get_type(None)}" == "null"


def test_type_strings_display_form():
    assert TYPE_STRINGS["array"] == "[object Array]"
    assert TYPE_STRINGS["null"] == "[object Null]"
    assert set(TYPE_STRINGS) == {
        "array", "object", "function", "string", "number", "date", "undefined", "null"
    }


def test_undefined_is_falsy_singleton():
    assert not UNDEFINED
    assert UNDEFINED is type(UNDEFINED)()
    assert repr(UNDEFINED) == "UNDEFINED"


@pytest.mark.parametrize(
    "predicate, truthy, falsy",
    [
        (is_array, [[], (1,)], [{}, "ab", None]),
        (is_object, [{}, SimpleNamespace()], [[], None, "x", 1]),
        (is_function, [len, lambda: 0, int], [{}, None, "len"]),
        (is_string, ["", "x"], [b"x", 1, None]),
        (is_date, [datetime.date.today()], ["2020-01-01", 0, None]),
        (is_based_on_object, [[], {}, datetime.date.today(), re.compile("x")],
         [None, UNDEFINED, "s", 1, True, len]),
    ],
)
def test_structural_predicates(predicate, truthy, falsy):
    for value in truthy:
        assert predicate(value) is True, value
    for value in falsy:
        assert predicate(value) is False, value


def test_number_predicates_have_graduated_strictness():
    inf = float("inf")
    nan = float("nan")

    assert is_number(3) and is_number(inf) and is_number(-inf)
    assert not is_number(nan)
    assert not is_number(True)
    assert not is_number("1")

    assert is_clean_number(3.5)
    assert not is_clean_number(inf)
    assert not is_clean_number(-inf)
    assert not is_clean_number(nan)

    assert is_integer(3)
    assert is_integer(3.0)
    assert not is_integer(3.5)
    assert not is_integer(inf)
    assert not is_integer(nan)
    assert not is_integer(False)


def test_number_predicates_with_decimal():
    assert is_number(Decimal("1.5"))
    assert not is_number(Decimal("NaN"))
    assert not is_clean_number(Decimal("Infinity"))
    assert is_integer(Decimal("2.0"))
    assert not is_integer(Decimal("2.5"))


def test_is_promise_detects_awaitables():
    loop = asyncio.new_event_loop()
    try:
        future = loop.create_future()
        assert is_promise(future)
        assert get_type(future) == "promise"
    finally:
        loop.close()

    coro = _coroutine_fn()
    try:
        assert is_promise(coro)
    finally:
        coro.close()


def test_is_promise_is_structural():
    # any class exposing then() counts, inherited or not
    assert is_promise(Thenable())
    assert is_promise(LazyThenable())
    # a plain attribute named then is not part of the class hierarchy
    assert not is_promise(SimpleNamespace(then=lambda cb: cb(1)))
    # the class itself is not a deferred value
    assert not is_promise(Thenable)


@pytest.mark.parametrize(
    "predicate",
    [is_array, is_object, is_based_on_object, is_function, is_string, is_date,
     is_number, is_clean_number, is_integer, is_promise],
)
def test_predicates_are_false_for_null_and_undefined(predicate):
    assert predicate(None) is False
    assert predicate(UNDEFINED) is False
