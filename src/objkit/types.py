"""
Structural type classification for objkit
=========================================

Every runtime value maps to exactly one :class:`TypeTag`.  Classification is
done through abstract base classes and the :mod:`numbers` tower rather than
exact type identity, so subclasses (``OrderedDict``, ``IntEnum``...) and
virtual subclasses registered with an ABC land on the same tag as their base.

Usage::

    from objkit.types import get_type, TypeTag
    get_type({"a": 1})        # TypeTag.OBJECT
    get_type([1, 2]) == "array"

The predicates in this module are total: they never raise and answer
``False`` for ``None`` and :data:`UNDEFINED`.
"""

from __future__ import annotations

import datetime
import inspect
import math
import numbers
import re
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any


class _Undefined:
    """Marker for "no value supplied", kept apart from ``None`` (null)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNDEFINED"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class TypeTag(str, Enum):
    ARRAY = "array"
    OBJECT = "object"
    FUNCTION = "function"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    UNDEFINED = "undefined"
    NULL = "null"
    PROMISE = "promise"
    REGEXP = "regexp"
    ERROR = "error"
    SET = "set"
    BYTES = "bytes"
    GENERATOR = "generator"

    def __str__(self) -> str:
        return self.value


# Display form of the canonical tags
TYPE_STRINGS = MappingProxyType({
    "array": "[object Array]",
    "object": "[object Object]",
    "function": "[object Function]",
    "string": "[object String]",
    "number": "[object Number]",
    "date": "[object Date]",
    "undefined": "[object Undefined]",
    "null": "[object Null]",
})


# ---------------------------------------------------------------------------
# Numeric helpers
# ---------------------------------------------------------------------------

def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _is_infinite(value: Any) -> bool:
    if isinstance(value, float):
        return math.isinf(value)
    if isinstance(value, Decimal):
        return value.is_infinite()
    return False


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def get_type(value: Any) -> TypeTag:
    """Return the canonical :class:`TypeTag` of *value*.

    Distinguishes null from undefined from object from array from date,
    which ``type(value)`` alone cannot do across subclasses.
    """
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if _is_numeric(value):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return TypeTag.BYTES
    if isinstance(value, datetime.date):
        return TypeTag.DATE
    if isinstance(value, re.Pattern):
        return TypeTag.REGEXP
    if isinstance(value, BaseException):
        return TypeTag.ERROR
    if is_promise(value):
        return TypeTag.PROMISE
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if isinstance(value, Sequence):
        return TypeTag.ARRAY
    if isinstance(value, Set):
        return TypeTag.SET
    if inspect.isgenerator(value):
        return TypeTag.GENERATOR
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def is_array(value: Any) -> bool:
    return get_type(value) is TypeTag.ARRAY


def is_object(value: Any) -> bool:
    return get_type(value) is TypeTag.OBJECT


def is_based_on_object(value: Any) -> bool:
    """True for anything object-like: containers, dates, patterns, instances.

    Unlike :func:`is_object` this also admits arrays, sets and dates, but not
    primitives (str, numbers, bool), callables, ``None`` or ``UNDEFINED``.
    """
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, (bool, str)) or _is_numeric(value):
        return False
    return not callable(value)


def is_function(value: Any) -> bool:
    return callable(value)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_date(value: Any) -> bool:
    return get_type(value) is TypeTag.DATE


def is_number(value: Any) -> bool:
    return _is_numeric(value) and not _is_nan(value)


def is_clean_number(value: Any) -> bool:
    """Like :func:`is_number` but also rejects positive and negative infinity."""
    return is_number(value) and not _is_infinite(value)


def is_integer(value: Any) -> bool:
    """A clean number with no fractional part (``3.0`` qualifies)."""
    return is_clean_number(value) and value % 1 == 0


def is_promise(value: Any) -> bool:
    """Structural deferred-value check.

    Awaitables (coroutines, futures, tasks) count, and so does any object
    whose class hierarchy exposes a callable ``then``.  Bare instance
    attributes named ``then`` do not.
    """
    try:
        if inspect.isawaitable(value):
            return True
        if isinstance(value, type):
            return False
        return callable(getattr(type(value), "then", None))
    except Exception:
        return False
