"""Null/empty semantics, length and own-key access across value kinds."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Iterator, List, Optional, Tuple

from .types import TypeTag, get_type, is_array, is_number

_BLANK = re.compile(r" *")
_INDEX = re.compile(r"0|[1-9][0-9]*")


# ---------------------------------------------------------------------------
# Own keys
# ---------------------------------------------------------------------------

def own_mapping(value: Any) -> Mapping:
    """Return the live key-value storage behind an ``object``-tagged value.

    Mappings are their own storage; plain instances expose their
    ``__dict__``.  Anything else has no own keys and yields an empty dict.
    """
    if isinstance(value, Mapping):
        return value
    try:
        return vars(value)
    except TypeError:
        return {}


def own_keys(value: Any) -> List[Any]:
    if get_type(value) is not TypeTag.OBJECT:
        return []
    return list(own_mapping(value))


def own_items(value: Any) -> Iterator[Tuple[Any, Any]]:
    storage = own_mapping(value)
    for key in own_keys(value):
        yield key, storage[key]


def _index(key: Any) -> Optional[int]:
    """Non-negative index named by *key*: an int or a canonical digit string."""
    if isinstance(key, int) and not isinstance(key, bool):
        return key if key >= 0 else None
    if isinstance(key, str) and _INDEX.fullmatch(key):
        return int(key)
    return None


def has_key(obj: Any, key: Any) -> bool:
    """Own-key presence; ``{"a": None}`` has key ``"a"``.

    Arrays and strings own their valid indexes, given as ints or as digit
    strings (``"0"`` but not ``"01"`` or ``"-1"``).
    """
    tag = get_type(obj)
    if tag is TypeTag.OBJECT:
        try:
            return key in own_mapping(obj)
        except TypeError:
            # unhashable key
            return False
    if tag in (TypeTag.ARRAY, TypeTag.STRING):
        index = _index(key)
        return index is not None and index < len(obj)
    return False


def safe_value(obj: Any, key: Any) -> Any:
    """Return ``obj[key]`` when *obj* owns *key*, ``None`` otherwise."""
    if not has_key(obj, key):
        return None
    if get_type(obj) is TypeTag.OBJECT:
        return own_mapping(obj)[key]
    return obj[_index(key)]


def safe_first(value: Any) -> Any:
    """First element of an array, or ``None``.

    A falsy first element also yields ``None``.
    """
    if not is_array(value) or len(value) == 0:
        return None
    return value[0] or None


# ---------------------------------------------------------------------------
# Length and emptiness
# ---------------------------------------------------------------------------

def number_string(value: Any) -> str:
    """Display string of a number the way JavaScript renders it.

    ``3.0`` -> ``"3"``, ``0.00001`` -> ``"0.00001"``, ``1e-7`` -> ``"1e-7"``,
    ``1e21`` -> ``"1e+21"``, ``inf`` -> ``"Infinity"``.  Integers and other
    rationals keep ``str()``.
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        decimal = Decimal(repr(value))
    elif isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        decimal = value
    else:
        return str(value)

    if decimal.is_infinite():
        return "-Infinity" if decimal < 0 else "Infinity"
    if decimal.is_zero():
        return "0"

    sign, digit_tuple, exponent = decimal.as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # decimal point sits after the first `point` digits
    point = len(digits) + exponent
    prefix = "-" if sign else ""

    if len(digits) <= point <= 21:
        return prefix + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return prefix + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return prefix + "0." + "0" * -point + digits

    power = point - 1
    mantissa = digits if len(digits) == 1 else digits[0] + "." + digits[1:]
    return f"{prefix}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def length(value: Any) -> int:
    """Size of a value.

    object -> own key count, string -> characters, array -> elements,
    number -> characters of its display string (``length(-12) == 3``).
    Everything else is 0.
    """
    tag = get_type(value)
    if tag is TypeTag.OBJECT:
        return len(own_keys(value))
    if tag in (TypeTag.STRING, TypeTag.ARRAY):
        return len(value)
    if tag is TypeTag.NUMBER and is_number(value):
        return len(number_string(value))
    return 0


def is_null_or_empty(value: Any) -> bool:
    tag = get_type(value)
    if tag in (TypeTag.UNDEFINED, TypeTag.NULL):
        return True
    if tag is TypeTag.STRING:
        return _BLANK.fullmatch(value) is not None
    if tag is TypeTag.OBJECT:
        return length(value) == 0
    if tag is TypeTag.ARRAY:
        return len(value) == 0
    # number, boolean and function have no notion of emptiness
    return False


def replace_empty(value: Any, fallback: Any) -> Any:
    return fallback if is_null_or_empty(value) else value
