"""Raising counterparts of the traversal and lookup helpers.

Each function here validates its arguments and raises an
:class:`~objkit.errors.ObjkitError` subclass where the plain helper would
quietly return an empty default.  Use these when an empty result must not
be mistaken for an invalid argument.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from . import strings, traversal, values
from .errors import MissingKeyError, NotAMappingError, NotAStringError, NotCallableError
from .types import UNDEFINED, is_function, is_object


def _require(operation: str, obj: Any, callback: Any) -> None:
    if not is_object(obj):
        raise NotAMappingError(operation, obj)
    if not is_function(callback):
        raise NotCallableError(operation, callback)


def for_each_key(obj: Any, callback: Callable) -> None:
    _require("for_each_key", obj, callback)
    traversal.for_each_key(obj, callback)


def map_object(obj: Any, callback: Callable) -> Dict[Any, Any]:
    _require("map_object", obj, callback)
    return traversal.map_object(obj, callback)


def map_object_to_array(obj: Any, callback: Callable) -> List[Any]:
    _require("map_object_to_array", obj, callback)
    return traversal.map_object_to_array(obj, callback)


def reduce_object(obj: Any, callback: Callable, initial: Any = UNDEFINED) -> Any:
    _require("reduce_object", obj, callback)
    return traversal.reduce_object(obj, callback, initial)


def safe_value(obj: Any, key: Any) -> Any:
    """Own value of *key*; raises :class:`MissingKeyError` when absent."""
    if not values.has_key(obj, key):
        raise MissingKeyError(key, obj)
    return values.safe_value(obj, key)


def replace_all(string: str, search, replacement,
                max_replacements: int = strings.DEFAULT_MAX_REPLACEMENTS) -> str:
    if not isinstance(string, str):
        raise NotAStringError("replace_all", string)
    return strings.replace_all(string, search, replacement, max_replacements)
