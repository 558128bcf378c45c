"""
Key-value traversal modeled after list iteration
================================================

``for_each_key``, ``map_object``, ``map_object_to_array`` and
``reduce_object`` walk the own keys of an ``object``-tagged value in
enumeration order.  Callbacks receive ``(key, value, index, source)``
(``reduce_object`` prepends the accumulator) and may declare fewer
positional parameters than that; surplus arguments are dropped::

    map_object({"a": 1, "b": 2}, lambda key, value: value * 2)
    # {'a': 2, 'b': 4}

Calling any of these on a non-object, or with a non-callable callback, is a
no-op that returns the operation's empty result.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, List

from .types import UNDEFINED, TypeTag, get_type, is_function
from .values import own_items

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def fit_callback(callback: Callable, max_args: int) -> Callable:
    """Adapt *callback* so it can be called with up to *max_args* positionals."""
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return callback

    accepted = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return callback
        if param.kind in _POSITIONAL:
            accepted += 1
    if accepted >= max_args:
        return callback

    def fitted(*args):
        return callback(*args[:accepted])

    return fitted


def _accepts(operation: str, obj: Any, callback: Any) -> bool:
    if get_type(obj) is not TypeTag.OBJECT:
        logger.debug("%s skipped: expected object, got %s", operation, get_type(obj))
        return False
    if not is_function(callback):
        logger.debug("%s skipped: callback of type %s is not callable", operation, get_type(callback))
        return False
    return True


def for_each_key(obj: Any, callback: Callable) -> None:
    if not _accepts("for_each_key", obj, callback):
        return
    call = fit_callback(callback, 4)
    for index, (key, value) in enumerate(list(own_items(obj))):
        call(key, value, index, obj)


def map_object(obj: Any, callback: Callable) -> Dict[Any, Any]:
    """Return a new dict with every own value replaced by the callback result."""
    if not _accepts("map_object", obj, callback):
        return {}
    call = fit_callback(callback, 4)
    items = list(own_items(obj))
    result = dict(items)
    for index, (key, value) in enumerate(items):
        result[key] = call(key, value, index, obj)
    return result


def map_object_to_array(obj: Any, callback: Callable) -> List[Any]:
    if not _accepts("map_object_to_array", obj, callback):
        return []
    call = fit_callback(callback, 4)
    return [call(key, value, index, obj) for index, (key, value) in enumerate(list(own_items(obj)))]


def reduce_object(obj: Any, callback: Callable, initial: Any = UNDEFINED) -> Any:
    """Fold the own items of *obj* into an accumulator.

    An omitted seed starts from a fresh ``{}``; pass an explicit seed (``0``,
    ``[]``, ``None``...) for any other kind of accumulation.
    """
    if not _accepts("reduce_object", obj, callback):
        return {}
    call = fit_callback(callback, 5)
    accumulator = {} if initial is UNDEFINED else initial
    for index, (key, value) in enumerate(list(own_items(obj))):
        accumulator = call(accumulator, key, value, index, obj)
    return accumulator
