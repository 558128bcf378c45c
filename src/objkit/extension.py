"""
Attaching the traversal operations to a mapping
===============================================

:func:`extend` returns an :class:`ExtendedObject`: a mutable mapping that
keeps the native mapping behaviour of the value it wraps and adds the
operations of :data:`OPERATION_TABLE` as methods::

    config = {"retries": 3, "timeout": 10}
    ext = extend(config)
    ext.map(lambda key, value: value * 2)   # {'retries': 6, 'timeout': 20}
    ext["verbose"] = True                    # visible through ``config`` too

With ``mutate=True`` (default) the wrapper shares the caller's storage; with
``mutate=False`` it owns a shallow copy.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, Callable, Iterator

from .traversal import for_each_key, map_object, map_object_to_array, reduce_object
from .types import UNDEFINED, TypeTag, get_type
from .values import has_key, own_items, own_mapping, safe_value

logger = logging.getLogger(__name__)


OPERATION_TABLE = MappingProxyType({
    "reduce": reduce_object,
    "map": map_object,
    "map_to_array": map_object_to_array,
    "for_each": for_each_key,
    "safe_value": safe_value,
})


class ExtendedObject(MutableMapping):
    """A mapping carrying the operation table as methods.

    Only the wrapped storage contributes keys; the operations are not own
    keys (``has_key(ext, "map")`` is False).
    """

    __slots__ = ("data",)

    def __init__(self, data: Any = None):
        self.data = {} if data is None else data

    # ---- Mapping protocol --------------------------------------------------

    def __getitem__(self, key):
        return self.data[key]

    def __setitem__(self, key, value):
        self.data[key] = value

    def __delitem__(self, key):
        del self.data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, key) -> bool:
        return key in self.data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"

    def has_own_property(self, key) -> bool:
        return has_key(self, key)

    def copy(self) -> "ExtendedObject":
        return type(self)(dict(self.data))


def _operation(name: str, func: Callable) -> Callable:
    def method(self, *args, **kwargs):
        return func(self, *args, **kwargs)

    method.__name__ = name
    method.__qualname__ = f"ExtendedObject.{name}"
    method.__doc__ = f"Same as ``{func.__name__}(self, ...)``."
    return method


for _name, _func in OPERATION_TABLE.items():
    setattr(ExtendedObject, _name, _operation(_name, _func))
del _name, _func


def extend(obj: Any = UNDEFINED, mutate: bool = True) -> Any:
    """Give *obj* the operation table.

    Values that are not ``object``-tagged come back unchanged, and so do
    ``__slots__`` instances when *mutate* asks to share their storage.
    Extending an :class:`ExtendedObject` again never nests wrappers.
    """
    if obj is UNDEFINED:
        obj = {}
    if get_type(obj) is not TypeTag.OBJECT:
        logger.debug("extend skipped: expected object, got %s", get_type(obj))
        return obj

    if isinstance(obj, ExtendedObject):
        return obj if mutate else obj.copy()

    if mutate:
        if not isinstance(obj, Mapping) and not hasattr(obj, "__dict__"):
            # no storage to share with the caller
            logger.debug("extend skipped: %s has no attribute storage", type(obj).__name__)
            return obj
        return ExtendedObject(own_mapping(obj))
    logger.debug("extend: copying %d own key(s) of %s", len(own_mapping(obj)), type(obj).__name__)
    return ExtendedObject(dict(own_items(obj)))
