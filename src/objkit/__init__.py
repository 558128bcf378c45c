"""objkit: type classification, emptiness and key-value traversal helpers."""

from .extension import OPERATION_TABLE, ExtendedObject, extend
from .patterns import REGEX
from .strings import DEFAULT_MAX_REPLACEMENTS, replace_all
from .traversal import for_each_key, map_object, map_object_to_array, reduce_object
from .types import (
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
from .values import (
    has_key,
    is_null_or_empty,
    length,
    replace_empty,
    safe_first,
    safe_value,
)

__version__ = "0.1.0"

__all__ = [
    'TypeTag',
    'UNDEFINED',
    'TYPE_STRINGS',
    'REGEX',
    'get_type',
    'is_array',
    'is_object',
    'is_based_on_object',
    'is_function',
    'is_string',
    'is_date',
    'is_number',
    'is_clean_number',
    'is_integer',
    'is_promise',
    'length',
    'is_null_or_empty',
    'replace_empty',
    'safe_value',
    'safe_first',
    'has_key',
    'for_each_key',
    'map_object',
    'map_object_to_array',
    'reduce_object',
    'DEFAULT_MAX_REPLACEMENTS',
    'replace_all',
    'OPERATION_TABLE',
    'ExtendedObject',
    'extend',
]
