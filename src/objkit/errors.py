"""Exceptions raised by :mod:`objkit.checked`.

The default-returning functions of objkit never raise these.
"""

from typing import Any

from .types import get_type


class ObjkitError(Exception):
    """Root of every objkit exception."""


class NotAMappingError(ObjkitError, TypeError):
    """Raised when an operation that walks own keys receives a non-object."""
    def __init__(self, operation: str, value: Any):
        self.operation = operation
        self.value = value
        self.type_tag = get_type(value)
        super().__init__(f"{operation}() expects an object, got {self.type_tag}")


class NotCallableError(ObjkitError, TypeError):
    """Raised when a callback argument cannot be called."""
    def __init__(self, operation: str, value: Any):
        self.operation = operation
        self.value = value
        super().__init__(f"{operation}() expects a callable callback, got {get_type(value)}")


class NotAStringError(ObjkitError, TypeError):
    def __init__(self, operation: str, value: Any):
        self.operation = operation
        self.value = value
        super().__init__(f"{operation}() expects a string, got {get_type(value)}")


class MissingKeyError(ObjkitError, KeyError):
    """Raised when a key is not an own key of the inspected value."""
    def __init__(self, key: Any, value: Any = None):
        self.key = key
        self.value = value
        super().__init__(key)

    def __str__(self) -> str:
        return f"{self.key!r} is not an own key of this {get_type(self.value)}"
