"""Key validity and type classification helpers."""

from enum import Enum
from typing import Any, Optional, Type, Union, get_args, get_origin

SIMPLE_TYPES = (bool, int, float, complex, str, bytes)


def is_valid_key(key: Any) -> bool:
    """Return True when ``key`` can be stored in the runtime map."""
    if key is None:
        return False
    try:
        hash(key)
    except TypeError:
        return False
    return True


def keys_equal(first: Any, second: Any) -> bool:
    """Compare two persisted keys the way the runtime map would."""
    return bool(first == second)


def resolve_optional(element_type: Any) -> Any:
    """Resolve Optional[T] to T."""
    if get_origin(element_type) is Union:
        args = get_args(element_type)
        if len(args) == 2 and type(None) in args:
            return next(arg for arg in args if arg is not type(None))
    return element_type


def is_optional(element_type: Any) -> bool:
    return get_origin(element_type) is Union and type(None) in get_args(element_type)


def is_class(element_type: Any) -> bool:
    """True for plain classes, False for generic aliases such as list[int]."""
    return get_origin(element_type) is None and isinstance(element_type, type)


def is_enum(element_type: Any) -> bool:
    """Check if type is an Enum."""
    return is_class(element_type) and issubclass(element_type, Enum)


def is_simple_type(element_type: Optional[Type]) -> bool:
    """Simple types are edited inline without a field label."""
    element_type = resolve_optional(element_type)
    if is_enum(element_type):
        return True
    return is_class(element_type) and issubclass(element_type, SIMPLE_TYPES)


def type_name(element_type: Any) -> str:
    if element_type is None:
        return "None"
    return getattr(element_type, "__qualname__", None) or repr(element_type)
