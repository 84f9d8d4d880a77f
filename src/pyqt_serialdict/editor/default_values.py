"""
Default key/value synthesis for newly added entries.

Uses enum-driven dispatch: the element type is classified into a
``DefaultStrategy`` and the matching handler builds the value. Types the
drawer cannot construct on its own (arbitrary classes) are delegated to the
inspector host, which owns reflection-based construction.

Enum elements pick the first member not already used by a sibling so that
adding several entries to an enum-keyed dictionary does not immediately
produce duplicate keys.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, get_args, get_origin

from pyqt_serialdict.core.key_utils import is_enum, is_optional, type_name
from pyqt_serialdict.core.serialization import SerializedDictionaryDrawable
from pyqt_serialdict.exceptions import DefaultValueError
from pyqt_serialdict.protocols import InspectorHostProtocol, get_inspector_host

logger = logging.getLogger(__name__)


class DefaultStrategy(Enum):
    """How a default is produced for an element type."""
    NONE = "none"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"
    ENUM = "enum"
    CONTAINER = "container"
    DICTIONARY = "dictionary"
    HOST = "host"


_NUMBER_TYPES = (int, float, complex)
_CONTAINER_TYPES = (list, tuple, set, frozenset, dict)


class DefaultValueService:
    """
    Service producing defaults for dictionary keys and values.

    Examples:
        service = DefaultValueService()
        service.default_for(int)                        # 0
        service.default_for(Element, [Element.FIRE])    # Element.WATER
        service.default_for(Optional[Sprite])           # None
    """

    def __init__(self, host: Optional[InspectorHostProtocol] = None):
        self._host = host
        self._handlers: Dict[DefaultStrategy, Callable[..., Any]] = {
            DefaultStrategy.NONE: self._default_none,
            DefaultStrategy.BOOL: self._default_bool,
            DefaultStrategy.NUMBER: self._default_number,
            DefaultStrategy.STRING: self._default_string,
            DefaultStrategy.BYTES: self._default_bytes,
            DefaultStrategy.ENUM: self._default_enum,
            DefaultStrategy.CONTAINER: self._default_container,
            DefaultStrategy.DICTIONARY: self._default_dictionary,
            DefaultStrategy.HOST: self._default_from_host,
        }

    @property
    def host(self) -> Optional[InspectorHostProtocol]:
        return self._host if self._host is not None else get_inspector_host()

    def determine_strategy(self, element_type: Any) -> DefaultStrategy:
        # Optional[T] behaves like a nullable reference: empty by default
        if element_type is None or element_type is type(None) or element_type is Any:
            return DefaultStrategy.NONE
        if is_optional(element_type):
            return DefaultStrategy.NONE

        origin = get_origin(element_type) or element_type
        if not isinstance(origin, type):
            return DefaultStrategy.HOST

        # Order matters: bool and IntEnum are ints
        if issubclass(origin, Enum):
            return DefaultStrategy.ENUM
        if issubclass(origin, bool):
            return DefaultStrategy.BOOL
        if issubclass(origin, _NUMBER_TYPES):
            return DefaultStrategy.NUMBER
        if issubclass(origin, str):
            return DefaultStrategy.STRING
        if issubclass(origin, bytes):
            return DefaultStrategy.BYTES
        if issubclass(origin, SerializedDictionaryDrawable):
            return DefaultStrategy.DICTIONARY
        if origin in _CONTAINER_TYPES:
            return DefaultStrategy.CONTAINER
        return DefaultStrategy.HOST

    def default_for(self, element_type: Any, siblings: Iterable[Any] = ()) -> Any:
        """
        Build a default for ``element_type``.

        Args:
            element_type: Declared key or value type (None when undeclared)
            siblings: Elements already present in the same persisted list

        Returns:
            The default element

        Raises:
            DefaultValueError: If the type needs a host and none is registered
        """
        strategy = self.determine_strategy(element_type)
        logger.debug(f"DefaultValueService: {type_name(element_type)} -> {strategy.value}")
        return self._handlers[strategy](element_type, siblings)

    # ========== HANDLERS ==========

    def _default_none(self, element_type, siblings) -> None:
        return None

    def _default_bool(self, element_type, siblings) -> bool:
        return False

    def _default_number(self, element_type, siblings) -> Any:
        return element_type(0)

    def _default_string(self, element_type, siblings) -> str:
        return element_type("")

    def _default_bytes(self, element_type, siblings) -> bytes:
        return element_type(b"")

    def _default_enum(self, element_type, siblings) -> Enum:
        members = list(element_type)
        if not members:
            raise DefaultValueError(f"Enum {type_name(element_type)} has no members")

        used = {sibling for sibling in siblings if isinstance(sibling, element_type)}
        for member in members:
            if member not in used:
                return member
        return members[0]

    def _default_container(self, element_type, siblings) -> Any:
        return (get_origin(element_type) or element_type)()

    def _default_dictionary(self, element_type, siblings) -> Any:
        origin = get_origin(element_type)
        if origin is None:
            return element_type()

        args = get_args(element_type)
        return origin(
            key_type=args[0] if args else None,
            value_type=args[1] if len(args) > 1 else None,
        )

    def _default_from_host(self, element_type, siblings) -> Any:
        host = self.host
        if host is None:
            raise DefaultValueError(
                f"No inspector host registered to construct a default {type_name(element_type)}. "
                f"Register one with register_inspector_host()."
            )
        return host.create_default(element_type)
