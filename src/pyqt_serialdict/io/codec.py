"""
Element codec between serialized dictionaries and JSON-compatible documents.

Persisted key/value lists are written verbatim, including entries the runtime
map shadows (duplicate or ``None`` keys), so a reload reproduces exactly what
the editor showed. Elements are encoded structurally; decoding uses the
declared key/value types to rebuild enums, dataclasses, nested dictionaries
and tuples.
"""

import base64
import binascii
import dataclasses
import logging
from enum import Enum
from typing import (
    Any, Dict, Mapping, Optional, Tuple, Type, Union, get_args, get_origin, get_type_hints,
)

from pyqt_serialdict.core.key_utils import is_optional, resolve_optional, type_name
from pyqt_serialdict.core.serialized_dictionary import (
    KEYS_FIELD,
    VALUES_FIELD,
    SerializedDictionary,
)
from pyqt_serialdict.exceptions import SerializationError

logger = logging.getLogger(__name__)

DOCUMENT_FORMAT = "pyqt-serialdict"
DOCUMENT_VERSION = 1


# ========== ENCODING ==========

def encode_element(value: Any) -> Any:
    """Convert one persisted element to JSON-compatible data."""
    if isinstance(value, SerializedDictionary):
        return encode_payload(value)
    if isinstance(value, Enum):
        return value.name
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: encode_element(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, complex):
        return [value.real, value.imag]
    if isinstance(value, (list, tuple, set, frozenset)):
        return [encode_element(item) for item in value]
    if isinstance(value, Mapping):
        return {encode_element(key): encode_element(item) for key, item in value.items()}
    return value


def encode_payload(dictionary: SerializedDictionary) -> Dict[str, Any]:
    payload = dictionary.to_serialized()
    return {
        KEYS_FIELD: [encode_element(key) for key in payload[KEYS_FIELD]],
        VALUES_FIELD: [encode_element(value) for value in payload[VALUES_FIELD]],
    }


def encode_document(dictionary: SerializedDictionary) -> Dict[str, Any]:
    """Wrap the encoded payload with format metadata."""
    document = {
        "format": DOCUMENT_FORMAT,
        "version": DOCUMENT_VERSION,
        "key_type": type_name(dictionary.key_type),
        "value_type": type_name(dictionary.value_type),
    }
    document.update(encode_payload(dictionary))
    return document


# ========== DECODING ==========

def _decode_sequence(data: Any, origin: type, args: tuple) -> Any:
    _expect(data, list, origin)

    if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
        if len(args) != len(data):
            raise SerializationError(f"Expected {len(args)} tuple items, got {len(data)}")
        return tuple(decode_element(item, arg) for item, arg in zip(data, args))

    item_type = args[0] if args else None
    return origin(decode_element(item, item_type) for item in data)


def _decode_mapping_key(key: str, key_type: Any) -> Any:
    # JSON object keys are always strings
    if key_type in (int, float):
        try:
            return key_type(key)
        except ValueError as e:
            raise SerializationError(f"Invalid {key_type.__name__} mapping key {key!r}") from e
    return decode_element(key, key_type)


def _decode_dataclass(data: Any, element_type: type) -> Any:
    _expect(data, dict, element_type)

    hints = get_type_hints(element_type)
    kwargs = {
        f.name: decode_element(data[f.name], hints.get(f.name))
        for f in dataclasses.fields(element_type)
        if f.init and f.name in data
    }
    try:
        return element_type(**kwargs)
    except TypeError as e:
        raise SerializationError(f"Cannot build {type_name(element_type)}: {e}") from e


def _expect(data: Any, expected: Union[type, Tuple[type, ...]], element_type: Any) -> None:
    expected = expected if isinstance(expected, tuple) else (expected,)
    # bool is an int subclass, only accepted where declared
    if (isinstance(data, bool) and bool not in expected) or not isinstance(data, expected):
        raise SerializationError(
            f"Expected {type_name(element_type)}, got {type(data).__name__} {data!r}"
        )


def decode_element(data: Any, element_type: Any) -> Any:
    """
    Rebuild one element from JSON data using its declared type.

    Undeclared types return the data unchanged.

    Raises:
        SerializationError: If the data does not fit the declared type
    """
    if element_type is None or element_type is Any or data is None:
        return data
    if is_optional(element_type):
        return decode_element(data, resolve_optional(element_type))

    origin = get_origin(element_type) or element_type
    args = get_args(element_type)
    if not isinstance(origin, type):
        return data

    if issubclass(origin, Enum):
        _expect(data, str, origin)
        try:
            return origin[data]
        except KeyError as e:
            raise SerializationError(f"{data!r} is not a member of {origin.__name__}") from e
    if issubclass(origin, SerializedDictionary):
        return decode_payload(
            data,
            key_type=args[0] if args else None,
            value_type=args[1] if len(args) > 1 else None,
            cls=origin,
        )
    if dataclasses.is_dataclass(origin):
        return _decode_dataclass(data, origin)
    if issubclass(origin, bool):
        _expect(data, bool, origin)
        return data
    if issubclass(origin, int):
        _expect(data, int, origin)
        return origin(data)
    if issubclass(origin, float):
        _expect(data, (int, float), origin)
        return origin(data)
    if issubclass(origin, str):
        _expect(data, str, origin)
        return origin(data)
    if origin is bytes:
        _expect(data, str, origin)
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error as e:
            raise SerializationError(f"Invalid base64 data for bytes: {data!r}") from e
    if origin is complex:
        _expect(data, list, origin)
        if len(data) != 2:
            raise SerializationError(f"Expected [real, imag] for complex, got {data!r}")
        _expect(data[0], (int, float), float)
        _expect(data[1], (int, float), float)
        return complex(*data)
    if origin in (list, tuple, set, frozenset):
        return _decode_sequence(data, origin, args)
    if origin is dict:
        _expect(data, dict, origin)
        key_type = args[0] if args else None
        value_type = args[1] if len(args) > 1 else None
        return {
            _decode_mapping_key(key, key_type): decode_element(item, value_type)
            for key, item in data.items()
        }
    return data


def decode_payload(
    payload: Any,
    key_type: Optional[type] = None,
    value_type: Optional[type] = None,
    cls: Type[SerializedDictionary] = SerializedDictionary,
) -> SerializedDictionary:
    """Rebuild a serialized dictionary from its ``keys``/``values`` payload."""
    if not isinstance(payload, Mapping) or KEYS_FIELD not in payload or VALUES_FIELD not in payload:
        raise SerializationError(f"Payload must be an object with '{KEYS_FIELD}' and '{VALUES_FIELD}'")

    keys = payload[KEYS_FIELD]
    values = payload[VALUES_FIELD]
    if not isinstance(keys, list) or not isinstance(values, list):
        raise SerializationError(f"'{KEYS_FIELD}' and '{VALUES_FIELD}' must be lists")

    try:
        decoded = {
            KEYS_FIELD: [decode_element(key, key_type) for key in keys],
            VALUES_FIELD: [decode_element(value, value_type) for value in values],
        }
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationError(
            f"Cannot decode {type_name(key_type)} -> {type_name(value_type)} payload: {e}"
        ) from e
    return cls.from_serialized(decoded, key_type=key_type, value_type=value_type)



def decode_document(
    document: Any,
    key_type: Optional[type] = None,
    value_type: Optional[type] = None,
    cls: Type[SerializedDictionary] = SerializedDictionary,
) -> SerializedDictionary:
    """Validate document metadata and decode its payload."""
    if not isinstance(document, dict):
        raise SerializationError(f"Expected a JSON object, got {type(document).__name__}")

    doc_format = document.get("format", DOCUMENT_FORMAT)
    if doc_format != DOCUMENT_FORMAT:
        raise SerializationError(f"Unsupported document format {doc_format!r}")

    version = document.get("version", DOCUMENT_VERSION)
    if not isinstance(version, int) or version > DOCUMENT_VERSION:
        raise SerializationError(
            f"Unsupported document version {version!r} (supported up to {DOCUMENT_VERSION})"
        )

    dictionary = decode_payload(document, key_type, value_type, cls)
    logger.debug(
        f"Decoded {dictionary.describe()} with {len(dictionary.serialized_keys)} persisted entries"
    )
    return dictionary
