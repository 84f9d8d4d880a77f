"""Exceptions raised by pyqt-serialdict."""


class SerializedDictError(Exception):
    """Base class for all serialized dictionary errors."""


class InvalidKeyError(SerializedDictError, ValueError):
    """Raised when a key is None or unhashable."""


class DuplicateKeyError(SerializedDictError, KeyError):
    """Raised when adding a key that is already present."""


class SerializationError(SerializedDictError):
    """Raised when persisted keys/values cannot be reconciled or decoded."""


class DefaultValueError(SerializedDictError):
    """Raised when no default can be synthesized for an element type."""


class PropertyDisposedError(SerializedDictError, ReferenceError):
    """Raised when a dictionary property outlives the object that owns it."""
