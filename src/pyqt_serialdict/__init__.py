"""
pyqt-serialdict: Serialization-preserving dictionaries with a PyQt6 inspector.

A dictionary that is an ordinary mapping at runtime and a pair of parallel,
ordered key/value lists when persisted, plus the editor-side drawer that
validates and edits those lists.

Architecture:
- Tier 1 (Core): SerializedDictionary and the serialization callback contract
- Tier 2 (Protocols): Inspector host protocol, drawer registry, configuration
- Tier 3 (Editor): Toolkit independent drawer (validation, state, defaults)
- Tier 4 (IO): JSON persistence backends
- Tier 5 (Widgets): PyQt6 inspector host

Key Features:
- Runtime map and persisted lists kept in sync on every mutation
- Duplicate and invalid keys survive a save/load cycle, shadowed but visible
- Duplicate/invalid key warnings per entry
- Enum-aware default keys for new entries
"""

__version__ = "0.1.0"

from pyqt_serialdict.core import SerializedDictionary, SerializationCallbackReceiver, SerializedDictionaryDrawable
from pyqt_serialdict.exceptions import (
    SerializedDictError,
    InvalidKeyError,
    DuplicateKeyError,
    SerializationError,
    DefaultValueError,
    PropertyDisposedError,
)

__all__ = [
    "__version__",
    "SerializedDictionary",
    "SerializationCallbackReceiver",
    "SerializedDictionaryDrawable",
    "SerializedDictError",
    "InvalidKeyError",
    "DuplicateKeyError",
    "SerializationError",
    "DefaultValueError",
    "PropertyDisposedError",
]
