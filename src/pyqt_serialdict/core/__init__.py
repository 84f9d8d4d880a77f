"""
Core container.

The serialized dictionary and the serialization callback contract.
No GUI toolkit dependencies.
"""

from .serialization import SerializationCallbackReceiver, SerializedDictionaryDrawable
from .serialized_dictionary import SerializedDictionary
from .key_utils import is_valid_key, keys_equal, is_simple_type

__all__ = [
    "SerializationCallbackReceiver",
    "SerializedDictionaryDrawable",
    "SerializedDictionary",
    "is_valid_key",
    "keys_equal",
    "is_simple_type",
]
