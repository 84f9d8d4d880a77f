"""
Persistence backends for serialized dictionaries.

Documents store the persisted key/value lists verbatim so a reload
reproduces shadowed entries as well as live ones.
"""

from .base import DataSink
from .exceptions import StorageResolutionError
from .codec import encode_document, decode_document, encode_element, decode_element
from .json_backend import JsonDictionaryBackend, MemoryDictionaryBackend
from .file_manager import FileManager, create_default_registry

__all__ = [
    "DataSink",
    "StorageResolutionError",
    "encode_document",
    "decode_document",
    "encode_element",
    "decode_element",
    "JsonDictionaryBackend",
    "MemoryDictionaryBackend",
    "FileManager",
    "create_default_registry",
]
