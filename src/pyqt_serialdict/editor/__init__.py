"""
Toolkit independent dictionary drawer.

Validation, per-property state, default synthesis and list operations.
Hosts implement InspectorHostProtocol to render what the drawer describes.
"""

from .entry_warnings import MessageType, EntryWarning, find_warnings, validate
from .dictionary_property import DictionaryProperty
from .drawer_state import DictionaryState, DrawerStateCache
from .default_values import DefaultStrategy, DefaultValueService
from .dictionary_view import DictionaryView, EntryView
from .drawer import SerializedDictionaryDrawer

__all__ = [
    "MessageType",
    "EntryWarning",
    "find_warnings",
    "validate",
    "DictionaryProperty",
    "DictionaryState",
    "DrawerStateCache",
    "DefaultStrategy",
    "DefaultValueService",
    "DictionaryView",
    "EntryView",
    "SerializedDictionaryDrawer",
]
