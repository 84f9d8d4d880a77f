"""
PyQt6 widgets.

Reference inspector host rendering serialized dictionaries in a table.
"""

from .dictionary_inspector import (
    DictionaryInspectorWidget,
    format_element,
    parse_element,
    get_message_color,
)

__all__ = [
    "DictionaryInspectorWidget",
    "format_element",
    "parse_element",
    "get_message_color",
]
