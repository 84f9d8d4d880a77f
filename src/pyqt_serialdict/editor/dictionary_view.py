"""
What an inspector host draws for one dictionary property.

The view is created once per property and cached in the drawer state. Entry
data is read live from the persisted lists on every call, so a host may keep
the view across passes. List callbacks route back to the drawer.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, TYPE_CHECKING

from pyqt_serialdict.editor.dictionary_property import DictionaryProperty
from pyqt_serialdict.editor.entry_warnings import EntryWarning

if TYPE_CHECKING:
    from pyqt_serialdict.editor.drawer import SerializedDictionaryDrawer


@dataclass(frozen=True)
class EntryView:
    """One persisted entry with its validation messages."""
    index: int
    key: Any
    value: Any
    warnings: List[EntryWarning] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.warnings)


@dataclass
class DictionaryView:
    """
    Declarative description of a dictionary inspector.

    Attributes:
        property: The dictionary property being drawn
        display_header: Whether the host should draw ``header``
        header: Display name of the property
        empty_label: Text to show when there are no entries
        key_label: Label for key fields, None for inline key editing
        value_label: Label for value fields
    """
    property: DictionaryProperty
    drawer: "SerializedDictionaryDrawer"
    display_header: bool
    header: str
    empty_label: str
    key_label: Optional[str]
    value_label: str
    get_warnings: Callable[[int], List[EntryWarning]]

    @property
    def key_type(self) -> Optional[type]:
        return self.property.dictionary.key_type

    @property
    def value_type(self) -> Optional[type]:
        return self.property.dictionary.value_type

    @property
    def is_empty(self) -> bool:
        return self.property.array_size == 0

    def entries(self) -> List[EntryView]:
        keys, values = self.property.keys, self.property.values
        return [
            EntryView(index, keys[index], values[index], list(self.get_warnings(index)))
            for index in range(min(len(keys), len(values)))
        ]

    # ========== LIST CALLBACKS ==========

    def add(self) -> None:
        self.drawer.on_added(self.property)

    def remove(self, selected_indices: Iterable[int]) -> None:
        self.drawer.on_removed(self.property, selected_indices)

    def reorder(self, old_index: int, new_index: int) -> None:
        self.drawer.on_reorder(self.property, old_index, new_index)

    def set_key(self, index: int, key: Any) -> None:
        self.property.set_key(index, key)

    def set_value(self, index: int, value: Any) -> None:
        self.property.set_value(index, value)
