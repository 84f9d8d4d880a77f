"""
Serialized dictionary drawer.

Toolkit independent half of the dictionary inspector. The drawer owns:

- per-property state (cached view and validation results) with idle eviction
- key validation (invalid and duplicate keys)
- list operations on the persisted keys/values (add, remove, reorder)
- applying edits back to the runtime map

Rendering, change detection and undo detection belong to the inspector host
(``InspectorHostProtocol``). A host calls ``on_gui`` whenever it refreshes the
property; the drawer revalidates and applies whenever the host reports a
change or an undo/redo.
"""

import logging
from typing import Iterable, List, Optional

from pyqt_serialdict.core.key_utils import is_simple_type
from pyqt_serialdict.core.serialization import SerializedDictionaryDrawable
from pyqt_serialdict.editor.default_values import DefaultValueService
from pyqt_serialdict.editor.dictionary_property import DictionaryProperty
from pyqt_serialdict.editor.dictionary_view import DictionaryView
from pyqt_serialdict.editor.drawer_state import DictionaryState, DrawerStateCache
from pyqt_serialdict.editor.entry_warnings import EntryWarning, validate
from pyqt_serialdict.protocols import (
    InspectorHostProtocol,
    get_drawer_config,
    get_inspector_host,
    register_property_drawer,
)

logger = logging.getLogger(__name__)


class SerializedDictionaryDrawer:
    """
    Drawer for every ``SerializedDictionaryDrawable``.

    Examples:
        drawer = SerializedDictionaryDrawer(host=my_inspector)
        prop = DictionaryProperty(character, "inventory")

        # On every inspector refresh:
        drawer.on_gui(prop)
    """

    def __init__(
        self,
        host: Optional[InspectorHostProtocol] = None,
        default_values: Optional[DefaultValueService] = None,
        states: Optional[DrawerStateCache] = None,
    ):
        self._host = host
        self._default_values = default_values or DefaultValueService(host)
        self._states = states if states is not None else DrawerStateCache()

    @property
    def host(self) -> InspectorHostProtocol:
        host = self._host if self._host is not None else get_inspector_host()
        if host is None:
            raise RuntimeError(
                "SerializedDictionaryDrawer has no inspector host. "
                "Pass host= or call register_inspector_host() first."
            )
        return host

    @property
    def states(self) -> DrawerStateCache:
        return self._states

    # ========== DRAW PASS ==========

    def on_gui(self, prop: DictionaryProperty) -> bool:
        """
        Run one inspector pass for ``prop``.

        Returns:
            True if the host reported a change or undo/redo and the edits were applied
        """
        host = self.host
        state = self._states.get_state(prop.state_key)
        self._states.clear_unused_states()

        if state.view is None or state.view.property.is_disposed:
            state.view = self._create_view(prop, state)
            state.warnings = None

        if state.warnings is None:
            state.warnings = validate(prop.keys)

        undo_or_redo = host.is_undo_or_redo()
        changed = host.draw(state.view)

        if undo_or_redo or changed:
            state.warnings = validate(state.view.property.keys)
            state.view.property.apply_modified_properties()
            logger.debug(
                f"Drawer applied '{prop.property_path}' "
                f"({'undo/redo' if undo_or_redo else 'edit'}), "
                f"{len(state.warnings)} entries with warnings"
            )
            return True

        return False

    def _create_view(self, prop: DictionaryProperty, state: DictionaryState) -> DictionaryView:
        config = get_drawer_config()
        key_type = prop.dictionary.key_type
        return DictionaryView(
            property=prop,
            drawer=self,
            display_header=self.should_display_header(prop),
            header=prop.display_name,
            empty_label=config.empty_label,
            key_label=None if is_simple_type(key_type) else config.generic_key_label,
            value_label=config.value_label,
            get_warnings=state.get_warnings,
        )

    @staticmethod
    def should_display_header(prop: DictionaryProperty) -> bool:
        return prop.depth == get_drawer_config().header_depth

    def get_warnings(self, prop: DictionaryProperty, index: int) -> List[EntryWarning]:
        state = self._states.try_get_state(prop.state_key)
        if state is None:
            return []
        return state.get_warnings(index)

    # ========== LIST OPERATIONS ==========

    def on_added(self, prop: DictionaryProperty) -> None:
        """Append an entry with default key and value."""
        dictionary = prop.dictionary
        key = self._default_values.default_for(dictionary.key_type, prop.keys)
        value = self._default_values.default_for(dictionary.value_type, prop.values)
        prop.insert_entry(prop.array_size, key, value)
        logger.debug(f"Added entry {key!r} to '{prop.property_path}'")

    def on_removed(self, prop: DictionaryProperty, selected_indices: Iterable[int]) -> None:
        """Delete the selected entries, highest index first so indices stay valid."""
        for index in sorted(set(selected_indices), reverse=True):
            prop.delete_entry(index)

    def on_reorder(self, prop: DictionaryProperty, old_index: int, new_index: int) -> None:
        if old_index == new_index:
            return
        prop.move_entry(old_index, new_index)


register_property_drawer(SerializedDictionaryDrawable, SerializedDictionaryDrawer, use_for_children=True)
