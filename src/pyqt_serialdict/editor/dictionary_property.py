"""
Handle on a serialized dictionary field of an owner object.

The drawer never touches the runtime map directly. Like a serialized property
in an engine editor, it edits the persisted key and value lists and then
applies the modification, which reconciles the runtime map.
"""

import logging
import re
import weakref
from typing import Any, Hashable, List, Tuple

from pyqt_serialdict.core.serialized_dictionary import SerializedDictionary
from pyqt_serialdict.exceptions import PropertyDisposedError

logger = logging.getLogger(__name__)


def nicify_name(name: str) -> str:
    """Turn a field name into a display label (``_max_hit_points`` -> ``Max Hit Points``)."""
    name = re.sub(r"^m_", "", name.lstrip("_"))
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", name)
    words = [word for word in name.replace("_", " ").split(" ") if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)


class DictionaryProperty:
    """
    Serialized dictionary addressed by ``owner`` and a dotted attribute path.

    The owner is held weakly; once it is collected the property reports
    ``is_disposed`` and any access raises ``PropertyDisposedError``.

    Examples:
        prop = DictionaryProperty(character, "stats.resistances")
        prop.insert_entry(prop.array_size, "fire", 0.5)
        prop.apply_modified_properties()
    """

    def __init__(self, target: Any, property_path: str):
        if not property_path:
            raise ValueError("property_path must name an attribute")

        self._target_ref = weakref.ref(target)
        self._target_id = id(target)
        self.property_path = property_path
        self._modified = False

        # Raises if the path does not resolve to a SerializedDictionary
        self.dictionary

    @property
    def target(self) -> Any:
        target = self._target_ref()
        if target is None:
            raise PropertyDisposedError(f"Owner of '{self.property_path}' no longer exists")
        return target

    @property
    def is_disposed(self) -> bool:
        return self._target_ref() is None

    @property
    def dictionary(self) -> SerializedDictionary:
        value = self.target
        for segment in self.property_path.split("."):
            value = getattr(value, segment)
        if not isinstance(value, SerializedDictionary):
            raise TypeError(
                f"'{self.property_path}' is {type(value).__name__}, expected SerializedDictionary"
            )
        return value

    @property
    def depth(self) -> int:
        return self.property_path.count(".")

    @property
    def name(self) -> str:
        return self.property_path.rsplit(".", 1)[-1]

    @property
    def display_name(self) -> str:
        return nicify_name(self.name)

    @property
    def state_key(self) -> Tuple[int, str]:
        """Identity of this property across passes: owner identity plus path."""
        return (self._target_id, self.property_path)

    @property
    def keys(self) -> List[Any]:
        return self.dictionary.serialized_keys

    @property
    def values(self) -> List[Any]:
        return self.dictionary.serialized_values

    @property
    def array_size(self) -> int:
        return len(self.keys)

    @property
    def has_modified_properties(self) -> bool:
        return self._modified

    # ========== PERSISTED LIST EDITS ==========

    def insert_entry(self, index: int, key: Any, value: Any) -> None:
        self.keys.insert(index, key)
        self.values.insert(index, value)
        self._modified = True

    def delete_entry(self, index: int) -> None:
        del self.keys[index]
        del self.values[index]
        self._modified = True

    def move_entry(self, old_index: int, new_index: int) -> None:
        """Move key and value together, shifting the entries in between."""
        keys, values = self.keys, self.values
        keys.insert(new_index, keys.pop(old_index))
        values.insert(new_index, values.pop(old_index))
        self._modified = True

    def set_key(self, index: int, key: Hashable) -> None:
        self.keys[index] = key
        self._modified = True

    def set_value(self, index: int, value: Any) -> None:
        self.values[index] = value
        self._modified = True

    def apply_modified_properties(self) -> None:
        """Reconcile the runtime map with the edited persisted lists."""
        self.dictionary.on_after_deserialize()
        self._modified = False
        logger.debug(f"Applied '{self.property_path}': {self.array_size} persisted entries")

    def __repr__(self) -> str:
        return f"DictionaryProperty({self.property_path!r}, disposed={self.is_disposed})"
