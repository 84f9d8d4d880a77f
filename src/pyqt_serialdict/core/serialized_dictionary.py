"""
Serialization-preserving dictionary.

A ``SerializedDictionary`` is two things at once:

- At runtime it is a regular mapping backed by a ``dict``.
- For persistence it is a pair of parallel, ordered lists (``_keys`` and
  ``_values``) that a flat serializer can store and restore verbatim.

The lists are the source of truth across a save/load cycle. They may contain
entries the runtime map cannot hold (``None`` or unhashable keys, repeated
keys) because an editor writes them directly. ``on_after_deserialize`` rebuilds
the map from the lists, keeping the first occurrence of each valid key and
leaving everything else persisted but shadowed, so nothing the user typed is
lost until they fix it.

Runtime mutations always go through ``__setitem__``/``__delitem__``/``clear``
which update both representations, so the ``MutableMapping`` mixins
(``update``, ``pop``, ``popitem``, ``setdefault``) stay in sync for free.
"""

import logging
from typing import (
    Any, Dict, Generic, Iterable, Iterator, List, Mapping, MutableMapping,
    Optional, Tuple, TypeVar, Union, get_args,
)

from pyqt_serialdict.core.key_utils import is_valid_key, keys_equal, type_name
from pyqt_serialdict.core.serialization import (
    SerializationCallbackReceiver,
    SerializedDictionaryDrawable,
)
from pyqt_serialdict.exceptions import (
    DuplicateKeyError,
    InvalidKeyError,
    SerializationError,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

KEYS_FIELD = "keys"
VALUES_FIELD = "values"


class SerializedDictionary(
    SerializedDictionaryDrawable,
    SerializationCallbackReceiver,
    MutableMapping[K, V],
    Generic[K, V],
):
    """
    Mapping that persists itself as parallel key and value lists.

    Examples:
        scores = SerializedDictionary[str, int]({"alice": 3})
        scores["bob"] = 5

        payload = scores.to_serialized()
        # {"keys": ["alice", "bob"], "values": [3, 5]}

        restored = SerializedDictionary.from_serialized(payload, key_type=str, value_type=int)
    """

    def __init__(
        self,
        data: Union[Mapping[K, V], Iterable[Tuple[K, V]], None] = None,
        *,
        key_type: Optional[type] = None,
        value_type: Optional[type] = None,
        **kwargs: V,
    ):
        self._keys: List[K] = []
        self._values: List[V] = []
        self._dict: Dict[K, V] = {}
        self._key_type = key_type
        self._value_type = value_type

        if data is not None:
            pairs = data.items() if isinstance(data, Mapping) else data
            for key, value in pairs:
                self.add(key, value)
        for key, value in kwargs.items():
            self.add(key, value)

    # ========== ELEMENT TYPES ==========

    def _generic_args(self) -> Tuple[Any, ...]:
        # Set by typing after __init__ when instantiated as SerializedDictionary[K, V]()
        orig_class = self.__dict__.get("__orig_class__")
        return get_args(orig_class) if orig_class is not None else ()

    @property
    def key_type(self) -> Optional[type]:
        """Declared key type, explicit or taken from the subscripted generic."""
        if self._key_type is not None:
            return self._key_type
        args = self._generic_args()
        return args[0] if args else None

    @property
    def value_type(self) -> Optional[type]:
        """Declared value type, explicit or taken from the subscripted generic."""
        if self._value_type is not None:
            return self._value_type
        args = self._generic_args()
        return args[1] if len(args) > 1 else None

    # ========== PERSISTED STATE ==========

    @property
    def serialized_keys(self) -> List[K]:
        """Live persisted key list. Call ``on_after_deserialize`` after editing it."""
        return self._keys

    @property
    def serialized_values(self) -> List[V]:
        """Live persisted value list, parallel to ``serialized_keys``."""
        return self._values

    def _index_of(self, key: K) -> Optional[int]:
        for index, persisted in enumerate(self._keys):
            # Invalid persisted keys never back a live entry
            if is_valid_key(persisted) and keys_equal(persisted, key):
                return index
        return None

    def _install(self, keys: Iterable[Any], values: Iterable[Any]) -> None:
        keys, values = list(keys), list(values)
        if len(keys) != len(values):
            raise SerializationError(
                f"Persisted keys ({len(keys)}) and values ({len(values)}) differ in length"
            )
        self._keys = keys
        self._values = values
        self.on_after_deserialize()

    @staticmethod
    def _check_key(key: Any) -> None:
        if not is_valid_key(key):
            raise InvalidKeyError(f"Invalid key {key!r}: keys must be hashable and not None")

    # ========== MAPPING PROTOCOL ==========

    def __getitem__(self, key: K) -> V:
        return self._dict[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._check_key(key)

        if key not in self._dict:
            self._keys.append(key)
            self._values.append(value)
        else:
            index = self._index_of(key)
            if index is None:
                logger.warning(
                    f"Key {key!r} present at runtime but missing from persisted keys; re-appending"
                )
                self._keys.append(key)
                self._values.append(value)
            else:
                self._values[index] = value

        self._dict[key] = value

    def __delitem__(self, key: K) -> None:
        del self._dict[key]

        index = self._index_of(key)
        if index is not None:
            del self._keys[index]
            del self._values[index]

    def __iter__(self) -> Iterator[K]:
        return iter(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def __contains__(self, key: object) -> bool:
        return key in self._dict

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._dict!r})"

    def add(self, key: K, value: V) -> None:
        """Insert a new entry, refusing keys that are already present.

        Raises:
            InvalidKeyError: If the key is None or unhashable
            DuplicateKeyError: If the key already exists
        """
        self._check_key(key)
        if key in self._dict:
            raise DuplicateKeyError(key)

        self._dict[key] = value
        self._keys.append(key)
        self._values.append(value)

    def clear(self) -> None:
        self._dict.clear()
        self._keys.clear()
        self._values.clear()

    def copy(self) -> "SerializedDictionary[K, V]":
        """Shallow copy that keeps shadowed persisted entries."""
        clone = self.__class__.__new__(self.__class__)
        clone.__setstate__(self.__getstate__())
        return clone

    # ========== SERIALIZATION CALLBACKS ==========

    def on_before_serialize(self) -> None:
        # Lists are updated on every mutation, nothing to flush
        pass

    def on_after_deserialize(self) -> None:
        """Rebuild the runtime map from the persisted lists.

        Invalid keys are skipped and the first occurrence of a key wins. The
        skipped entries remain in the lists.

        Raises:
            SerializationError: If the key and value lists differ in length
        """
        if len(self._keys) != len(self._values):
            raise SerializationError(
                f"Persisted keys ({len(self._keys)}) and values ({len(self._values)}) differ in length"
            )

        self._dict.clear()
        shadowed = 0
        for key, value in zip(self._keys, self._values):
            if is_valid_key(key) and key not in self._dict:
                self._dict[key] = value
            else:
                shadowed += 1

        if shadowed:
            logger.debug(
                f"{self.__class__.__name__}: {shadowed} persisted entries shadowed "
                f"(invalid or duplicate keys), {len(self._dict)} live"
            )

    def to_serialized(self) -> Dict[str, List[Any]]:
        """Return the persisted form as ``{"keys": [...], "values": [...]}``."""
        self.on_before_serialize()
        return {KEYS_FIELD: list(self._keys), VALUES_FIELD: list(self._values)}

    def load_serialized(self, payload: Mapping[str, Any]) -> None:
        """Install persisted lists from ``payload`` and reconcile the map.

        Raises:
            SerializationError: If the payload lacks either list or they do not match
        """
        try:
            keys = payload[KEYS_FIELD]
            values = payload[VALUES_FIELD]
        except (KeyError, TypeError) as e:
            raise SerializationError(
                f"Payload must provide '{KEYS_FIELD}' and '{VALUES_FIELD}' lists"
            ) from e
        if not isinstance(keys, (list, tuple)) or not isinstance(values, (list, tuple)):
            raise SerializationError(f"'{KEYS_FIELD}' and '{VALUES_FIELD}' must be lists")

        self._install(keys, values)

    @classmethod
    def from_serialized(
        cls,
        payload: Mapping[str, Any],
        key_type: Optional[type] = None,
        value_type: Optional[type] = None,
    ) -> "SerializedDictionary":
        instance = cls(key_type=key_type, value_type=value_type)
        instance.load_serialized(payload)
        return instance

    # ========== PICKLE / COPY ==========

    def __getstate__(self) -> Dict[str, Any]:
        return {
            KEYS_FIELD: list(self._keys),
            VALUES_FIELD: list(self._values),
            "key_type": self.key_type,
            "value_type": self.value_type,
        }

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self._dict = {}
        self._keys = []
        self._values = []
        self._key_type = state.get("key_type")
        self._value_type = state.get("value_type")
        self._install(state[KEYS_FIELD], state[VALUES_FIELD])

    def describe(self) -> str:
        """Short human readable type description, e.g. ``SerializedDictionary[str, int]``."""
        return f"{self.__class__.__name__}[{type_name(self.key_type)}, {type_name(self.value_type)}]"
