"""
Serialization callback contract.

The host serializer only understands flat sequences. Containers that keep a
richer runtime representation implement these hooks to translate between the
two around every save and load.
"""

from abc import ABC, abstractmethod


class SerializationCallbackReceiver(ABC):
    """ABC for objects that must be notified around (de)serialization."""

    @abstractmethod
    def on_before_serialize(self) -> None:
        """Called before the serializer reads the persisted fields."""
        pass

    @abstractmethod
    def on_after_deserialize(self) -> None:
        """Called after the serializer has written the persisted fields."""
        pass


class SerializedDictionaryDrawable:
    """Marker base for every serialized dictionary type.

    Drawers are registered against this class with ``use_for_children=True``
    so that one drawer serves all key/value specializations.
    """
