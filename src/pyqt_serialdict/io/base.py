"""Storage backend protocol for serialized dictionaries."""

from pathlib import Path
from typing import Protocol, Iterable, List, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from pyqt_serialdict.core.serialized_dictionary import SerializedDictionary

StoragePath = Union[str, Path]


class DataSink(Protocol):
    """Protocol for dictionary storage backends.

    Backends persist the key/value lists verbatim and rebuild the runtime map
    on load, using the declared key/value types passed as keyword arguments.
    """

    def load(self, file_path: StoragePath, **kwargs) -> "SerializedDictionary":
        ...

    def save(self, data: "SerializedDictionary", output_path: StoragePath, **kwargs) -> None:
        ...

    def load_batch(self, file_paths: Iterable[StoragePath], **kwargs) -> List["SerializedDictionary"]:
        ...

    def save_batch(self, data_list: Iterable["SerializedDictionary"],
                   output_paths: Iterable[StoragePath], **kwargs) -> None:
        ...

    def exists(self, path: StoragePath) -> bool:
        ...
