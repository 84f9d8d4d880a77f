"""JSON file backends for serialized dictionaries."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type, Union

from pyqt_serialdict.core.serialized_dictionary import SerializedDictionary
from pyqt_serialdict.exceptions import SerializationError
from pyqt_serialdict.io.codec import decode_document, encode_document
from pyqt_serialdict.io.exceptions import StorageResolutionError

logger = logging.getLogger(__name__)


class JsonDictionaryBackend:
    """
    Stores one serialized dictionary per JSON file.

    Examples:
        backend = JsonDictionaryBackend()
        backend.save(inventory, "saves/inventory.json")
        inventory = backend.load("saves/inventory.json", key_type=Item, value_type=int)
    """

    def __init__(self, indent: Optional[int] = 2):
        self.indent = indent

    def load(
        self,
        file_path: Union[str, Path],
        key_type: Optional[type] = None,
        value_type: Optional[type] = None,
        cls: Type[SerializedDictionary] = SerializedDictionary,
        **kwargs,
    ) -> SerializedDictionary:
        """
        Load a dictionary from a JSON file.

        Raises:
            StorageResolutionError: If the file cannot be read
            SerializationError: If the document is malformed
        """
        path = Path(file_path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageResolutionError(f"Failed to read {path}: {e}") from e

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"{path} is not valid JSON: {e}") from e

        logger.debug(f"Loaded serialized dictionary from {path}")
        return decode_document(document, key_type, value_type, cls)

    def save(self, data: SerializedDictionary, output_path: Union[str, Path], **kwargs) -> None:
        """
        Save a dictionary to a JSON file, creating parent directories.

        Raises:
            SerializationError: If an element cannot be represented in JSON
            StorageResolutionError: If the file cannot be written
        """
        path = Path(output_path)
        try:
            text = json.dumps(encode_document(data), indent=self.indent)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode {data.describe()} as JSON: {e}") from e

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise StorageResolutionError(f"Failed to write {path}: {e}") from e

        logger.debug(f"Saved {data.describe()} to {path}")

    def load_batch(self, file_paths: Iterable[Union[str, Path]], **kwargs) -> List[SerializedDictionary]:
        return [self.load(file_path, **kwargs) for file_path in file_paths]

    def save_batch(
        self,
        data_list: Iterable[SerializedDictionary],
        output_paths: Iterable[Union[str, Path]],
        **kwargs,
    ) -> None:
        data_list, output_paths = list(data_list), list(output_paths)
        if len(data_list) != len(output_paths):
            raise ValueError(
                f"data_list ({len(data_list)}) and output_paths ({len(output_paths)}) must have the same length"
            )
        for data, output_path in zip(data_list, output_paths):
            self.save(data, output_path, **kwargs)

    def exists(self, path: Union[str, Path]) -> bool:
        return Path(path).is_file()


class MemoryDictionaryBackend(JsonDictionaryBackend):
    """
    In-memory backend keeping encoded JSON text by path.

    Goes through the same encode/decode path as the file backend, so a
    round trip behaves exactly like saving and reloading from disk.
    """

    def __init__(self, indent: Optional[int] = None):
        super().__init__(indent)
        self._documents: Dict[str, str] = {}

    def load(
        self,
        file_path: Union[str, Path],
        key_type: Optional[type] = None,
        value_type: Optional[type] = None,
        cls: Type[SerializedDictionary] = SerializedDictionary,
        **kwargs,
    ) -> SerializedDictionary:
        key = str(file_path)
        if key not in self._documents:
            raise StorageResolutionError(f"No document stored at '{key}'")
        return decode_document(json.loads(self._documents[key]), key_type, value_type, cls)

    def save(self, data: SerializedDictionary, output_path: Union[str, Path], **kwargs) -> None:
        try:
            self._documents[str(output_path)] = json.dumps(encode_document(data), indent=self.indent)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot encode {data.describe()} as JSON: {e}") from e

    def exists(self, path: Union[str, Path]) -> bool:
        return str(path) in self._documents

    def delete(self, path: Union[str, Path]) -> None:
        self._documents.pop(str(path), None)
