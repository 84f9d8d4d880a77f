"""
FileManager routing dictionary persistence to named backends.

Backends are looked up by name in an explicit registry; there is no
implicit default backend.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pyqt_serialdict.core.serialized_dictionary import SerializedDictionary
from pyqt_serialdict.exceptions import SerializationError
from pyqt_serialdict.io.base import DataSink
from pyqt_serialdict.io.exceptions import StorageResolutionError
from pyqt_serialdict.io.json_backend import JsonDictionaryBackend, MemoryDictionaryBackend

logger = logging.getLogger(__name__)


def create_default_registry() -> Dict[str, DataSink]:
    """Return a registry with the ``json`` and ``memory`` backends."""
    return {
        "json": JsonDictionaryBackend(),
        "memory": MemoryDictionaryBackend(),
    }


class FileManager:

    def __init__(self, registry: Optional[Dict[str, DataSink]]):
        """
        Initialize the file manager.

        Args:
            registry: Backend instances by name (see create_default_registry)

        Raises:
            ValueError: If registry is not provided.
        """
        if registry is None:
            raise ValueError("Registry must be provided to FileManager")

        self.registry = registry
        logger.debug(f"FileManager initialized with backends {sorted(registry)}")

    def _get_backend(self, backend_name: str) -> DataSink:
        """
        Get a backend by name.

        Raises:
            StorageResolutionError: If the backend is not found in the registry
        """
        backend_name = backend_name.lower()
        if backend_name not in self.registry:
            raise StorageResolutionError(
                f"Backend '{backend_name}' not found in registry (available: {sorted(self.registry)})"
            )
        return self.registry[backend_name]

    def load(self, file_path: Union[str, Path], backend: str, **kwargs) -> SerializedDictionary:
        """
        Load a dictionary using the specified backend.

        Args:
            file_path: Path to load from
            backend: Backend name (positional)
            **kwargs: Passed to the backend (key_type, value_type, cls)

        Raises:
            StorageResolutionError: If the backend is unknown or the load fails
            SerializationError: If the stored document is malformed
        """
        try:
            backend_instance = self._get_backend(backend)
            return backend_instance.load(file_path, **kwargs)
        except (StorageResolutionError, SerializationError):
            raise
        except Exception as e:
            logger.error(f"Unexpected error during load from {file_path} with backend {backend}: {e}", exc_info=True)
            raise StorageResolutionError(
                f"Failed to load dictionary at {file_path} using backend '{backend}'"
            ) from e

    def save(self, data: SerializedDictionary, output_path: Union[str, Path], backend: str, **kwargs) -> None:
        """
        Save a dictionary using the specified backend.

        Raises:
            StorageResolutionError: If the backend is unknown or the save fails
            SerializationError: If an element cannot be encoded
        """
        try:
            backend_instance = self._get_backend(backend)
            backend_instance.save(data, output_path, **kwargs)
        except (StorageResolutionError, SerializationError):
            raise
        except Exception as e:
            logger.error(f"Unexpected error during save to {output_path} with backend {backend}: {e}", exc_info=True)
            raise StorageResolutionError(
                f"Failed to save dictionary to {output_path} using backend '{backend}'"
            ) from e

    def load_batch(self, file_paths: List[Union[str, Path]], backend: str, **kwargs) -> List[SerializedDictionary]:
        """Load several dictionaries, in the order of ``file_paths``."""
        backend_instance = self._get_backend(backend)
        return backend_instance.load_batch(file_paths, **kwargs)

    def save_batch(self, data_list: List[SerializedDictionary], output_paths: List[Union[str, Path]],
                   backend: str, **kwargs) -> None:
        """
        Save several dictionaries.

        Raises:
            ValueError: If data_list and output_paths have different lengths
        """
        backend_instance = self._get_backend(backend)
        backend_instance.save_batch(data_list, output_paths, **kwargs)

    def exists(self, path: Union[str, Path], backend: str) -> bool:
        return self._get_backend(backend).exists(path)
