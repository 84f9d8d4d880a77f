"""IO exceptions."""

from pyqt_serialdict.exceptions import SerializedDictError


class StorageResolutionError(SerializedDictError):
    """Raised when a storage backend cannot be resolved or used."""
