"""Inspector host protocol for pluggable editor integration.

Everything that depends on a concrete editor framework (drawing, undo/redo
detection, reflection-based construction of default objects) lives behind
this single protocol so the drawer logic stays toolkit independent.
"""

from typing import Protocol, Optional, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from pyqt_serialdict.editor.dictionary_view import DictionaryView


class InspectorHostProtocol(Protocol):
    """Protocol for editors that display and edit serialized dictionaries.

    Example:
        from pyqt_serialdict.protocols import register_inspector_host
        from myapp.inspector import MyInspector

        register_inspector_host(MyInspector())
    """

    def draw(self, view: "DictionaryView") -> bool:
        """Render the dictionary.

        Args:
            view: Entries, warnings, labels and list callbacks to render

        Returns:
            True if the user changed any entry since the previous pass
        """
        ...

    def is_undo_or_redo(self) -> bool:
        """Whether the current pass was triggered by an undo or redo.

        Returns:
            True if persisted data may have been replaced behind the drawer's back
        """
        ...

    def create_default(self, element_type: type) -> Any:
        """Construct a default instance for a type the drawer cannot default itself.

        Args:
            element_type: Key or value type of a newly added entry

        Returns:
            A fresh default instance
        """
        ...


# Global host instance (set by application)
_inspector_host: Optional[InspectorHostProtocol] = None


def register_inspector_host(host: Optional[InspectorHostProtocol]) -> None:
    """Register the inspector host implementation.

    Args:
        host: Object implementing InspectorHostProtocol, or None to unregister
    """
    global _inspector_host
    _inspector_host = host


def get_inspector_host() -> Optional[InspectorHostProtocol]:
    """Get the registered inspector host.

    Returns:
        Registered host or None if not registered
    """
    return _inspector_host
