"""Drawer registry mapping value types to drawer factories.

A drawer registered with ``use_for_children=True`` also serves every
subclass of its type, resolved along the MRO.
"""

from typing import Callable, Any, Dict, Type, Optional, Tuple


DrawerFactory = Callable[..., Any]


class DrawerRegistry:
    """Registry for property drawers by value type.

    Example:
        from pyqt_serialdict.protocols import DrawerRegistry

        DrawerRegistry.register(SerializedDictionaryDrawable, SerializedDictionaryDrawer,
                                use_for_children=True)
        drawer_cls = DrawerRegistry.get_drawer(type(player.inventory))
    """

    _drawers: Dict[Type, Tuple[DrawerFactory, bool]] = {}

    @classmethod
    def register(cls, value_type: Type, factory: DrawerFactory, use_for_children: bool = False) -> None:
        """Register a drawer factory for a value type.

        Args:
            value_type: Type the drawer renders
            factory: Callable returning a drawer instance
            use_for_children: Also serve subclasses of value_type
        """
        cls._drawers[value_type] = (factory, use_for_children)

    @classmethod
    def unregister(cls, value_type: Type) -> None:
        cls._drawers.pop(value_type, None)

    @classmethod
    def get_drawer(cls, value_type: Type) -> Optional[DrawerFactory]:
        """Get the drawer factory for a value type.

        Args:
            value_type: Type of the value to draw

        Returns:
            Drawer factory if registered, None otherwise
        """
        entry = cls._drawers.get(value_type)
        if entry:
            return entry[0]

        # Check base classes registered for their children
        for base in getattr(value_type, "__mro__", ())[1:]:
            entry = cls._drawers.get(base)
            if entry and entry[1]:
                return entry[0]

        return None


# Convenience function for registration
def register_property_drawer(value_type: Type, factory: DrawerFactory, use_for_children: bool = False) -> None:
    """Register a property drawer for a value type.

    Args:
        value_type: Type the drawer renders
        factory: Drawer factory
        use_for_children: Also serve subclasses of value_type
    """
    DrawerRegistry.register(value_type, factory, use_for_children)
