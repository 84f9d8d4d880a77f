"""
Collaborator protocols and application hooks.

The inspector host protocol isolates the editor framework; the drawer
registry and global configuration let applications plug in their own
drawers and labels.
"""

from .inspector_host import InspectorHostProtocol, register_inspector_host, get_inspector_host
from .drawer_registry import DrawerRegistry, register_property_drawer
from .drawer_config import DrawerConfig, set_drawer_config, get_drawer_config

__all__ = [
    "InspectorHostProtocol",
    "register_inspector_host",
    "get_inspector_host",
    "DrawerRegistry",
    "register_property_drawer",
    "DrawerConfig",
    "set_drawer_config",
    "get_drawer_config",
]
