"""Base configuration for the dictionary drawer.

Provides hooks for applications to customize labels, warning texts and
state caching without subclassing the drawer.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class DrawerConfig:
    """Configuration for dictionary drawer behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        state_idle_limit: Passes a cached drawer state may go unused before eviction
        header_depth: Property depth at which the header row is displayed
        empty_label: Text shown when the dictionary has no entries
        generic_key_label: Label for keys that are not edited inline
        value_label: Label for every value field
        invalid_key_text: Warning for keys that cannot be stored at runtime
        duplicate_key_text: Warning for keys shadowed by an earlier equal key
    """

    state_idle_limit: int = 60
    header_depth: int = 0
    empty_label: str = "Dictionary is empty"
    generic_key_label: str = "Key"
    value_label: str = "Value"
    invalid_key_text: str = "Invalid key"
    duplicate_key_text: str = "Duplicate key"


# Global config instance (set by application)
_drawer_config: Optional[DrawerConfig] = None


def set_drawer_config(config: Optional[DrawerConfig]) -> None:
    """Set the global drawer configuration.

    Args:
        config: DrawerConfig instance, or None to restore defaults
    """
    global _drawer_config
    _drawer_config = config


def get_drawer_config() -> DrawerConfig:
    """Get the current drawer configuration.

    Returns:
        Current DrawerConfig or default if not set
    """
    if _drawer_config is None:
        return DrawerConfig()
    return _drawer_config
