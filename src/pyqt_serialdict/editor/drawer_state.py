"""Per-property drawer state with idle eviction."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, TYPE_CHECKING

from pyqt_serialdict.editor.entry_warnings import EntryWarning
from pyqt_serialdict.protocols import get_drawer_config

if TYPE_CHECKING:
    from pyqt_serialdict.editor.dictionary_view import DictionaryView

logger = logging.getLogger(__name__)


@dataclass
class DictionaryState:
    """Cached view and validation results for one drawn property."""
    view: Optional["DictionaryView"] = None
    warnings: Optional[Dict[int, List[EntryWarning]]] = None
    not_accessed_counter: int = 0

    def get_warnings(self, index: int) -> List[EntryWarning]:
        if not self.warnings or index not in self.warnings:
            return []
        return self.warnings[index]


@dataclass
class DrawerStateCache:
    """
    States keyed by property identity.

    Every drawn property resets its own counter; every pass ages all states.
    States not drawn for more than ``idle_limit`` passes are dropped, which
    releases views of inspectors that were closed.
    """
    idle_limit: Optional[int] = None
    _states: Dict[Hashable, DictionaryState] = field(default_factory=dict)

    @property
    def effective_idle_limit(self) -> int:
        if self.idle_limit is not None:
            return self.idle_limit
        return get_drawer_config().state_idle_limit

    def try_get_state(self, key: Hashable) -> Optional[DictionaryState]:
        return self._states.get(key)

    def get_state(self, key: Hashable) -> DictionaryState:
        state = self._states.get(key)
        if state is None:
            state = DictionaryState()
            self._states[key] = state

        state.not_accessed_counter = 0
        return state

    def clear_unused_states(self) -> None:
        limit = self.effective_idle_limit
        stale = [key for key, state in self._states.items() if state.not_accessed_counter > limit]
        for key in stale:
            del self._states[key]

        for state in self._states.values():
            state.not_accessed_counter += 1

        if stale:
            logger.debug(f"Evicted {len(stale)} idle drawer states")

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._states
