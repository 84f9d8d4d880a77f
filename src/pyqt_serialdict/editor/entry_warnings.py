"""Entry validation for persisted dictionary keys."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Sequence, Set

from pyqt_serialdict.core.key_utils import is_valid_key, keys_equal
from pyqt_serialdict.protocols import get_drawer_config


class MessageType(Enum):
    """Severity of an entry message; the host resolves colors at runtime."""
    NONE = "none"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class EntryWarning:
    """A message attached to one persisted entry."""
    index: int
    text: str
    type: MessageType = MessageType.ERROR


def find_warnings(keys: Sequence[Any]) -> Iterator[EntryWarning]:
    """
    Yield warnings for invalid and duplicate keys.

    Each key is flagged invalid at its own index. A valid key equal to an
    earlier valid key is flagged as a duplicate once, at the later index, since
    the first occurrence is the one the runtime map keeps. Invalid keys take no
    part in duplicate checks.
    """
    config = get_drawer_config()
    duplicates: Set[int] = set()

    for i, first in enumerate(keys):
        if not is_valid_key(first):
            yield EntryWarning(i, config.invalid_key_text, MessageType.ERROR)
            continue

        for k in range(i + 1, len(keys)):
            if k in duplicates or not is_valid_key(keys[k]):
                continue
            if keys_equal(first, keys[k]):
                duplicates.add(k)
                yield EntryWarning(k, config.duplicate_key_text, MessageType.ERROR)


def validate(keys: Sequence[Any]) -> Dict[int, List[EntryWarning]]:
    """Group warnings by entry index, preserving discovery order."""
    result: Dict[int, List[EntryWarning]] = {}
    for warning in find_warnings(keys):
        result.setdefault(warning.index, []).append(warning)
    return result
