"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/registry.py
Tracks every digest seen during a run and reports duplicates to listeners.

Each digest key holds an explicit state:
    FirstSeen(record)  : one file with this digest, not yet duplicated
    AlreadyDuplicated  : a duplicate was reported, the original record was released

The state moves FirstSeen -> AlreadyDuplicated once and never back. Keys are never
removed. The original record is dropped on its first duplicate, so the third and later files of a
group are reported without an original.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from dupehash.core.interfaces import HashListener
from dupehash.core.models import FileRecord
from dupehash.utils.convert_utils import ConvertUtils


@dataclass(frozen=True)
class FirstSeen:
    record: FileRecord


@dataclass(frozen=True)
class AlreadyDuplicated:
    pass


ALREADY_DUPLICATED = AlreadyDuplicated()

EntryState = Union[FirstSeen, AlreadyDuplicated]


class HashRegistry:
    """
    Classifies each added record as original or duplicate.
    Notifications are delivered synchronously, in listener registration order.
    """

    def __init__(self):
        self._hashes: Dict[str, EntryState] = {}
        self._listeners: List[HashListener] = []

    def add_listener(self, listener: HashListener) -> None:
        self._listeners.append(listener)

    def add(self, record: FileRecord) -> None:
        """
        Registers a record.
        hash_calculated always fires first; hash_duplicate_detected follows when the
        digest was already present.
        """
        if record is None:
            raise ValueError("record cannot be None")

        key = ConvertUtils.hash_to_hex(record.digest)
        state = self._hashes.get(key)

        if state is None:
            self._hashes[key] = FirstSeen(record)
            self._notify_calculated(record)
            return

        self._notify_calculated(record)

        if isinstance(state, FirstSeen):
            self._notify_duplicate(record, state.record)
            self._hashes[key] = ALREADY_DUPLICATED
        else:
            self._notify_duplicate(record, None)

    def state_of(self, digest: bytes) -> Optional[EntryState]:
        """Returns the tracked state for a digest, or None if it was never added."""
        return self._hashes.get(ConvertUtils.hash_to_hex(digest))

    def __len__(self) -> int:
        return len(self._hashes)

    def _notify_calculated(self, record: FileRecord) -> None:
        for listener in self._listeners:
            listener.hash_calculated(record)

    def _notify_duplicate(self, duplicate: FileRecord, original: Optional[FileRecord]) -> None:
        for listener in self._listeners:
            listener.hash_duplicate_detected(duplicate, original)
