"""
kitties_core.records
--------------------
Record store: kitty payloads keyed by id plus the identity counter.

The counter cell holds the number of kitties created so far, which is also
the next identity to hand out. allocate_identity() only reads it;
insert_record() persists the record and advances it, so the two calls form
one logical step and must not be interleaved with another allocation.
"""

from __future__ import annotations
from typing import Optional

from kitties_core.errors import CounterOverflow
from kitties_core.storage.models import Kitty, MAX_KITTY_ID
from kitties_core.storage.provider import StorageProvider


class RecordStore:
    def __init__(self, storage: StorageProvider, max_kitty_id: int = MAX_KITTY_ID):
        if max_kitty_id < 0:
            raise ValueError("max_kitty_id must be non-negative")
        self.storage = storage
        self.max_kitty_id = max_kitty_id

    def is_valid_id(self, kitty_id) -> bool:
        # bool is an int subclass but never an identity
        return (
            isinstance(kitty_id, int)
            and not isinstance(kitty_id, bool)
            and 0 <= kitty_id < self.max_kitty_id
        )

    def allocate_identity(self) -> int:
        kitty_id = self.storage.get_kitties_count()
        if kitty_id >= self.max_kitty_id:
            raise CounterOverflow(self.max_kitty_id)
        return kitty_id

    def insert_record(self, kitty_id: int, kitty: Kitty) -> None:
        self.storage.insert_kitty(kitty_id, kitty)
        self.storage.put_kitties_count(kitty_id + 1)

    def get_record(self, kitty_id: int) -> Optional[Kitty]:
        return self.storage.get_kitty(kitty_id)

    def contains(self, kitty_id: int) -> bool:
        return self.storage.contains_kitty(kitty_id)

    def count(self) -> int:
        return self.storage.get_kitties_count()
