"""
kitties_core.ownership
----------------------
Per-owner kitty lists threaded through the key-value store.

Each owner's kitties form a circular doubly-linked list whose nodes are
KittyLinkedItem entries keyed by (owner, kitty_id). The entry at
(owner, None) is the sentinel head; a None pointer always refers to it, so
the head and ordinary nodes share one read/write path. `prev` points toward
older kitties, `next` toward newer ones; head.prev is the newest kitty and
head.next the oldest.

append() and remove() touch at most three entries regardless of list length.
"""

from __future__ import annotations
from typing import List, Optional

from kitties_core.storage.models import KittyLinkedItem
from kitties_core.storage.provider import StorageProvider


def _is_kitty_key(kitty_id) -> bool:
    # None (and the SQLite head encoding) address the sentinel, never a kitty
    return isinstance(kitty_id, int) and not isinstance(kitty_id, bool) and kitty_id >= 0


def _check_key(kitty_id) -> None:
    if not _is_kitty_key(kitty_id):
        raise ValueError(f"invalid kitty id for ownership list: {kitty_id!r}")


class OwnedKitties:
    def __init__(self, storage: StorageProvider):
        self.storage = storage

    def read(self, owner: str, key: Optional[int]) -> KittyLinkedItem:
        item = self.storage.get_link(owner, key)
        if item is None:
            return KittyLinkedItem(prev=None, next=None)
        return item

    def write(self, owner: str, key: Optional[int], item: KittyLinkedItem) -> None:
        self.storage.insert_link(owner, key, item)

    def read_head(self, owner: str) -> KittyLinkedItem:
        return self.read(owner, None)

    def write_head(self, owner: str, item: KittyLinkedItem) -> None:
        self.write(owner, None, item)

    def contains(self, owner: str, kitty_id: int) -> bool:
        if not _is_kitty_key(kitty_id):
            return False
        return self.storage.contains_link(owner, kitty_id)

    def append(self, owner: str, kitty_id: int) -> None:
        _check_key(kitty_id)
        head = self.read_head(owner)
        self.write_head(owner, KittyLinkedItem(prev=kitty_id, next=head.next))

        # head.prev is None on an empty list: this re-reads the head just written
        prev = self.read(owner, head.prev)
        self.write(owner, head.prev, KittyLinkedItem(prev=prev.prev, next=kitty_id))

        self.write(owner, kitty_id, KittyLinkedItem(prev=head.prev, next=None))

    def remove(self, owner: str, kitty_id: int) -> None:
        _check_key(kitty_id)
        item = self.storage.take_link(owner, kitty_id)
        if item is None:
            return

        prev = self.read(owner, item.prev)
        self.write(owner, item.prev, KittyLinkedItem(prev=prev.prev, next=item.next))

        next_ = self.read(owner, item.next)
        self.write(owner, item.next, KittyLinkedItem(prev=item.prev, next=next_.next))

    def kitties_of(self, owner: str, newest_first: bool = True) -> List[int]:
        """Walk the owner's list from the sentinel.

        newest_first follows `prev` links (most recently appended first);
        otherwise `next` links are followed (oldest first).
        """
        kitties = []
        node = self.read_head(owner)
        key = node.prev if newest_first else node.next
        while key is not None:
            kitties.append(key)
            node = self.read(owner, key)
            key = node.prev if newest_first else node.next
        return kitties
