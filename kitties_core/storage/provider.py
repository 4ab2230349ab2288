# kitties_core/storage/provider.py
from __future__ import annotations
from typing import Optional, Dict, Any, ContextManager, List, Tuple

from kitties_core.storage.models import Kitty, KittyLinkedItem


class StorageProvider:
    """
    Key-value storage interface the registry is written against.

    Two independent key spaces (kitty_id -> Kitty, (owner, key) -> KittyLinkedItem)
    plus a single counter cell. Providers must make every write performed
    inside `transaction()` apply as a whole or not at all.
    """

    # kitties
    def get_kitty(self, kitty_id: int) -> Optional[Kitty]: ...
    def insert_kitty(self, kitty_id: int, kitty: Kitty) -> None: ...
    def contains_kitty(self, kitty_id: int) -> bool: ...

    # counter cell
    def get_kitties_count(self) -> int: ...
    def put_kitties_count(self, value: int) -> None: ...

    # ownership links
    def get_link(self, owner: str, key: Optional[int]) -> Optional[KittyLinkedItem]: ...
    def insert_link(self, owner: str, key: Optional[int], item: KittyLinkedItem) -> None: ...
    def take_link(self, owner: str, key: Optional[int]) -> Optional[KittyLinkedItem]: ...
    def contains_link(self, owner: str, key: Optional[int]) -> bool: ...

    # audit
    def log_event(self, event_type: str, payload: Dict[str, Any]) -> None: ...
    def list_events(self) -> List[Tuple[str, Dict[str, Any]]]: ...

    def transaction(self) -> ContextManager["StorageProvider"]:
        raise NotImplementedError

    def flush(self) -> None:
        return

    def close(self) -> None:
        return
