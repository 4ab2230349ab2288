from contextlib import contextmanager
from typing import Optional, Dict, Any
from kitties_core.storage.models import Kitty, KittyLinkedItem
from kitties_core.storage.provider import StorageProvider

# journal marker for "key did not exist before this transaction"
_ABSENT = object()


class InMemoryStorage(StorageProvider):
    def __init__(self):
        self.kitties = {}
        self.kitties_count = 0
        self.owned_kitties = {}
        self.audit = []
        self._tx_depth = 0
        self._journal = None

    def _remember(self, table: dict, key) -> None:
        # first write to a key inside a transaction records its prior value
        if self._journal is None:
            return
        touched = self._journal.setdefault(id(table), (table, {}))[1]
        if key not in touched:
            touched[key] = table.get(key, _ABSENT)

    # kitties
    def get_kitty(self, kitty_id: int) -> Optional[Kitty]:
        return self.kitties.get(kitty_id)

    def insert_kitty(self, kitty_id: int, kitty: Kitty):
        self._remember(self.kitties, kitty_id)
        self.kitties[kitty_id] = kitty

    def contains_kitty(self, kitty_id: int) -> bool:
        return kitty_id in self.kitties

    # counter cell
    def get_kitties_count(self) -> int:
        return self.kitties_count

    def put_kitties_count(self, value: int):
        self.kitties_count = value

    # ownership links
    def get_link(self, owner: str, key: Optional[int]):
        return self.owned_kitties.get((owner, key))

    def insert_link(self, owner: str, key: Optional[int], item: KittyLinkedItem):
        self._remember(self.owned_kitties, (owner, key))
        self.owned_kitties[(owner, key)] = item

    def take_link(self, owner: str, key: Optional[int]):
        self._remember(self.owned_kitties, (owner, key))
        return self.owned_kitties.pop((owner, key), None)

    def contains_link(self, owner: str, key: Optional[int]) -> bool:
        return (owner, key) in self.owned_kitties

    # audit
    def log_event(self, event_type: str, payload: Dict[str, Any]):
        self.audit.append((event_type, dict(payload)))

    def list_events(self):
        return list(self.audit)

    @contextmanager
    def transaction(self):
        # only the outermost block journals; nested blocks join it
        if self._tx_depth:
            self._tx_depth += 1
            try:
                yield self
            finally:
                self._tx_depth -= 1
            return

        count, audit_len = self.kitties_count, len(self.audit)
        self._journal = {}
        self._tx_depth = 1
        try:
            yield self
        except BaseException:
            self._rollback(count, audit_len)
            raise
        finally:
            self._journal = None
            self._tx_depth = 0

    def _rollback(self, count: int, audit_len: int) -> None:
        for table, touched in self._journal.values():
            for key, prior in touched.items():
                if prior is _ABSENT:
                    table.pop(key, None)
                else:
                    table[key] = prior
        self.kitties_count = count
        del self.audit[audit_len:]
