from __future__ import annotations
from contextlib import contextmanager
from typing import Optional, Dict, Any, List, Tuple
import json, sqlite3, os
from kitties_core.logger import get_logger
from kitties_core.storage.provider import StorageProvider
from kitties_core.storage.models import Kitty, KittyLinkedItem

log = get_logger("Kitties.Storage.SQLite")

# kitty_key column value for the sentinel head (key None); ids are unsigned
HEAD_KEY = -1


def _to_key(key: Optional[int]) -> int:
    return HEAD_KEY if key is None else key


class SQLiteStorage(StorageProvider):
    def __init__(self, path="db/kitties_state.db"):
        # If no directory, default to current working directory
        dir_path = os.path.dirname(path) or "."
        os.makedirs(dir_path, exist_ok=True)
        self.db = sqlite3.connect(path, check_same_thread=False)
        self._tx_depth = 0

        self._init()
        log.info(f"[SQLITE] opened {path}")

    def _init(self) -> None:
        c = self.db.cursor()

        c.execute("""CREATE TABLE IF NOT EXISTS kitties(
            kitty_id INTEGER PRIMARY KEY,
            dna BLOB NOT NULL
        )""")
        c.execute("""CREATE TABLE IF NOT EXISTS kitties_count(
            id INTEGER PRIMARY KEY CHECK (id = 1),
            value INTEGER NOT NULL
        )""")
        c.execute("""CREATE TABLE IF NOT EXISTS owned_kitties(
            owner TEXT NOT NULL,
            kitty_key INTEGER NOT NULL,
            prev INTEGER,
            next INTEGER,
            PRIMARY KEY (owner, kitty_key)
        )""")
        c.execute("""CREATE TABLE IF NOT EXISTS audit(
            ts TEXT,
            event_type TEXT,
            payload TEXT
        )""")

        self.db.commit()

    def _commit(self) -> None:
        # writes inside transaction() are committed once, at the end of the block
        if not self._tx_depth:
            self.db.commit()

    # --- kitties ---

    def get_kitty(self, kitty_id: int) -> Optional[Kitty]:
        cur = self.db.execute("SELECT dna FROM kitties WHERE kitty_id=?", (kitty_id,))
        row = cur.fetchone()
        if not row: return None
        return Kitty(bytes(row[0]))

    def insert_kitty(self, kitty_id: int, kitty: Kitty) -> None:
        self.db.execute(
            "INSERT INTO kitties(kitty_id,dna) VALUES(?,?) "
            "ON CONFLICT(kitty_id) DO UPDATE SET dna=excluded.dna",
            (kitty_id, kitty.dna)
        )
        self._commit()

    def contains_kitty(self, kitty_id: int) -> bool:
        cur = self.db.execute("SELECT 1 FROM kitties WHERE kitty_id=?", (kitty_id,))
        return cur.fetchone() is not None

    # --- counter cell ---

    def get_kitties_count(self) -> int:
        cur = self.db.execute("SELECT value FROM kitties_count WHERE id=1")
        row = cur.fetchone()
        return row[0] if row else 0

    def put_kitties_count(self, value: int) -> None:
        self.db.execute(
            "INSERT INTO kitties_count(id,value) VALUES(1,?) "
            "ON CONFLICT(id) DO UPDATE SET value=excluded.value",
            (value,)
        )
        self._commit()

    # --- ownership links ---

    def get_link(self, owner: str, key: Optional[int]) -> Optional[KittyLinkedItem]:
        cur = self.db.execute(
            "SELECT prev, next FROM owned_kitties WHERE owner=? AND kitty_key=?",
            (owner, _to_key(key)),
        )
        row = cur.fetchone()
        if not row: return None
        return KittyLinkedItem(prev=row[0], next=row[1])

    def insert_link(self, owner: str, key: Optional[int], item: KittyLinkedItem) -> None:
        self.db.execute(
            "INSERT INTO owned_kitties(owner,kitty_key,prev,next) VALUES(?,?,?,?) "
            "ON CONFLICT(owner,kitty_key) DO UPDATE SET prev=excluded.prev, next=excluded.next",
            (owner, _to_key(key), item.prev, item.next)
        )
        self._commit()

    def take_link(self, owner: str, key: Optional[int]) -> Optional[KittyLinkedItem]:
        item = self.get_link(owner, key)
        if item is None:
            return None
        self.db.execute(
            "DELETE FROM owned_kitties WHERE owner=? AND kitty_key=?",
            (owner, _to_key(key)),
        )
        self._commit()
        return item

    def contains_link(self, owner: str, key: Optional[int]) -> bool:
        cur = self.db.execute(
            "SELECT 1 FROM owned_kitties WHERE owner=? AND kitty_key=?",
            (owner, _to_key(key)),
        )
        return cur.fetchone() is not None

    # --- audit ---

    def log_event(self, event_type: str, payload: Dict[str, Any]) -> None:
        from kitties_core.utils import now_ts

        self.db.execute("INSERT INTO audit(ts,event_type,payload) VALUES(?,?,?)",
                        (now_ts(), event_type, json.dumps(payload, separators=(",", ":"), sort_keys=True)))
        self._commit()

    def list_events(self) -> List[Tuple[str, Dict[str, Any]]]:
        cur = self.db.execute("SELECT event_type, payload FROM audit ORDER BY rowid")
        return [(event_type, json.loads(payload)) for event_type, payload in cur.fetchall()]

    # --- transactions ---

    @contextmanager
    def transaction(self):
        if self._tx_depth:
            self._tx_depth += 1
            try:
                yield self
            finally:
                self._tx_depth -= 1
            return

        self._tx_depth = 1
        try:
            yield self
        except BaseException:
            self.db.rollback()
            log.debug("[SQLITE] transaction rolled back")
            raise
        else:
            self.db.commit()
        finally:
            self._tx_depth = 0

    def flush(self):
        self.db.commit()

    def close(self):
        self.db.close()
