"""
kitties_core.registry
---------------------
KittiesRegistry: the three externally dispatched operations.

- create(caller)            -> new kitty id, owned by caller
- transfer(caller, to, id)  -> moves id from caller's list to `to`'s list
- breed(caller, id1, id2)   -> new kitty whose DNA mixes both parents

Callers are already authenticated; the host serializes calls. Every operation
runs inside one storage transaction and performs all of its checks before the
first write, so a failed call leaves the store untouched.

Breeding does not check who owns the parents: any caller may breed any two
existing kitties and becomes the owner of the child.
"""

from __future__ import annotations
from typing import List, Optional
import os

from kitties_core.crypto import RandomnessSource, SystemRandomness, derive_dna_seed, dna_fingerprint
from kitties_core.dna import breed_dna
from kitties_core.errors import IdenticalParents, KittiesError, NotFound, NotOwner
from kitties_core.logger import get_logger
from kitties_core.ownership import OwnedKitties
from kitties_core.records import RecordStore
from kitties_core.storage import load_storage_provider
from kitties_core.storage.models import Kitty, MAX_KITTY_ID
from kitties_core.storage.provider import StorageProvider

log = get_logger("Kitties.Registry")

EVENT_CREATED = "Created"
EVENT_TRANSFERRED = "Transferred"


class KittiesRegistry:
    def __init__(
        self,
        storage: StorageProvider,
        randomness: Optional[RandomnessSource] = None,
        max_kitty_id: int = MAX_KITTY_ID,
    ):
        self.storage = storage
        self.randomness = randomness or SystemRandomness()
        self.records = RecordStore(storage, max_kitty_id=max_kitty_id)
        self.owned = OwnedKitties(storage)
        # per-call salt for seed derivation
        self._call_index = 0

    # ------------------------------------------------------------------
    # Dispatchable operations
    # ------------------------------------------------------------------
    def create(self, caller: str) -> int:
        try:
            with self.storage.transaction():
                kitty_id = self.records.allocate_identity()
                kitty = Kitty(self.random_value(caller))
                self._insert_kitty(caller, kitty_id, kitty)
                self.storage.log_event(EVENT_CREATED, {"owner": caller, "kitty_id": kitty_id})
        except KittiesError as e:
            log.warning(f"[CREATE] rejected for {caller}: {e}")
            raise

        log.info(f"[CREATE] {caller} -> kitty {kitty_id} dna={dna_fingerprint(kitty.dna)}")
        return kitty_id

    def transfer(self, caller: str, to: str, kitty_id: int) -> None:
        try:
            with self.storage.transaction():
                if not self.records.is_valid_id(kitty_id) or not self.owned.contains(caller, kitty_id):
                    raise NotOwner(caller, kitty_id)
                self.owned.remove(caller, kitty_id)
                self.owned.append(to, kitty_id)
                self.storage.log_event(
                    EVENT_TRANSFERRED, {"from": caller, "to": to, "kitty_id": kitty_id}
                )
        except KittiesError as e:
            log.warning(f"[TRANSFER] rejected: {e}")
            raise

        log.info(f"[TRANSFER] kitty {kitty_id}: {caller} -> {to}")

    def breed(self, caller: str, kitty_id_1: int, kitty_id_2: int) -> int:
        try:
            with self.storage.transaction():
                kitty_id = self._do_breed(caller, kitty_id_1, kitty_id_2)
        except KittiesError as e:
            log.warning(f"[BREED] rejected for {caller}: {e}")
            raise

        log.info(f"[BREED] {caller} bred {kitty_id_1} x {kitty_id_2} -> kitty {kitty_id}")
        return kitty_id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def kitty(self, kitty_id: int) -> Optional[Kitty]:
        return self.records.get_record(kitty_id)

    def kitties_count(self) -> int:
        return self.records.count()

    def kitties_of(self, owner: str, newest_first: bool = True) -> List[int]:
        return self.owned.kitties_of(owner, newest_first=newest_first)

    def is_owner(self, owner: str, kitty_id: int) -> bool:
        return self.records.is_valid_id(kitty_id) and self.owned.contains(owner, kitty_id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def random_value(self, caller: str) -> bytes:
        self._call_index += 1
        return derive_dna_seed(self.randomness.random_seed(), caller, self._call_index)

    def _insert_kitty(self, owner: str, kitty_id: int, kitty: Kitty) -> None:
        self.records.insert_record(kitty_id, kitty)
        self.owned.append(owner, kitty_id)

    def _do_breed(self, caller: str, kitty_id_1: int, kitty_id_2: int) -> int:
        if kitty_id_1 == kitty_id_2:
            raise IdenticalParents(kitty_id_1)
        for parent_id in (kitty_id_1, kitty_id_2):
            if not self.records.is_valid_id(parent_id):
                raise NotFound(parent_id)

        kitty1 = self.records.get_record(kitty_id_1)
        if kitty1 is None:
            raise NotFound(kitty_id_1)
        kitty2 = self.records.get_record(kitty_id_2)
        if kitty2 is None:
            raise NotFound(kitty_id_2)

        kitty_id = self.records.allocate_identity()

        selector = self.random_value(caller)
        child = Kitty(breed_dna(kitty1.dna, kitty2.dna, selector))

        self._insert_kitty(caller, kitty_id, child)
        self.storage.log_event(
            EVENT_CREATED,
            {"owner": caller, "kitty_id": kitty_id, "parents": [kitty_id_1, kitty_id_2]},
        )
        return kitty_id


def load_registry(config: dict | None = None, randomness: Optional[RandomnessSource] = None) -> KittiesRegistry:
    """
    Build a registry from config / environment.

    Keys: provider, sqlite_path (see load_storage_provider), max_kitty_id
    (env KITTIES_MAX_KITTY_ID).
    """
    config = config or {}
    storage = load_storage_provider(config)
    max_kitty_id = config.get("max_kitty_id")
    if max_kitty_id is None:
        max_kitty_id = os.getenv("KITTIES_MAX_KITTY_ID")
    max_kitty_id = int(max_kitty_id) if max_kitty_id is not None else MAX_KITTY_ID
    return KittiesRegistry(storage, randomness=randomness, max_kitty_id=max_kitty_id)
