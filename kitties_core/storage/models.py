# kitties_core/storage/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from kitties_core.dna import DNA_LENGTH

# 2**32 - 1: identities live in an unsigned 32-bit space
MAX_KITTY_ID = 0xFFFFFFFF


@dataclass(frozen=True)
class Kitty:
    """
    Storage-level representation of a kitty record.

    Records are written once at create/breed time and never mutated.
    """
    dna: bytes

    def __post_init__(self):
        if not isinstance(self.dna, (bytes, bytearray)):
            raise ValueError("kitty dna must be bytes")
        if len(self.dna) != DNA_LENGTH:
            raise ValueError(f"kitty dna must be {DNA_LENGTH} bytes, got {len(self.dna)}")
        object.__setattr__(self, "dna", bytes(self.dna))


@dataclass(frozen=True)
class KittyLinkedItem:
    """
    One node of an owner's kitty list, keyed by (owner, Optional[kitty_id]).

    The node at key None is the owner's sentinel head: its `prev` names the
    most recently appended kitty and its `next` the oldest one. A None
    pointer anywhere refers back to that sentinel.
    """
    prev: Optional[int] = None
    next: Optional[int] = None
