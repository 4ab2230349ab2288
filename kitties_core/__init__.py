"""
Kitties Core Package
====================
Minimal entity registry: unique kitty identities, per-owner ownership index,
transfers and breeding.

Provides:
- Kitty / KittyLinkedItem storage models
- Pluggable key-value storage interface (SQLite default, in-memory for tests)
- Ownership index as an intrusive linked list over the key-value store
- KittiesRegistry with create / transfer / breed
"""

from kitties_core.errors import (
    KittiesError,
    CounterOverflow,
    NotFound,
    IdenticalParents,
    NotOwner,
)
from kitties_core.registry import KittiesRegistry, load_registry

__all__ = [
    "KittiesError",
    "CounterOverflow",
    "NotFound",
    "IdenticalParents",
    "NotOwner",
    "KittiesRegistry",
    "load_registry",
]
