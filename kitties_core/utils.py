"""
kitties_core.utils
------------------
Small helpers for timestamps and the canonical byte encoding used when
deriving DNA seeds.
"""

from __future__ import annotations
import struct, time


def now_ts() -> str:
    # RFC3339 / ISO 8601 in UTC, second precision
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def encode_bytes(b: bytes) -> bytes:
    # length-prefixed so adjacent fields cannot run into each other
    return struct.pack(">I", len(b)) + b


def encode_seed_payload(random_seed: bytes, owner: str, call_index: int) -> bytes:
    """Deterministic encoding of (random_seed, owner, call_index)."""
    return (
        encode_bytes(random_seed)
        + encode_bytes(owner.encode("utf-8"))
        + struct.pack(">Q", call_index)
    )
