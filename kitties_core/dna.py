"""Byte-wise DNA combination for breeding."""

from __future__ import annotations

DNA_LENGTH = 16


def combine_dna(dna1: int, dna2: int, selector: int) -> int:
    # selector bit 1 -> take dna1's bit, 0 -> dna2's bit
    return ((selector & dna1) | (~selector & dna2)) & 0xFF


def breed_dna(dna1: bytes, dna2: bytes, selector: bytes) -> bytes:
    if not (len(dna1) == len(dna2) == len(selector)):
        raise ValueError(
            f"dna/selector length mismatch: {len(dna1)}, {len(dna2)}, {len(selector)}"
        )
    return bytes(combine_dna(a, b, s) for a, b, s in zip(dna1, dna2, selector))
