from __future__ import annotations
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives import hashes
import os
from .utils import encode_seed_payload

DNA_SEED_LENGTH = 16
DNA_SEED_INFO = b"kitties-dna-v1"

"""
kitties_core.crypto
-------------------
Randomness and seed derivation for kitty DNA:

- RandomnessSource: external entropy capability (os.urandom by default)
- derive_dna_seed(): 16-byte seed bound to (entropy, owner, call index)
- dna_fingerprint(): short stable digest of a DNA payload for logs/display

The registry treats the source as a black box; no claim is made about its
statistical quality beyond what the host supplies.
"""


# --------- Randomness sources ----------
class RandomnessSource:
    def random_seed(self) -> bytes:
        raise NotImplementedError


class SystemRandomness(RandomnessSource):
    def __init__(self, size: int = 32):
        self.size = size

    def random_seed(self) -> bytes:
        return os.urandom(self.size)


# --------- Seed derivation ----------
def derive_dna_seed(random_seed: bytes, owner: str, call_index: int) -> bytes:
    """
    Derive a 16-byte DNA seed / breeding selector.

    The call index acts as a per-call salt so two draws against the same
    entropy value and owner still diverge.
    """
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=DNA_SEED_LENGTH,
        salt=call_index.to_bytes(8, "big"),
        info=DNA_SEED_INFO,
    )
    return hkdf.derive(encode_seed_payload(random_seed, owner, call_index))


def dna_fingerprint(dna: bytes) -> str:
    """
    Hex SHA-256 of a DNA payload, truncated to 32 chars for readability.
    """
    digest = hashes.Hash(hashes.SHA256())
    digest.update(dna)
    return digest.finalize().hex()[:32]
