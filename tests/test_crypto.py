from kitties_core.crypto import SystemRandomness, derive_dna_seed, dna_fingerprint


def test_derive_dna_seed_is_16_bytes_and_deterministic():
    seed = derive_dna_seed(b"\x01" * 32, "alice", 1)
    assert len(seed) == 16
    assert seed == derive_dna_seed(b"\x01" * 32, "alice", 1)


def test_derive_dna_seed_binds_inputs():
    base = derive_dna_seed(b"\x01" * 32, "alice", 1)
    assert base != derive_dna_seed(b"\x02" * 32, "alice", 1)
    assert base != derive_dna_seed(b"\x01" * 32, "bob", 1)
    assert base != derive_dna_seed(b"\x01" * 32, "alice", 2)


def test_system_randomness():
    src = SystemRandomness()
    assert len(src.random_seed()) == 32
    assert src.random_seed() != src.random_seed()


def test_dna_fingerprint():
    fpr = dna_fingerprint(b"\x00" * 16)
    assert len(fpr) == 32
    assert fpr == dna_fingerprint(b"\x00" * 16)
