import pytest
from kitties_core.dna import combine_dna, breed_dna, DNA_LENGTH


def test_combine_dna_selects_bits():
    assert combine_dna(0b10101010, 0b01010101, 0b11110000) == 0b10100101


def test_combine_dna_extremes():
    assert combine_dna(0xAB, 0xCD, 0xFF) == 0xAB
    assert combine_dna(0xAB, 0xCD, 0x00) == 0xCD


def test_breed_dna_is_deterministic():
    dna1 = bytes(range(DNA_LENGTH))
    dna2 = bytes(range(255, 255 - DNA_LENGTH, -1))
    selector = bytes([0b11110000] * DNA_LENGTH)

    child = breed_dna(dna1, dna2, selector)

    assert child == breed_dna(dna1, dna2, selector)
    assert len(child) == DNA_LENGTH
    assert all(c == combine_dna(a, b, 0b11110000) for a, b, c in zip(dna1, dna2, child))


def test_breed_dna_length_mismatch():
    with pytest.raises(ValueError):
        breed_dna(b"\x00" * 16, b"\x00" * 15, b"\x00" * 16)
