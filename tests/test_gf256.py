"""Tests for GF(2^8) arithmetic (gf256.py)."""

import pytest
from isogf import gf256
from isogf.gf256 import (
    GF256_ONE,
    IRREDUCIBLE_POLY,
    _extend_bit,
    gf256_add,
    gf256_inv,
    gf256_mul,
    gf256_pow,
    gf256_sub,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def reference_mul(a: int, b: int) -> int:
    """Textbook shift-and-add multiplication with ordinary branches."""
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        if a & 0x100:
            a ^= IRREDUCIBLE_POLY
        b >>= 1
    return result


BOUNDARY_AND_INTERIOR = [0x00, 0x01, 0x02, 0x53, 0x80, 0xCA, 0xFE, 0xFF]


# ---------------------------------------------------------------------------
# Mask helper
# ---------------------------------------------------------------------------

class TestExtendBit:
    """_extend_bit spreads the low bit across the whole byte."""

    def test_set_bit(self):
        assert _extend_bit(1) == 0xFF

    def test_clear_bit(self):
        assert _extend_bit(0) == 0x00

    @pytest.mark.parametrize("value, expected", [
        (0b0000_0001, 0xFF),
        (0b0000_0000, 0x00),
        (0b1000_0100, 0x00),
        (0b0100_0100, 0x00),
        (0b1100_0101, 0xFF),
    ])
    def test_only_low_bit_matters(self, value, expected):
        assert _extend_bit(value) == expected

    def test_result_is_a_byte_for_every_input(self):
        for value in range(256):
            assert _extend_bit(value) in (0x00, 0xFF)


# ---------------------------------------------------------------------------
# Addition and subtraction
# ---------------------------------------------------------------------------

class TestGF256Addition:

    def test_known_sum(self):
        assert gf256_add(5, 12) == 9

    def test_known_difference(self):
        assert gf256_sub(32, 219) == 251

    def test_zero_is_identity(self):
        for a in range(256):
            assert gf256_add(a, 0) == a
            assert gf256_sub(a, 0) == a

    def test_every_element_is_self_inverse(self):
        for a in range(256):
            assert gf256_add(a, a) == 0

    def test_subtraction_equals_addition(self):
        for a in range(0, 256, 7):
            for b in range(256):
                assert gf256_sub(a, b) == gf256_add(a, b)

    def test_commutative_and_closed(self):
        for a in range(256):
            for b in range(256):
                s = gf256_add(a, b)
                assert s == gf256_add(b, a)
                assert 0 <= s <= 0xFF

    def test_associative(self):
        for a in range(0, 256, 17):
            for b in range(0, 256, 13):
                for c in range(0, 256, 11):
                    assert gf256_add(gf256_add(a, b), c) == gf256_add(a, gf256_add(b, c))


# ---------------------------------------------------------------------------
# Multiplication
# ---------------------------------------------------------------------------

class TestGF256Multiplication:

    @pytest.mark.parametrize("a, b, expected", [
        (175, 47, 83),
        (0x53, 0xCA, 0x01),
        (0x57, 0x83, 0xC1),
        # FIPS 197 Section 4.2.1
        (0x57, 0x01, 0x57),
        (0x57, 0x02, 0xAE),
        (0x57, 0x04, 0x47),
        (0x57, 0x08, 0x8E),
        (0x57, 0x10, 0x07),
        (0x57, 0x13, 0xFE),
    ])
    def test_known_products(self, a, b, expected):
        assert gf256_mul(a, b) == expected

    def test_matches_reference_for_all_pairs(self):
        for a in range(256):
            for b in range(256):
                assert gf256_mul(a, b) == reference_mul(a, b)

    def test_identity_and_absorption(self):
        for a in range(256):
            assert gf256_mul(a, GF256_ONE) == a
            assert gf256_mul(a, 0) == 0
            assert gf256_mul(0, a) == 0

    def test_commutative_and_closed(self):
        for a in range(256):
            for b in range(a, 256):
                p = gf256_mul(a, b)
                assert p == gf256_mul(b, a)
                assert 0 <= p <= 0xFF

    def test_associative(self):
        for a in range(0, 256, 15):
            for b in range(1, 256, 16):
                for c in range(3, 256, 29):
                    lhs = gf256_mul(gf256_mul(a, b), c)
                    rhs = gf256_mul(a, gf256_mul(b, c))
                    assert lhs == rhs

    def test_distributive(self):
        for a in range(0, 256, 9):
            for b in range(0, 256, 14):
                for c in range(5, 256, 23):
                    lhs = gf256_mul(a, gf256_add(b, c))
                    rhs = gf256_add(gf256_mul(a, b), gf256_mul(a, c))
                    assert lhs == rhs


# ---------------------------------------------------------------------------
# Multiplicative inverse
# ---------------------------------------------------------------------------

class TestGF256Inverse:

    @pytest.mark.parametrize("a, expected", [
        (0x01, 0x01),
        (0x02, 0x8D),
        (0x03, 0xF6),
        (0x04, 0xCB),
        (0x05, 0x52),
        (0x06, 0x7B),
        (0xFF, 0x1C),
        (110, 33),
    ])
    def test_known_inverses(self, a, expected):
        assert gf256_inv(a) == expected

    def test_zero_maps_to_zero(self):
        assert gf256_inv(0) == 0

    def test_round_trip_for_all_nonzero(self):
        for a in range(1, 256):
            inv = gf256_inv(a)
            assert 0 <= inv <= 0xFF
            assert gf256_mul(a, inv) == GF256_ONE

    def test_inverse_is_a_permutation(self):
        assert sorted(gf256_inv(a) for a in range(256)) == list(range(256))


# ---------------------------------------------------------------------------
# Exponentiation
# ---------------------------------------------------------------------------

class TestGF256Pow:

    def test_pow_zero(self):
        assert gf256_pow(0x53, 0) == GF256_ONE
        assert gf256_pow(0, 0) == GF256_ONE

    def test_pow_one(self):
        for a in range(256):
            assert gf256_pow(a, 1) == a

    def test_pow_consistency(self):
        a = 0x57
        assert gf256_pow(a, 2) == gf256_mul(a, a)
        assert gf256_pow(a, 4) == gf256_mul(gf256_pow(a, 2), gf256_pow(a, 2))
        assert gf256_pow(a, 5) == gf256_mul(gf256_pow(a, 4), a)

    def test_group_order(self):
        for a in range(1, 256):
            assert gf256_pow(a, 255) == GF256_ONE

    def test_pow_254_is_inverse(self):
        for a in range(256):
            assert gf256_pow(a, 254) == gf256_inv(a)

    def test_high_exponent_bits_ignored(self):
        assert gf256_pow(2, 256) == GF256_ONE
        for e in (0, 1, 7, 254, 255):
            assert gf256_pow(0x53, e | 0x100) == gf256_pow(0x53, e)


# ---------------------------------------------------------------------------
# Fixed cost: the amount of work never depends on operand values
# ---------------------------------------------------------------------------

class TestFixedCost:
    """Count primitive calls with instrumented wrappers."""

    @pytest.fixture
    def mask_calls(self, monkeypatch):
        calls = []
        original = gf256._extend_bit

        def counting(bit):
            calls.append(bit)
            return original(bit)

        monkeypatch.setattr(gf256, "_extend_bit", counting)
        return calls

    @pytest.fixture
    def mul_calls(self, monkeypatch):
        calls = []
        original = gf256.gf256_mul

        def counting(a, b):
            calls.append((a, b))
            return original(a, b)

        monkeypatch.setattr(gf256, "gf256_mul", counting)
        return calls

    def test_mul_mask_count(self, mask_calls):
        counts = set()
        for a in BOUNDARY_AND_INTERIOR:
            for b in BOUNDARY_AND_INTERIOR:
                mask_calls.clear()
                gf256.gf256_mul(a, b)
                counts.add(len(mask_calls))
        assert counts == {16}

    def test_inv_mask_count(self, mask_calls):
        counts = set()
        for a in BOUNDARY_AND_INTERIOR:
            mask_calls.clear()
            gf256.gf256_inv(a)
            counts.add(len(mask_calls))
        assert counts == {256 * 17}

    def test_inv_tries_every_candidate(self, mul_calls):
        for a in BOUNDARY_AND_INTERIOR:
            mul_calls.clear()
            gf256.gf256_inv(a)
            assert [x for _, x in mul_calls] == list(range(256))

    @pytest.mark.parametrize("exponent", [0, 1, 127, 128, 254, 255])
    def test_pow_mul_count(self, mul_calls, exponent):
        for base in BOUNDARY_AND_INTERIOR:
            mul_calls.clear()
            gf256.gf256_pow(base, exponent)
            assert len(mul_calls) == 16

    @pytest.mark.parametrize("exponent", [0, 1, 127, 128, 254, 255])
    def test_pow_mask_count(self, mask_calls, exponent):
        for base in BOUNDARY_AND_INTERIOR:
            mask_calls.clear()
            gf256.gf256_pow(base, exponent)
            # 16 multiplications of 16 masks each, plus one select per bit
            assert len(mask_calls) == 16 * 16 + 8
