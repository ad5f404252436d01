"""
Test cases for the limb codec and limb arithmetic
"""

import dataclasses
import random

import pytest

from pyrsa_verifier.big_uint import (
    BN254_SCALAR_MODULUS,
    AssignedBigUint,
    BigUintConfig,
    Context,
    UnknownWitnessError,
    compose_limbs,
    decompose_bigint,
    decompose_biguint,
    decompose_u64_digits_to_limbs,
)


def random_values(bits: int, count: int = 20):
    rng = random.Random(bits)
    return [rng.getrandbits(bits) for _ in range(count)]


def test_decompose_known_value():
    """A 128-bit value split into 32-bit limbs, least significant first"""
    value = 0x0123456789abcdeffedcba9876543210
    assert decompose_biguint(value, 4, 32) == [0x76543210, 0xfedcba98, 0x89abcdef, 0x01234567]
    assert decompose_biguint(value, 2, 64) == [0xfedcba9876543210, 0x0123456789abcdef]


def test_decompose_across_digit_boundary():
    """63-bit limbs splice the top bit of one 64-bit digit with the next digit"""
    value = (1 << 64) + 3
    assert decompose_biguint(value, 2, 63) == [3, 2]
    assert decompose_u64_digits_to_limbs([3, 1], 2, 63) == [3, 2]


@pytest.mark.parametrize("limb_bits", [1, 7, 8, 13, 32, 51, 63, 64, 65, 100, 127])
def test_round_trip(limb_bits):
    """Reassembling the limbs gives back the value when there are enough of them"""
    for value in random_values(2048):
        num_limbs = -(-2048 // limb_bits)
        limbs = decompose_biguint(value, num_limbs, limb_bits)
        assert len(limbs) == num_limbs
        assert all(0 <= limb < (1 << limb_bits) for limb in limbs)
        assert compose_limbs(limbs, limb_bits) == value, f"Round trip failed for {limb_bits}-bit limbs"


def test_boundary_widths_agree():
    """64, 63 and 65 bit limbs all describe the same value"""
    for value in random_values(1000, 5):
        for limb_bits in (63, 64, 65):
            limbs = decompose_biguint(value, 17, limb_bits)
            assert compose_limbs(limbs, limb_bits) == value


def test_zero_and_empty():
    assert decompose_biguint(0, 5, 64) == [0] * 5
    assert decompose_biguint(0, 3, 100) == [0] * 3
    assert decompose_biguint(12345, 0, 16) == []
    assert decompose_u64_digits_to_limbs([], 3, 10) == [0, 0, 0]


def test_zero_extension_and_truncation():
    """The limb count is honoured whatever the size of the value"""
    assert decompose_biguint(5, 4, 64) == [5, 0, 0, 0]
    assert decompose_biguint(1 << 70, 1, 64) == [0]
    assert decompose_biguint((1 << 130) - 1, 1, 100) == [(1 << 100) - 1]


def test_invalid_arguments():
    with pytest.raises(ValueError):
        decompose_biguint(1, 1, 128)
    with pytest.raises(ValueError):
        decompose_bigint(-1, 1, 200)
    with pytest.raises(ValueError):
        decompose_biguint(-1, 1, 64)


def test_signed_decomposition():
    """A negative value gives the negated limbs of its magnitude"""
    for value in random_values(300, 5):
        for limb_bits in (17, 64, 90):
            num_limbs = -(-300 // limb_bits)
            positive = decompose_biguint(value, num_limbs, limb_bits)
            assert decompose_bigint(value, num_limbs, limb_bits) == positive
            negative = decompose_bigint(-value, num_limbs, limb_bits)
            assert negative == [-x for x in positive]
            assert compose_limbs(negative, limb_bits) == -value


def test_signed_truncation():
    """Too few limbs keep only the low part of the magnitude, negated"""
    value = (1 << 200) + 5
    assert decompose_bigint(-value, 2, 64) == [-5, 0]
    assert compose_limbs(decompose_bigint(-value, 2, 64), 64) == -(value % (1 << 128))


def test_signed_decomposition_in_field():
    limbs = decompose_bigint(-((2 << 64) + 7), 3, 64, modulus=BN254_SCALAR_MODULUS)
    assert limbs == [BN254_SCALAR_MODULUS - 7, BN254_SCALAR_MODULUS - 2, 0]


def test_config_rejects_bad_width():
    with pytest.raises(ValueError):
        BigUintConfig(0)
    with pytest.raises(ValueError):
        BigUintConfig(128)


def test_assign_integer():
    config = BigUintConfig(32)
    ctx = config.new_context()
    assigned = config.assign_integer(ctx, 0xdeadbeefcafe, 100)
    assert assigned.num_limbs == 4
    assert assigned.limbs == (0xbeefcafe, 0xdead, 0, 0)
    assert assigned.value() == 0xdeadbeefcafe
    assert ctx.total_limbs == 4
    assert ctx.lookup_cells == 4

    with pytest.raises(ValueError):
        config.assign_integer(ctx, 1 << 100, 100)
    with pytest.raises(ValueError):
        config.assign_integer(ctx, -1, 100)


def test_assign_unknown():
    config = BigUintConfig(64)
    ctx = config.new_context()
    unknown = config.assign_integer(ctx, None, 2048)
    assert not unknown.is_known()
    assert unknown.value() is None
    assert unknown.num_limbs == 32

    known = config.assign_integer(ctx, 3, 2048)
    with pytest.raises(UnknownWitnessError):
        config.mul_mod(ctx, unknown, known, known)


def test_mul_mod_and_select():
    config = BigUintConfig(16)
    ctx = Context()
    n = config.assign_integer(ctx, 3233, 64)
    a = config.assign_integer(ctx, 1234, 64)
    b = config.assign_integer(ctx, 2500, 64)

    product = config.mul_mod(ctx, a, b, n)
    assert product.value() == (1234 * 2500) % 3233
    assert product.num_limbs == n.num_limbs
    assert config.square_mod(ctx, a, n).value() == (1234 * 1234) % 3233
    assert ctx.total_mul_mods == 2

    assert config.select(ctx, a, b, 1) is a
    assert config.select(ctx, a, b, 0) is b
    with pytest.raises(ValueError):
        config.select(ctx, a, b, 2)


def test_is_equal():
    config = BigUintConfig(8)
    ctx = config.new_context()
    a = config.assign_integer(ctx, 0x1234, 16)
    assert config.is_equal(ctx, a, AssignedBigUint([0x34, 0x12], 2, 8))
    assert not config.is_equal(ctx, a, AssignedBigUint([0x35, 0x12], 2, 8))
    with pytest.raises(ValueError):
        config.is_equal(ctx, a, AssignedBigUint([0x34, 0x12, 0], 3, 8))


def test_assigned_limbs_are_immutable():
    """Limbs given as a list are frozen into a tuple that cannot be edited in place"""
    config = BigUintConfig(8)
    ctx = config.new_context()
    source = [0x34, 0x12]
    assigned = AssignedBigUint(source, 2, 8)
    source[0] = 0
    assert assigned.limbs == (0x34, 0x12)
    assert assigned.value() == 0x1234

    with pytest.raises(TypeError):
        assigned.limbs[0] ^= 1
    assert config.is_equal(ctx, assigned, config.assign_integer(ctx, 0x1234, 16))

    replaced = dataclasses.replace(assigned, limbs=[0x35, 0x12])
    assert isinstance(replaced.limbs, tuple)
    assert replaced.value() == 0x1235
    assert AssignedBigUint(None, 2, 8).limbs is None
