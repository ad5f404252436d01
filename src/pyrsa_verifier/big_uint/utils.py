"""
Conversions between arbitrary-precision integers and fixed-width limb sequences

Limbs are ordered from least to most significant, so that
sum(limb[i] << (i * limb_bits_len)) gives back the original value whenever
number_of_limbs * limb_bits_len bits are enough to hold it. When they are not,
the decomposition silently truncates; sizing the limb count is up to the caller.
"""

from typing import Iterable, Iterator, List, Optional

# Scalar field of BN254, the field limbs usually live in
BN254_SCALAR_MODULUS = 0x30644e72e131a029b85045b68181585d2833e84879b9709143e1f593f0000001

U64_BITS = 64
U64_MASK = (1 << U64_BITS) - 1

# Widths at or above this are rejected outright
MAX_LIMB_BITS = 128


def decompose_bigint(e: int, number_of_limbs: int, limb_bits_len: int,
                     modulus: Optional[int] = None) -> List[int]:
    """
    Decompose a signed integer into limbs.

    A negative value is decomposed by magnitude and every limb negated, so the
    limbs carry the sign themselves. If a field modulus is given each limb is
    reduced into it, turning negative limbs into their field representatives.
    """
    if e < 0:
        limbs = [-x for x in decompose_biguint(-e, number_of_limbs, limb_bits_len)]
    else:
        limbs = decompose_biguint(e, number_of_limbs, limb_bits_len)

    if modulus is not None:
        limbs = [x % modulus for x in limbs]
    return limbs


def decompose_biguint(e: int, number_of_limbs: int, limb_bits_len: int) -> List[int]:
    """
    Decompose a non-negative integer into exactly number_of_limbs limbs.

    Args:
        e: The integer to decompose
        number_of_limbs: Number of limbs to produce (zero padded or truncated)
        limb_bits_len: Bit width of each limb, must be below 128

    Returns:
        List of limbs, least significant first

    Raises:
        ValueError: If e is negative or limb_bits_len is 128 or more
    """
    if limb_bits_len >= MAX_LIMB_BITS:
        raise ValueError(f"Limb width must be below {MAX_LIMB_BITS} bits, got {limb_bits_len}")
    if e < 0:
        raise ValueError("Cannot decompose a negative value as unsigned")

    if limb_bits_len <= U64_BITS:
        return decompose_u64_digits_to_limbs(_to_u64_digits(e), number_of_limbs, limb_bits_len)
    else:
        return _decompose_wide(e, number_of_limbs, limb_bits_len)


def decompose_u64_digits_to_limbs(e: Iterable[int], number_of_limbs: int,
                                  bit_len: int) -> List[int]:
    """
    Repack a little-endian stream of 64-bit digits into bit_len-wide limbs.

    Missing digits read as zero. bit_len must be at most 64.
    """
    digits = iter(e)
    mask = (1 << bit_len) - 1
    u64_digit = next(digits, 0)
    rem = U64_BITS
    limbs = []

    for _ in range(number_of_limbs):
        if rem > bit_len:
            limb = u64_digit & mask
            u64_digit >>= bit_len
            rem -= bit_len
        elif rem == bit_len:
            limb = u64_digit & mask
            u64_digit = next(digits, 0)
            rem = U64_BITS
        else:
            # Low rem bits come from this digit, the rest from the next one
            limb = u64_digit
            u64_digit = next(digits, 0)
            limb |= (u64_digit & ((1 << (bit_len - rem)) - 1)) << rem
            u64_digit >>= bit_len - rem
            rem += U64_BITS - bit_len
        limbs.append(limb)

    return limbs


def compose_limbs(limbs: Iterable[int], limb_bits_len: int) -> int:
    """Reassemble an integer from its limbs by positional weighted sum"""
    value = 0
    for i, limb in enumerate(limbs):
        value += limb << (i * limb_bits_len)
    return value


def _to_u64_digits(e: int) -> Iterator[int]:
    """Yield the 64-bit digits of e, least significant first (none for zero)"""
    while e:
        yield e & U64_MASK
        e >>= U64_BITS


def _decompose_wide(e: int, number_of_limbs: int, limb_bits_len: int) -> List[int]:
    mask = (1 << limb_bits_len) - 1
    limbs = []
    for _ in range(number_of_limbs):
        limbs.append(e & mask)
        e >>= limb_bits_len
    return limbs
