"""
Limb-level integer arithmetic

BigUintConfig fixes the limb width of the integer representation and offers the
operations the RSA checks are built from. Values are carried as AssignedBigUint
limb vectors. A vector may be unknown (its limbs are None) when it was assigned
without a witness, e.g. while deriving a verification template.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .utils import MAX_LIMB_BITS, compose_limbs, decompose_biguint


class UnknownWitnessError(ValueError):
    """Arithmetic was requested on a value that was assigned without a witness"""
    pass


@dataclass
class Context:
    """
    Per-call bookkeeping of the work done on limbs

    Owned by the caller, who reads it once a verification returns. Nothing in
    the library keeps a context across calls.
    """
    # Number of limbs assigned, including intermediate results
    total_limbs: int = 0

    # Number of modular multiplications and squarings
    total_mul_mods: int = 0

    # Number of limbs range checked against the limb width
    lookup_cells: int = 0


@dataclass(frozen=True)
class AssignedBigUint:
    """
    An integer held as a little-endian vector of limbs

    The limbs are stored as a tuple, so an assigned value cannot change after
    it has been range checked.
    """
    limbs: Optional[Tuple[int, ...]]
    num_limbs: int
    limb_bits: int = 64

    def __post_init__(self):
        if self.limbs is not None:
            object.__setattr__(self, 'limbs', tuple(self.limbs))

    def is_known(self) -> bool:
        return self.limbs is not None

    def value(self) -> Optional[int]:
        """The integer these limbs stand for, or None if unknown"""
        if self.limbs is None:
            return None
        return compose_limbs(self.limbs, self.limb_bits)


class BigUintConfig:
    """Integer representation with a fixed limb width"""

    def __init__(self, limb_bits: int = 64):
        if not 0 < limb_bits < MAX_LIMB_BITS:
            raise ValueError(f"Limb width must be between 1 and {MAX_LIMB_BITS - 1} bits")
        self.limb_bits = limb_bits

    def new_context(self) -> Context:
        return Context()

    def num_limbs(self, bits_len: int) -> int:
        """Number of limbs needed to hold bits_len bits"""
        return -(-bits_len // self.limb_bits)

    def assign_integer(self, ctx: Context, value: Optional[int], bits_len: int) -> AssignedBigUint:
        """
        Assign an integer of at most bits_len bits as limbs.

        Args:
            ctx: Context of the current call
            value: The integer, or None if not known yet
            bits_len: Maximum bit length of the integer

        Returns:
            The assigned limbs, range checked against the limb width

        Raises:
            ValueError: If value is negative or wider than bits_len
        """
        num_limbs = self.num_limbs(bits_len)
        ctx.total_limbs += num_limbs
        ctx.lookup_cells += num_limbs
        if value is None:
            return AssignedBigUint(None, num_limbs, self.limb_bits)

        if value < 0 or value.bit_length() > bits_len:
            raise ValueError(f"Value does not fit in {bits_len} bits")
        limbs = decompose_biguint(value, num_limbs, self.limb_bits)
        return AssignedBigUint(limbs, num_limbs, self.limb_bits)

    def mul_mod(self, ctx: Context, a: AssignedBigUint, b: AssignedBigUint,
                n: AssignedBigUint) -> AssignedBigUint:
        """Compute a * b mod n, laid out with as many limbs as n"""
        a_val, b_val, n_val = self._values(a, b, n)
        ctx.total_mul_mods += 1
        return self._assign_reduced(ctx, (a_val * b_val) % n_val, n)

    def square_mod(self, ctx: Context, a: AssignedBigUint, n: AssignedBigUint) -> AssignedBigUint:
        return self.mul_mod(ctx, a, a, n)

    def select(self, ctx: Context, a: AssignedBigUint, b: AssignedBigUint, bit: int) -> AssignedBigUint:
        """Pick a if bit is 1, b if it is 0"""
        if bit not in (0, 1):
            raise ValueError(f"Selector must be a bit, got {bit}")
        chosen = a if bit == 1 else b
        ctx.total_limbs += chosen.num_limbs
        return chosen

    def is_equal(self, ctx: Context, a: AssignedBigUint, b: AssignedBigUint) -> bool:
        """Limb-wise equality of two vectors of the same width"""
        self._values(a, b)
        if a.limb_bits != b.limb_bits or a.num_limbs != b.num_limbs:
            raise ValueError("Cannot compare integers with different limb layouts")
        ctx.total_limbs += 1
        return all(x == y for x, y in zip(a.limbs, b.limbs))

    def _assign_reduced(self, ctx: Context, value: int, n: AssignedBigUint) -> AssignedBigUint:
        ctx.total_limbs += n.num_limbs
        ctx.lookup_cells += n.num_limbs
        return AssignedBigUint(decompose_biguint(value, n.num_limbs, self.limb_bits),
                               n.num_limbs, self.limb_bits)

    @staticmethod
    def _values(*assigned: AssignedBigUint) -> List[int]:
        values = []
        for a in assigned:
            if not a.is_known():
                raise UnknownWitnessError("Limb values are unknown")
            values.append(a.value())
        return values
