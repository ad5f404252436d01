"""
RSA public keys and signatures, before and after limb assignment

A value that is not known yet (the "without witness" case) is held as None.
The public exponent is either fixed, which lets the backend use a cheaper
exponentiation with a known bit pattern, or variable and supplied as a witness.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .big_uint import AssignedBigUint


@dataclass(frozen=True)
class FixedExponent:
    """A public exponent fixed at configuration time"""
    value: int


@dataclass(frozen=True)
class VariableExponent:
    """A public exponent supplied as a witness"""
    value: Optional[int] = None


@dataclass(frozen=True)
class AssignedVariableExponent:
    """A variable exponent decomposed into single-bit limbs, least significant first"""
    bits: Optional[Tuple[int, ...]]

    def __post_init__(self):
        if self.bits is not None:
            object.__setattr__(self, 'bits', tuple(self.bits))


RSAPubE = Union[FixedExponent, VariableExponent]

AssignedRSAPubE = Union[FixedExponent, AssignedVariableExponent]


@dataclass(frozen=True)
class RSAPublicKey:
    """
    RSA public key that is about to be assigned

    Attributes:
        n: The modulus, None if not known yet
        e: The exponent, fixed or variable
    """
    n: Optional[int]
    e: RSAPubE

    @classmethod
    def without_witness(cls, fix_e: int) -> 'RSAPublicKey':
        """Create a key template with an unknown modulus and a fixed exponent"""
        return cls(None, FixedExponent(fix_e))


@dataclass(frozen=True)
class AssignedRSAPublicKey:
    """An RSA public key whose modulus has been assigned as limbs"""
    n: AssignedBigUint
    e: AssignedRSAPubE


@dataclass(frozen=True)
class RSASignature:
    """RSA signature that is about to be assigned, c is None if not known yet"""
    c: Optional[int]

    @classmethod
    def without_witness(cls) -> 'RSASignature':
        return cls(None)


@dataclass(frozen=True)
class AssignedRSASignature:
    c: AssignedBigUint
