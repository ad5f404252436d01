"""
Limb representation of arbitrary-precision integers

The codec in utils converts integers to and from limb sequences, and config
provides the limb-level arithmetic the RSA checks are written against.
"""

from .utils import (
    BN254_SCALAR_MODULUS,
    compose_limbs,
    decompose_bigint,
    decompose_biguint,
    decompose_u64_digits_to_limbs,
)
from .config import AssignedBigUint, BigUintConfig, Context, UnknownWitnessError

__all__ = [
    'BN254_SCALAR_MODULUS',
    'compose_limbs',
    'decompose_bigint',
    'decompose_biguint',
    'decompose_u64_digits_to_limbs',
    'AssignedBigUint',
    'BigUintConfig',
    'Context',
    'UnknownWitnessError',
]
