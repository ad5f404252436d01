"""
Python RSA Limb Verifier Library

Verification of RSA PKCS#1v1.5 / SHA-256 signatures with every integer held as
a fixed-width limb sequence, the representation used by arithmetic circuits.

The library is built in three layers:
- big_uint: conversion between integers and limbs, and limb arithmetic
- rsa / chip: public key and signature values, and the backend checking
  s^e mod n against the encoded digest on limbs
- verifier: hashing, digest packing and the verify() entry point
"""

from .big_uint import (
    BN254_SCALAR_MODULUS,
    AssignedBigUint,
    BigUintConfig,
    Context,
    UnknownWitnessError,
    compose_limbs,
    decompose_bigint,
    decompose_biguint,
)

from .rsa import (
    FixedExponent,
    VariableExponent,
    AssignedVariableExponent,
    RSAPublicKey,
    AssignedRSAPublicKey,
    RSASignature,
    AssignedRSASignature,
)

from .chip import (
    DEFAULT_BITS_LEN,
    DEFAULT_E,
    DEFAULT_EXP_BITS,
    DEFAULT_LIMB_BITS,
    ConstraintBackend,
    RSAConfig,
)

from .crypto import (
    HashOracle,
    HashResult,
    Hasher,
    Sha256Config,
)

from .verifier import (
    RSASignatureVerifier,
    instance_values,
    verify,
)

__version__ = "0.1.0"

__all__ = [
    # Limb codec and arithmetic
    "BN254_SCALAR_MODULUS",
    "AssignedBigUint",
    "BigUintConfig",
    "Context",
    "UnknownWitnessError",
    "compose_limbs",
    "decompose_bigint",
    "decompose_biguint",

    # Keys and signatures
    "FixedExponent",
    "VariableExponent",
    "AssignedVariableExponent",
    "RSAPublicKey",
    "AssignedRSAPublicKey",
    "RSASignature",
    "AssignedRSASignature",

    # Constraint backend
    "DEFAULT_BITS_LEN",
    "DEFAULT_E",
    "DEFAULT_EXP_BITS",
    "DEFAULT_LIMB_BITS",
    "ConstraintBackend",
    "RSAConfig",

    # Hashing
    "HashOracle",
    "HashResult",
    "Hasher",
    "Sha256Config",

    # Verification
    "RSASignatureVerifier",
    "instance_values",
    "verify",
]
