"""
Reference constraint backend for RSA over limbs

RSAConfig checks the modular power x^e mod n and PKCS#1v1.5 signatures with
every intermediate value held as limbs of the configured BigUintConfig. Its
layout differs depending on whether the public exponent is fixed or variable:
a fixed exponent such as 65537 only needs the multiplications for its set bits.
"""

import logging
from typing import List, Protocol

from .big_uint import (
    AssignedBigUint,
    BigUintConfig,
    Context,
    UnknownWitnessError,
    compose_limbs,
    decompose_biguint,
)
from .crypto import SHA256_DIGEST_LEN, pkcs1v15_encode
from .rsa import (
    AssignedRSAPublicKey,
    AssignedRSASignature,
    AssignedVariableExponent,
    FixedExponent,
    RSAPublicKey,
    RSASignature,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMB_BITS = 64
DEFAULT_BITS_LEN = 2048
DEFAULT_EXP_BITS = 17
DEFAULT_E = 65537


class ConstraintBackend(Protocol):
    """Decides whether a limb-encoded signature is valid for limb-encoded digest"""

    biguint_config: BigUintConfig

    def verify_pkcs1v15_signature(self, ctx: Context, public_key: AssignedRSAPublicKey,
                                  hashed_limbs: List[int],
                                  signature: AssignedRSASignature) -> bool:
        ...


class RSAConfig:
    """
    Checks RSA relations on limbs

    Args:
        biguint_config: The integer representation to work in
        default_bits: Bit length of moduli and signatures
        exp_bits: Bit length of variable exponents
    """

    def __init__(self, biguint_config: BigUintConfig, default_bits: int = DEFAULT_BITS_LEN,
                 exp_bits: int = DEFAULT_EXP_BITS):
        if default_bits <= 0 or exp_bits <= 0:
            raise ValueError("Modulus and exponent bit lengths must be positive")
        self.biguint_config = biguint_config
        self.default_bits = default_bits
        self.exp_bits = exp_bits

    def assign_public_key(self, ctx: Context, public_key: RSAPublicKey) -> AssignedRSAPublicKey:
        """
        Assign the modulus as limbs, and a variable exponent as bits.

        Raises:
            ValueError: If the modulus or a variable exponent does not fit the configuration
        """
        n = self.biguint_config.assign_integer(ctx, public_key.n, self.default_bits)
        if isinstance(public_key.e, FixedExponent):
            return AssignedRSAPublicKey(n, public_key.e)

        e = public_key.e.value
        ctx.total_limbs += self.exp_bits
        if e is None:
            return AssignedRSAPublicKey(n, AssignedVariableExponent(None))
        if e < 0 or e.bit_length() > self.exp_bits:
            raise ValueError(f"Exponent does not fit in {self.exp_bits} bits")
        return AssignedRSAPublicKey(n, AssignedVariableExponent(decompose_biguint(e, self.exp_bits, 1)))

    def assign_signature(self, ctx: Context, signature: RSASignature) -> AssignedRSASignature:
        c = self.biguint_config.assign_integer(ctx, signature.c, self.default_bits)
        return AssignedRSASignature(c)

    def modpow_public_key(self, ctx: Context, x: AssignedBigUint,
                          public_key: AssignedRSAPublicKey) -> AssignedBigUint:
        """Compute x^e mod n for the given public key"""
        if isinstance(public_key.e, FixedExponent):
            return self._pow_mod_fixed_exp(ctx, x, public_key.e.value, public_key.n)
        else:
            return self._pow_mod_var_exp(ctx, x, public_key.e, public_key.n)

    def verify_pkcs1v15_signature(self, ctx: Context, public_key: AssignedRSAPublicKey,
                                  hashed_limbs: List[int],
                                  signature: AssignedRSASignature) -> bool:
        """
        Verify a pkcs1v15 signature over a SHA-256 digest given as limbs.

        Args:
            ctx: Context of the current call
            public_key: An assigned public key used for the verification
            hashed_limbs: The digest as limbs of this configuration, least significant first
            signature: A pkcs1v15 signature to be verified

        Returns:
            True if signature^e mod n equals the PKCS#1v1.5 encoding of the digest

        Raises:
            UnknownWitnessError: If the modulus or signature is unknown
        """
        limb_bits = self.biguint_config.limb_bits
        n = public_key.n.value()
        c = signature.c.value()
        if n is None or c is None:
            raise UnknownWitnessError("Cannot verify a signature without its witness values")

        if c >= n:
            logger.debug("Signature is not reduced modulo n")
            return False

        hash_value = compose_limbs(hashed_limbs, limb_bits)
        if hash_value < 0 or hash_value.bit_length() > SHA256_DIGEST_LEN * 8:
            raise ValueError("Hashed limbs do not hold a SHA-256 digest")
        hash_input = hash_value.to_bytes(SHA256_DIGEST_LEN, byteorder='big')

        encoded = pkcs1v15_encode(hash_input, (n.bit_length() + 7) // 8)
        if encoded is None or encoded >= n:
            logger.debug("Modulus of %d bits is too short for the digest encoding", n.bit_length())
            return False

        powed = self.modpow_public_key(ctx, signature.c, public_key)
        expected = self.biguint_config.assign_integer(ctx, encoded, public_key.n.num_limbs * limb_bits)
        return self.biguint_config.is_equal(ctx, powed, expected)

    def _pow_mod_fixed_exp(self, ctx: Context, x: AssignedBigUint, e: int,
                           n: AssignedBigUint) -> AssignedBigUint:
        biguint = self.biguint_config
        e_bits = decompose_biguint(e, e.bit_length(), 1)
        result = None
        squared = x
        for i, e_bit in enumerate(e_bits):
            if e_bit:
                result = squared if result is None else biguint.mul_mod(ctx, result, squared, n)
            if i != len(e_bits) - 1:
                squared = biguint.square_mod(ctx, squared, n)

        if result is None:
            # x^0
            return biguint.assign_integer(ctx, 1, n.num_limbs * biguint.limb_bits)
        return result

    def _pow_mod_var_exp(self, ctx: Context, x: AssignedBigUint, e: AssignedVariableExponent,
                         n: AssignedBigUint) -> AssignedBigUint:
        biguint = self.biguint_config
        if e.bits is None:
            raise UnknownWitnessError("Exponent bits are unknown")

        acc = biguint.assign_integer(ctx, 1, n.num_limbs * biguint.limb_bits)
        squared = x
        for i, e_bit in enumerate(e.bits):
            muled = biguint.mul_mod(ctx, acc, squared, n)
            acc = biguint.select(ctx, muled, acc, e_bit)
            if i != len(e.bits) - 1:
                squared = biguint.square_mod(ctx, squared, n)
        return acc
