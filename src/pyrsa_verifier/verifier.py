"""
Verification of pkcs1v15 signatures over raw messages

RSASignatureVerifier hashes the message with SHA-256, repacks the digest into
the limb layout of the integer representation and hands it to a constraint
backend, which decides whether the signature matches. The digest is returned
alongside the result so that callers can bind it to other data.
"""

import logging
from typing import List, Optional, Tuple

from .big_uint import BigUintConfig, Context, UnknownWitnessError
from .chip import DEFAULT_EXP_BITS, DEFAULT_LIMB_BITS, ConstraintBackend, RSAConfig
from .crypto import DEFAULT_MAX_MSG_LEN, HashOracle, Sha256Config
from .rsa import AssignedRSAPublicKey, AssignedRSASignature, RSAPublicKey, RSASignature

logger = logging.getLogger(__name__)


class RSASignatureVerifier:
    """
    Verifies pkcs1v15 signatures with the SHA256 hash function

    Args:
        rsa_config: Backend checking the RSA relation, its limb width must be a
            whole number of bytes
        sha256_config: Oracle computing the message digest
    """

    def __init__(self, rsa_config: ConstraintBackend, sha256_config: HashOracle):
        if rsa_config.biguint_config.limb_bits % 8 != 0:
            raise ValueError("Limb width must be a multiple of 8 bits to pack digest bytes")
        self.rsa_config = rsa_config
        self.sha256_config = sha256_config

    def verify_pkcs1v15_signature(self, ctx: Context, public_key: AssignedRSAPublicKey,
                                  msg: bytes,
                                  signature: AssignedRSASignature) -> Tuple[bool, bytes]:
        """
        Given a RSA public key, signed message bytes, and a pkcs1v15 signature,
        verifies the signature with SHA256 hash function.

        Digest bytes that do not fill a whole limb are left out of the packed
        digest. With limb widths that divide 256 bits nothing is left out.

        Args:
            ctx: Context of the current call
            public_key: An assigned public key used for the verification
            msg: Signed message bytes
            signature: A pkcs1v15 signature to be verified

        Returns:
            Tuple of (is_valid, digest), with the digest in its usual byte order

        Raises:
            Any error of the hash oracle or the backend, unchanged
        """
        try:
            result = self.sha256_config.digest(msg)
        except Exception as e:
            logger.error("Signature verification failed at stage 'hash': %s", e, exc_info=True)
            raise

        hashed_bytes = bytearray(result.as_ref())
        hashed_bytes.reverse()
        bytes_bits = len(hashed_bytes) * 8
        limb_bits = self.rsa_config.biguint_config.limb_bits
        limb_bytes = limb_bits // 8

        # Each limb is the little-endian weighted sum of its bytes
        bases = [1 << (8 * i) for i in range(limb_bytes)]
        hashed_limbs = []
        for i in range(bytes_bits // limb_bits):
            left = hashed_bytes[limb_bytes * i:limb_bytes * (i + 1)]
            hashed_limbs.append(sum(byte * base for byte, base in zip(left, bases)))

        try:
            is_sign_valid = self.rsa_config.verify_pkcs1v15_signature(
                ctx, public_key, hashed_limbs, signature)
        except Exception as e:
            logger.error("Signature verification failed at stage 'relation': %s", e, exc_info=True)
            raise

        hashed_bytes.reverse()
        logger.debug("Verified signature: valid=%s, limbs=%d, mul_mods=%d, lookup cells=%d",
                     is_sign_valid, ctx.total_limbs, ctx.total_mul_mods, ctx.lookup_cells)
        return bool(is_sign_valid), bytes(hashed_bytes)


def verify(public_key: RSAPublicKey, msg: bytes, signature: RSASignature,
           limb_bits: int = DEFAULT_LIMB_BITS, bits_len: Optional[int] = None,
           exp_bits: int = DEFAULT_EXP_BITS, max_msg_len: int = DEFAULT_MAX_MSG_LEN,
           ctx: Optional[Context] = None) -> Tuple[bool, bytes]:
    """
    Verify a pkcs1v15/SHA-256 signature of msg under public_key.

    This is the main entry point. It assigns the key and signature as limbs of
    limb_bits bits and runs RSASignatureVerifier with the reference backend.

    Args:
        public_key: The RSA public key, with a known modulus
        msg: Signed message bytes, at most max_msg_len long
        signature: The signature, with a known value
        limb_bits: Limb width of the integer representation
        bits_len: Bit length of the modulus layout, by default the longer of
            the modulus and the signature rounded up to whole limbs
        exp_bits: Bit length allowed for a variable exponent
        max_msg_len: Longest message the hash oracle accepts
        ctx: Context to record the work in, a fresh one if not given

    Returns:
        Tuple of (is_valid, digest)
    """
    biguint_config = BigUintConfig(limb_bits)
    if bits_len is None:
        if public_key.n is None:
            raise UnknownWitnessError("Cannot size the modulus layout without a modulus")
        # A signature longer than the modulus must still fit, so that it fails the relation
        value_bits = public_key.n.bit_length()
        if signature.c is not None:
            value_bits = max(value_bits, signature.c.bit_length())
        bits_len = biguint_config.num_limbs(value_bits) * limb_bits
    rsa_config = RSAConfig(biguint_config, bits_len, exp_bits)
    verifier = RSASignatureVerifier(rsa_config, Sha256Config([max_msg_len]))

    if ctx is None:
        ctx = biguint_config.new_context()
    assigned_key = rsa_config.assign_public_key(ctx, public_key)
    assigned_signature = rsa_config.assign_signature(ctx, signature)
    return verifier.verify_pkcs1v15_signature(ctx, assigned_key, msg, assigned_signature)


def instance_values(public_key: AssignedRSAPublicKey, hashed_bytes: bytes) -> List[List[int]]:
    """
    The public values of a verification: modulus limbs and digest bytes

    These are what a proof of the verification exposes to its verifier.
    """
    if not public_key.n.is_known():
        raise UnknownWitnessError("Modulus limbs are unknown")
    return [list(public_key.n.limbs), list(hashed_bytes)]
