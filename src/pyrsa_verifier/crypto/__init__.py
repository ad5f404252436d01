"""
Hashing and PKCS#1v1.5 encoding used by the signature verifier
"""

from .hash import DEFAULT_MAX_MSG_LEN, SHA256_DIGEST_LEN, HashOracle, HashResult, Hasher, Sha256Config
from .rsa import SHA256_PFX, pkcs1v15_encode, validate_rsa

__all__ = [
    'DEFAULT_MAX_MSG_LEN',
    'SHA256_DIGEST_LEN',
    'HashOracle',
    'HashResult',
    'Hasher',
    'Sha256Config',
    'SHA256_PFX',
    'pkcs1v15_encode',
    'validate_rsa',
]
