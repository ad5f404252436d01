"""
Shared RSA material for the tests, generated and signed with the cryptography package
"""

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

# The message signed throughout the tests
MSG = bytes(128)


def sign(private_key, msg: bytes) -> int:
    """Sign msg with RSA PKCS#1 v1.5 and SHA-256, returning the signature as an integer"""
    signature = private_key.sign(msg, padding.PKCS1v15(), hashes.SHA256())
    return int.from_bytes(signature, byteorder='big')


def sha256(msg: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(msg)
    return digest.finalize()


@pytest.fixture(scope="session")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def modulus(private_key) -> int:
    return private_key.public_key().public_numbers().n


@pytest.fixture(scope="session")
def signature(private_key) -> int:
    return sign(private_key, MSG)
