"""
PKCS#1v1.5 message encoding for SHA-256 signatures
"""

from typing import Optional

# From https://www.rfc-editor.org/rfc/rfc3447#section-9.2
# DigestInfo encoding prefix for SHA256, including the 0x00 separator before it
SHA256_PFX = bytes.fromhex("003031300d060960864801650304020105000420")

# At least 8 bytes of 0xff padding are required
MIN_PADDING_LEN = 8


def pkcs1v15_encode(hash_input: bytes, modulus_byte_len: int) -> Optional[int]:
    """
    Build the integer an RSA public key operation must yield for a valid signature.

    Format: 0x00 0x01 [0xFF padding] 0x00 [DigestInfo prefix] [hash]

    Args:
        hash_input: SHA-256 digest of the signed message
        modulus_byte_len: Length of the RSA modulus in bytes

    Returns:
        The encoded message as an integer, or None if the modulus is too short
    """
    if modulus_byte_len - 2 - len(SHA256_PFX) - len(hash_input) < MIN_PADDING_LEN:
        return None

    encoded = bytearray(modulus_byte_len)

    # Place hash at the end
    hash_write_pos = modulus_byte_len - len(hash_input)
    encoded[hash_write_pos:] = hash_input

    # Place DigestInfo prefix before hash
    hash_write_pos -= len(SHA256_PFX)
    encoded[hash_write_pos:hash_write_pos + len(SHA256_PFX)] = SHA256_PFX

    # Fill with 0xFF padding, leaving the leading 0x00 0x01
    encoded[2:hash_write_pos] = b'\xff' * (hash_write_pos - 2)
    encoded[1] = 1

    return int.from_bytes(encoded, byteorder='big')


def validate_rsa(modulus: int, exponent: int, signature: int, hash_input: bytes) -> bool:
    """
    Validates an RSA signature over plain integers.

    This is the straightforward s^e mod n check, without any limb layout.

    Args:
        modulus: RSA modulus n
        exponent: RSA public exponent e
        signature: Signature as an integer
        hash_input: SHA-256 digest of the message that was signed

    Returns:
        True if signature is valid, False otherwise
    """
    if signature >= modulus:
        return False

    modulus_byte_len = (modulus.bit_length() + 7) // 8
    expected_hash = pkcs1v15_encode(hash_input, modulus_byte_len)
    if expected_hash is None or expected_hash >= modulus:
        return False

    # Verify signature by doing RSA public key operation: sig^exp mod modulus
    return pow(signature, exponent, modulus) == expected_hash
