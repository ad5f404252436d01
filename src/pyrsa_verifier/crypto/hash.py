"""
SHA-256 hashing for the signature verifier, with a bound on the input length.
"""

import hashlib
from typing import List, Optional, Protocol

# Digest length of SHA-256 in bytes
SHA256_DIGEST_LEN = 32

# Longest message accepted unless configured otherwise
DEFAULT_MAX_MSG_LEN = 1024


class HashResult:
    """Container for hash results that can return bytes via as_ref()"""

    def __init__(self, hash_bytes: bytes):
        self._bytes = hash_bytes

    def as_ref(self) -> bytes:
        """Return the hash bytes"""
        return self._bytes

    def __len__(self) -> int:
        return len(self._bytes)


class Hasher:
    """Incremental SHA-256 engine"""

    def __init__(self):
        self._hasher = hashlib.sha256()

    @classmethod
    def sha256(cls) -> 'Hasher':
        """Create a SHA256 hasher"""
        return cls()

    def update(self, data: bytes) -> None:
        """Update the hasher with new data"""
        self._hasher.update(data)

    def finish(self) -> HashResult:
        """Finalize the hash and return the result"""
        return HashResult(self._hasher.digest())


class HashOracle(Protocol):
    """Anything that can digest a message into a 32-byte SHA-256 result"""

    def digest(self, msg: bytes) -> HashResult:
        ...


class Sha256Config:
    """
    SHA-256 oracle accepting messages up to a configured length

    Several maximum sizes may be given. A message is accepted if it fits in
    any of them.
    """

    def __init__(self, max_byte_sizes: Optional[List[int]] = None):
        if max_byte_sizes is None:
            max_byte_sizes = [DEFAULT_MAX_MSG_LEN]
        if not max_byte_sizes or any(size <= 0 for size in max_byte_sizes):
            raise ValueError("Maximum message sizes must be positive")
        self.max_byte_sizes = sorted(max_byte_sizes)

    def max_msg_len(self) -> int:
        return self.max_byte_sizes[-1]

    def digest(self, msg: bytes) -> HashResult:
        """
        Hash msg with SHA-256.

        Raises:
            ValueError: If msg is longer than every configured size
        """
        if len(msg) > self.max_msg_len():
            raise ValueError(f"Message of {len(msg)} bytes exceeds the maximum of "
                             f"{self.max_msg_len()} bytes")
        hasher = Hasher.sha256()
        hasher.update(msg)
        return hasher.finish()
