"""
Hash Functions

Transaction identifiers are BLAKE2b digests truncated to 32 bytes by
parameter (not by slicing), i.e. BLAKE2b-256.
"""

import hashlib

TRANSACTION_HASH_LENGTH = 32


def blake2b_256(input_bytes: bytes) -> bytes:
    """
    Compute the 32-byte BLAKE2b digest of input bytes.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        Digest as bytes (32 bytes)
    """
    return hashlib.blake2b(input_bytes, digest_size=TRANSACTION_HASH_LENGTH).digest()


def blake2b_256_hex(input_bytes: bytes) -> str:
    """Hex encoding of :func:`blake2b_256`."""
    return blake2b_256(input_bytes).hex()
