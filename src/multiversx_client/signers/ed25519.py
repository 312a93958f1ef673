"""
Ed25519 signer.

Signs the UTF-8 canonical JSON of a transaction with an Ed25519 secret key,
using the ``cryptography`` library.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from ..runtime.address import Address
from ..runtime.errors import SigningError
from .signer import Signer

SEED_LENGTH = 32
SIGNATURE_LENGTH = 64


class Ed25519Signer(Signer):
    """Ed25519 signer bound to one secret key."""

    def __init__(self, private_key: Ed25519PrivateKey):
        self._private_key = private_key
        self._public_key_bytes = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )

    @classmethod
    def from_seed(cls, seed: bytes) -> Ed25519Signer:
        """
        Create a signer from a 32-byte secret seed.

        Raises:
            SigningError: If the seed has the wrong length
        """
        if len(seed) != SEED_LENGTH:
            raise SigningError(f"Ed25519 seed must be {SEED_LENGTH} bytes, got {len(seed)}")
        return cls(Ed25519PrivateKey.from_private_bytes(seed))

    @classmethod
    def from_hex(cls, hex_seed: str) -> Ed25519Signer:
        """Create a signer from the hex encoding of its seed."""
        try:
            seed = bytes.fromhex(hex_seed)
        except ValueError as e:
            raise SigningError(f"Invalid hex seed: {e}", cause=e)
        return cls.from_seed(seed)

    def public_key(self) -> bytes:
        return self._public_key_bytes

    def address(self) -> Address:
        return Address.from_pubkey(self._public_key_bytes)

    def sign(self, message: bytes) -> str:
        return self._private_key.sign(message).hex()

    def verify(self, signature_hex: str, message: bytes) -> bool:
        """Check a hex signature against a message."""
        try:
            signature = bytes.fromhex(signature_hex)
        except ValueError:
            return False
        if len(signature) != SIGNATURE_LENGTH:
            return False

        public_key = Ed25519PublicKey.from_public_bytes(self._public_key_bytes)
        try:
            public_key.verify(signature, message)
            return True
        except InvalidSignature:
            return False
