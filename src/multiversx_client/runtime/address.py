"""
Address type for MultiversX accounts.

An address wraps a 32-byte public key and renders it in the bech32
human-readable form (``erd1...``).
"""

from typing import Any, Union

import bech32
from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .errors import AddressError

HRP = "erd"
PUBKEY_LENGTH = 32


class Address:
    """Account address. Also usable as a Pydantic field type."""

    def __init__(self, pubkey: bytes):
        if not isinstance(pubkey, (bytes, bytearray)):
            raise AddressError("Address public key must be bytes")
        if len(pubkey) != PUBKEY_LENGTH:
            raise AddressError(
                f"Address public key must be {PUBKEY_LENGTH} bytes, got {len(pubkey)}",
                details={"length": len(pubkey)},
            )
        self._pubkey = bytes(pubkey)

    @classmethod
    def from_pubkey(cls, pubkey: bytes) -> "Address":
        return cls(pubkey)

    @classmethod
    def from_hex(cls, value: str) -> "Address":
        """Create an address from the hex encoding of its public key."""
        try:
            pubkey = bytes.fromhex(value)
        except ValueError as e:
            raise AddressError(f"Invalid hex address: {value!r}", cause=e)
        return cls(pubkey)

    @classmethod
    def from_bech32(cls, value: str) -> "Address":
        """
        Decode a bech32 address.

        Raises:
            AddressError: On bad checksum, wrong prefix or wrong length
        """
        hrp, data = bech32.bech32_decode(value)
        if hrp is None or data is None:
            raise AddressError(f"Bad bech32 address: {value!r}")
        if hrp != HRP:
            raise AddressError(f"Unexpected address prefix {hrp!r}, expected {HRP!r}")

        decoded = bech32.convertbits(data, 5, 8, False)
        if decoded is None:
            raise AddressError(f"Cannot convert bech32 payload of {value!r}")
        return cls(bytes(decoded))

    @classmethod
    def zero(cls) -> "Address":
        """The well-known all-zero address."""
        return cls(bytes(PUBKEY_LENGTH))

    def pubkey(self) -> bytes:
        return self._pubkey

    def hex(self) -> str:
        return self._pubkey.hex()

    def bech32(self) -> str:
        """Render the checksum-encoded human-readable form."""
        data = bech32.convertbits(self._pubkey, 8, 5, True)
        if data is None:
            raise AddressError("Cannot convert public key to bech32 words")
        encoded = bech32.bech32_encode(HRP, data)
        if encoded is None:
            raise AddressError("Cannot encode address as bech32")
        return encoded

    def is_zero(self) -> bool:
        return self._pubkey == bytes(PUBKEY_LENGTH)

    def __str__(self) -> str:
        return self.bech32()

    def __repr__(self) -> str:
        return f"Address('{self.bech32()}')"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Address):
            return self._pubkey == other._pubkey
        return False

    def __hash__(self) -> int:
        return hash(self._pubkey)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a Pydantic CoreSchema that validates an Address."""
        return core_schema.no_info_before_validator_function(
            cls._validate,
            core_schema.is_instance_schema(cls),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.bech32()
            ),
        )

    @classmethod
    def _validate(cls, value: Union[str, bytes, "Address"]) -> "Address":
        """Validate and convert the input to an Address."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls.from_bech32(value)
            except AddressError as e:
                raise ValueError(str(e))
        if isinstance(value, (bytes, bytearray)):
            try:
                return cls(bytes(value))
            except AddressError as e:
                raise ValueError(str(e))
        raise ValueError(f"Invalid Address: {value!r}")
