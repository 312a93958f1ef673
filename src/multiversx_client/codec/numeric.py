"""
Numeric Codec

Encodes arbitrary-precision non-negative integers as big-endian byte strings.
"""

from ..runtime.errors import SerializationError


def big_int_to_bytes(value: int) -> bytes:
    """
    Encode a non-negative integer as minimal big-endian bytes.

    Zero encodes to the empty byte string; there is never a leading
    sign byte.

    Raises:
        SerializationError: If the value is negative
    """
    if value < 0:
        raise SerializationError(f"Cannot encode negative value: {value}")
    if value == 0:
        return b""
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def big_int_from_bytes(data: bytes) -> int:
    """Decode big-endian unsigned bytes; empty input decodes to 0."""
    return int.from_bytes(data, "big")


def serialize_value(value: int) -> bytes:
    """Encoding of the transaction ``value`` field in the binary form."""
    return big_int_to_bytes(value)
