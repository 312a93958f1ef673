"""
Binary Writer - protobuf wire format

Implements the subset of the protobuf wire format used by the network's
transaction schema: varint scalars and length-delimited byte strings, each
preceded by a field key. Fields holding their zero value are skipped, the
same as proto3 encoders do.
"""

from typing import List

WIRE_VARINT = 0
WIRE_LENGTH_DELIMITED = 2

MAX_UINT64 = 0xFFFFFFFFFFFFFFFF
MAX_UINT32 = 0xFFFFFFFF


class ProtoWriter:
    """
    Append-only writer producing protobuf encoded bytes.

    Callers must emit fields in ascending field-number order; the writer
    does not reorder.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """Write a single byte."""
        self._bb.append(v & 0xFF)

    def bytes(self, v: bytes) -> None:
        """
        Write raw bytes without length prefix.

        Args:
            v: Bytes to write directly
        """
        self._bb.extend(v)

    def uvarint(self, v: int) -> None:
        """
        Write unsigned varint in ULEB128 format.

        Args:
            v: Unsigned integer value to encode as varint

        Raises:
            ValueError: If the value does not fit in 64 bits
        """
        if v < 0 or v > MAX_UINT64:
            raise ValueError(f"Value out of uint64 range: {v}")
        x = v
        while x >= 0x80:
            self.u8((x & 0x7F) | 0x80)
            x >>= 7
        self.u8(x)

    def tag(self, field: int, wire_type: int) -> None:
        """Write a field key: ``(field << 3) | wire_type``."""
        if field < 1:
            raise ValueError(f"Field number must be positive: {field}")
        self.uvarint((field << 3) | wire_type)

    def uint64_field(self, field: int, v: int) -> None:
        """Write a uint64 field, omitted when zero."""
        if v == 0:
            return
        self.tag(field, WIRE_VARINT)
        self.uvarint(v)

    def uint32_field(self, field: int, v: int) -> None:
        """Write a uint32 field, omitted when zero."""
        if v < 0 or v > MAX_UINT32:
            raise ValueError(f"Value out of uint32 range: {v}")
        self.uint64_field(field, v)

    def bytes_field(self, field: int, v: bytes) -> None:
        """Write a length-delimited bytes field, omitted when empty."""
        if not v:
            return
        self.tag(field, WIRE_LENGTH_DELIMITED)
        self.uvarint(len(v))
        self.bytes(v)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
