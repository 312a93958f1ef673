"""
Numeric codec and protobuf writer tests.
"""

import pytest

from multiversx_client.codec import ProtoWriter, big_int_from_bytes, big_int_to_bytes
from multiversx_client.runtime.errors import SerializationError


class TestNumericCodec:
    """Big-endian encoding of non-negative integers."""

    def test_zero_is_empty(self):
        assert big_int_to_bytes(0) == b""

    @pytest.mark.parametrize("value,expected", [
        (1, b"\x01"),
        (255, b"\xff"),
        (256, b"\x01\x00"),
        (10**18, bytes.fromhex("0de0b6b3a7640000")),
    ])
    def test_minimal_big_endian(self, value, expected):
        assert big_int_to_bytes(value) == expected

    def test_no_sign_byte(self):
        # 0x80 would need a leading zero in two's complement
        assert big_int_to_bytes(0x80) == b"\x80"

    def test_beyond_64_bits(self):
        value = 2**100 + 7
        assert big_int_from_bytes(big_int_to_bytes(value)) == value

    def test_empty_decodes_to_zero(self):
        assert big_int_from_bytes(b"") == 0

    def test_negative_rejected(self):
        with pytest.raises(SerializationError):
            big_int_to_bytes(-1)


class TestProtoWriter:
    """Wire format primitives."""

    @pytest.mark.parametrize("value,expected", [
        (0, b"\x00"),
        (1, b"\x01"),
        (127, b"\x7f"),
        (128, b"\x80\x01"),
        (300, b"\xac\x02"),
    ])
    def test_uvarint(self, value, expected):
        writer = ProtoWriter()
        writer.uvarint(value)
        assert writer.to_bytes() == expected

    def test_uvarint_range(self):
        writer = ProtoWriter()
        with pytest.raises(ValueError):
            writer.uvarint(2**64)
        with pytest.raises(ValueError):
            writer.uvarint(-1)

    def test_zero_fields_omitted(self):
        writer = ProtoWriter()
        writer.uint64_field(1, 0)
        writer.bytes_field(2, b"")
        assert writer.to_bytes() == b""

    def test_uint64_field(self):
        writer = ProtoWriter()
        writer.uint64_field(1, 7)
        assert writer.to_bytes() == b"\x08\x07"

    def test_bytes_field(self):
        writer = ProtoWriter()
        writer.bytes_field(10, b"D")
        # key = (10 << 3) | 2 = 82
        assert writer.to_bytes() == b"\x52\x01D"

    def test_uint32_field_range(self):
        writer = ProtoWriter()
        with pytest.raises(ValueError):
            writer.uint32_field(11, 2**32)
