"""
Address encoding tests.
"""

import bech32
import pytest

from multiversx_client import Address, AddressError

from tests.helpers import ALICE_BECH32, ALICE_HEX


class TestAddressEncoding:
    """bech32 and hex forms."""

    def test_known_bech32(self):
        address = Address.from_hex(ALICE_HEX)
        assert address.bech32() == ALICE_BECH32

    def test_decode_known_bech32(self):
        address = Address.from_bech32(ALICE_BECH32)
        assert address.hex() == ALICE_HEX
        assert len(address.pubkey()) == 32

    def test_bech32_roundtrip(self):
        address = Address.from_pubkey(bytes(range(32)))
        assert Address.from_bech32(address.bech32()) == address

    def test_zero_address(self):
        zero = Address.zero()
        assert zero.is_zero()
        assert zero.pubkey() == bytes(32)
        assert zero.bech32().startswith("erd1qqqqqqqq")
        assert Address.from_bech32(zero.bech32()) == zero

    def test_str_is_bech32(self):
        address = Address.from_hex(ALICE_HEX)
        assert str(address) == ALICE_BECH32


class TestAddressErrors:
    """Malformed input raises AddressError."""

    def test_bad_checksum(self):
        broken = ALICE_BECH32[:-1] + ("q" if ALICE_BECH32[-1] != "q" else "p")
        with pytest.raises(AddressError):
            Address.from_bech32(broken)

    def test_wrong_prefix(self):
        address = Address.from_hex(ALICE_HEX)
        words = bech32.convertbits(address.pubkey(), 8, 5, True)
        other = bech32.bech32_encode("abc", words)
        with pytest.raises(AddressError):
            Address.from_bech32(other)

    def test_wrong_length(self):
        with pytest.raises(AddressError):
            Address.from_pubkey(b"\x01" * 20)

    def test_bad_hex(self):
        with pytest.raises(AddressError):
            Address.from_hex("zz")
