"""
Binary transaction encoding and hash tests.

Expected messages are assembled field by field from the network schema
(Nonce=1, Value=2, RcvAddr=3, SndAddr=5, GasPrice=7, GasLimit=8, Data=9,
ChainID=10, Version=11, Signature=12).
"""

import hashlib

import pytest

from multiversx_client import Transaction
from multiversx_client.codec import TransactionCodec, blake2b_256
from multiversx_client.runtime.errors import SerializationError


def _uvarint(v):
    out = bytearray()
    while v >= 0x80:
        out.append((v & 0x7F) | 0x80)
        v >>= 7
    out.append(v)
    return bytes(out)


def _expected_message(alice, bob, signature=b"", data=b""):
    message = b"\x08\x07"
    message += b"\x12\x08" + bytes.fromhex("0de0b6b3a7640000")
    message += b"\x1a\x20" + bob.pubkey()
    message += b"\x2a\x20" + alice.pubkey()
    message += b"\x38" + _uvarint(1_000_000_000)
    message += b"\x40" + _uvarint(50_000)
    if data:
        message += b"\x4a" + _uvarint(len(data)) + data
    message += b"\x52\x01" + b"1"
    message += b"\x58\x01"
    if signature:
        message += b"\x62" + _uvarint(len(signature)) + signature
    return message


@pytest.fixture
def transfer(alice, bob):
    return Transaction(
        nonce=7,
        value=10**18,
        sender=alice,
        receiver=bob,
        gas_price=1_000_000_000,
        gas_limit=50_000,
        chain_id="1",
    )


class TestBinaryEncoding:

    def test_unsigned_message(self, transfer, alice, bob):
        assert TransactionCodec.encode_for_hashing(transfer) == _expected_message(alice, bob)

    def test_signature_appended(self, transfer, alice, bob):
        signature = bytes(range(64))
        transfer.signature = signature.hex()
        assert TransactionCodec.encode_for_hashing(transfer) == _expected_message(alice, bob, signature)

    def test_data_raw_utf8(self, transfer, alice, bob):
        transfer.data = "héllo"
        expected = _expected_message(alice, bob, data="héllo".encode("utf-8"))
        assert TransactionCodec.encode_for_hashing(transfer) == expected

    def test_zero_value_and_nonce_omitted(self, alice, bob):
        tx = Transaction(sender=alice, receiver=bob, gas_price=1, gas_limit=1, chain_id="T")
        encoded = TransactionCodec.encode_for_hashing(tx)
        assert not encoded.startswith(b"\x08")
        assert b"\x12" != encoded[:1]
        assert encoded.startswith(b"\x1a\x20")

    def test_independent_of_json_key_order(self, alice, bob):
        first = Transaction(nonce=1, value=5, sender=alice, receiver=bob, chain_id="T", data="x")
        second = Transaction(data="x", chain_id="T", receiver=bob, sender=alice, value=5, nonce=1)
        assert TransactionCodec.encode_for_hashing(first) == TransactionCodec.encode_for_hashing(second)


class TestHashing:

    def test_blake2b_256(self):
        assert blake2b_256(b"abc") == hashlib.blake2b(b"abc", digest_size=32).digest()
        assert len(blake2b_256(b"")) == 32

    def test_compute_hash_matches_message_digest(self, transfer, alice, bob):
        expected = hashlib.blake2b(_expected_message(alice, bob), digest_size=32).hexdigest()
        assert transfer.compute_hash() == expected
        assert transfer.tx_hash == expected

    def test_compute_hash_deterministic(self, transfer):
        assert transfer.compute_hash() == transfer.compute_hash()

    def test_signature_changes_hash(self, transfer):
        unsigned = transfer.compute_hash()
        transfer.signature = "ab" * 64
        assert transfer.compute_hash() != unsigned

    def test_hash_length(self, transfer):
        assert len(bytes.fromhex(transfer.compute_hash())) == 32

    def test_hash_does_not_touch_network(self, transfer):
        # No provider is involved; hashing works on a never-sent transaction
        assert transfer.tx_hash == ""
        transfer.compute_hash()
        assert transfer.signature == ""


class TestEncodingErrors:

    def test_negative_value_bypassing_validation(self, alice, bob):
        tx = Transaction.model_construct(
            nonce=1, value=-1, sender=alice, receiver=bob, gas_price=1, gas_limit=1,
            data="", chain_id="T", signature="", tx_hash="",
        )
        with pytest.raises(SerializationError):
            TransactionCodec.encode_for_hashing(tx)

    def test_gas_out_of_range(self, alice, bob):
        tx = Transaction.model_construct(
            nonce=1, value=0, sender=alice, receiver=bob, gas_price=2**64, gas_limit=1,
            data="", chain_id="T", signature="", tx_hash="",
        )
        with pytest.raises(SerializationError):
            TransactionCodec.encode_for_hashing(tx)
