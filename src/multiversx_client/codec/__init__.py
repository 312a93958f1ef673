"""
MultiversX Binary Codec Module

Key components:
- numeric.py: big integer <-> big-endian bytes
- writer.py: protobuf wire format writer
- transaction_codec.py: binary transaction encoding used for hashing
- hashes.py: BLAKE2b-256 helpers
"""

from .hashes import TRANSACTION_HASH_LENGTH, blake2b_256, blake2b_256_hex
from .numeric import big_int_from_bytes, big_int_to_bytes, serialize_value
from .transaction_codec import TransactionCodec, TransactionFields
from .writer import ProtoWriter

__all__ = [
    "ProtoWriter",
    "TransactionCodec",
    "TransactionFields",
    "TRANSACTION_HASH_LENGTH",
    "blake2b_256",
    "blake2b_256_hex",
    "big_int_from_bytes",
    "big_int_to_bytes",
    "serialize_value",
]
