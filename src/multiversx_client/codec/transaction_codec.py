"""
Transaction Codec

Builds the binary form of a transaction that the network hashes to obtain
the transaction identifier. The field numbers and their order belong to the
network's transaction schema and must not change.
"""

import logging
from typing import TYPE_CHECKING

from .hashes import blake2b_256
from .numeric import serialize_value
from .writer import ProtoWriter
from ..runtime.errors import SerializationError

if TYPE_CHECKING:
    from ..transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionFields:
    """Field numbers of the network transaction message."""

    NONCE = 1
    VALUE = 2
    RCV_ADDR = 3
    SND_ADDR = 5
    GAS_PRICE = 7
    GAS_LIMIT = 8
    DATA = 9
    CHAIN_ID = 10
    VERSION = 11
    SIGNATURE = 12


class TransactionCodec:
    """Binary encoding and hashing of transactions."""

    @staticmethod
    def encode_for_hashing(tx: "Transaction") -> bytes:
        """
        Encode a transaction in the network's binary schema.

        The signature is part of the message once present. JSON formatting
        has no influence on the result.

        Args:
            tx: Transaction to encode

        Returns:
            Encoded message bytes

        Raises:
            SerializationError: If a field cannot be encoded
        """
        writer = ProtoWriter()
        try:
            writer.uint64_field(TransactionFields.NONCE, tx.nonce)
            writer.bytes_field(TransactionFields.VALUE, serialize_value(tx.value))
            writer.bytes_field(TransactionFields.RCV_ADDR, tx.receiver.pubkey())
            writer.bytes_field(TransactionFields.SND_ADDR, tx.sender.pubkey())
            writer.uint64_field(TransactionFields.GAS_PRICE, tx.gas_price)
            writer.uint64_field(TransactionFields.GAS_LIMIT, tx.gas_limit)
            writer.bytes_field(TransactionFields.DATA, tx.data.encode("utf-8"))
            writer.bytes_field(TransactionFields.CHAIN_ID, tx.chain_id.encode("utf-8"))
            writer.uint32_field(TransactionFields.VERSION, tx.VERSION)
            if tx.signature:
                writer.bytes_field(TransactionFields.SIGNATURE, bytes.fromhex(tx.signature))
        except ValueError as e:
            raise SerializationError(f"Cannot encode transaction: {e}", cause=e)

        return writer.to_bytes()

    @staticmethod
    def hash_transaction(tx: "Transaction") -> bytes:
        """Compute the 32-byte transaction hash."""
        encoded = TransactionCodec.encode_for_hashing(tx)
        digest = blake2b_256(encoded)
        logger.debug("Hashed %d encoded bytes -> %s", len(encoded), digest.hex())
        return digest
