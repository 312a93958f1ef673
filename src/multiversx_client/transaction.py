"""
Transaction model.

A transaction is a mutable record until it is sent. Its canonical JSON form
is what gets signed and submitted; its binary form is what gets hashed.
"""

from __future__ import annotations
import base64
import logging
from typing import Any, ClassVar, Dict, Optional, TYPE_CHECKING, Union

from pydantic import BaseModel, Field, field_validator

from .canonjson import dumps_ordered_bytes
from .codec.transaction_codec import TransactionCodec
from .codec.writer import MAX_UINT64
from .network_config import NetworkConfig
from .runtime.address import Address
from .runtime.errors import AddressError, SerializationError, SigningError

if TYPE_CHECKING:
    from .proxy.provider import Provider
    from .signers.signer import Signer

logger = logging.getLogger(__name__)


class Transaction(BaseModel):
    """
    A value transfer or contract call on the network.

    Gas price, gas limit and chain ID default to the values of the
    ``network_config`` passed at construction time (built-in defaults when
    omitted).

    Example:
        ```python
        tx = Transaction(network_config=config, nonce=7, value=10**18,
                         sender=alice, receiver=bob)
        tx.sign(signer)
        tx.send(provider)
        print(tx.tx_hash)
        ```
    """

    VERSION: ClassVar[int] = 1

    nonce: int = Field(default=0, ge=0, le=MAX_UINT64)
    value: int = Field(default=0, ge=0)
    sender: Address = Field(default_factory=Address.zero)
    receiver: Address = Field(default_factory=Address.zero)
    gas_price: int = Field(default=0, ge=0, le=MAX_UINT64)
    gas_limit: int = Field(default=0, ge=0, le=MAX_UINT64)
    data: str = ""
    chain_id: str = ""
    signature: str = ""
    tx_hash: str = ""

    model_config = {"validate_assignment": True}

    def __init__(self, network_config: Optional[NetworkConfig] = None, **data: Any):
        config = network_config or NetworkConfig.default()
        data.setdefault("gas_price", config.min_gas_price)
        data.setdefault("gas_limit", config.min_gas_limit)
        data.setdefault("chain_id", config.chain_id)
        super().__init__(**data)

    @field_validator("signature", "tx_hash")
    @classmethod
    def _check_hex(cls, v: str) -> str:
        if v:
            bytes.fromhex(v)
        return v

    @property
    def data_encoded(self) -> str:
        """Base64 of the UTF-8 bytes of ``data``."""
        return base64.b64encode(self.data.encode("utf-8")).decode("ascii")

    def to_map(self, include_signature: bool = True) -> Dict[str, Any]:
        """
        Build the field-ordered mapping of the canonical form.

        ``data`` and ``signature`` are left out when empty.

        Raises:
            AddressError: If sender or receiver cannot be encoded
            UnicodeEncodeError: If ``data`` is not encodable as UTF-8
        """
        result: Dict[str, Any] = {}
        result["nonce"] = self.nonce
        result["value"] = str(self.value)
        result["receiver"] = self.receiver.bech32()
        result["sender"] = self.sender.bech32()
        result["gasPrice"] = self.gas_price
        result["gasLimit"] = self.gas_limit

        if self.data:
            result["data"] = self.data_encoded

        result["chainID"] = self.chain_id
        result["version"] = self.VERSION

        if include_signature and self.signature:
            result["signature"] = self.signature

        return result

    def serialize(self, include_signature: bool = True) -> str:
        """
        Canonical JSON text of the transaction.

        Raises:
            SerializationError: If any field cannot be encoded
        """
        return self._canonical_bytes(include_signature).decode("utf-8")

    def signable_bytes(self) -> bytes:
        """UTF-8 bytes of the canonical form without the signature."""
        return self._canonical_bytes(include_signature=False)

    def _canonical_bytes(self, include_signature: bool) -> bytes:
        try:
            return dumps_ordered_bytes(self.to_map(include_signature))
        except (AddressError, ValueError) as e:
            raise SerializationError(f"Cannot serialize transaction: {e}", cause=e)

    def sign(self, signer: "Signer") -> str:
        """
        Sign the canonical form and store the signature.

        Args:
            signer: Signing capability; receives the signable bytes

        Returns:
            The hex signature

        Raises:
            SigningError: If serialization or the signer fails
        """
        try:
            payload = self.signable_bytes()
        except SerializationError as e:
            raise SigningError("Cannot sign transaction: serialization failed", cause=e)

        try:
            signature = signer.sign(payload)
        except SigningError:
            raise
        except Exception as e:
            raise SigningError(f"Signer failed: {e}", cause=e)

        self.signature = _signature_to_hex(signature)
        logger.debug("Signed transaction nonce=%d", self.nonce)
        return self.signature

    def compute_hash(self) -> str:
        """
        Compute the transaction hash locally, without contacting the network.

        The signature is included in the hashed message once present.

        Returns:
            Hex encoded BLAKE2b-256 digest, also stored as ``tx_hash``
        """
        self.tx_hash = TransactionCodec.hash_transaction(self).hex()
        return self.tx_hash

    def send(self, provider: "Provider") -> str:
        """
        Submit the transaction; the server-assigned hash replaces ``tx_hash``.

        Raises:
            SerializationError: If the transaction cannot be serialized
            TransportError: On transport failure
            ProtocolError: If the node rejects the request
        """
        self.tx_hash = provider.send_transaction(self)
        return self.tx_hash


def _signature_to_hex(signature: Union[str, bytes]) -> str:
    if isinstance(signature, (bytes, bytearray)):
        return bytes(signature).hex()
    if isinstance(signature, str):
        try:
            bytes.fromhex(signature)
        except ValueError as e:
            raise SigningError("Signer returned a non-hex signature", cause=e)
        return signature.lower()
    raise SigningError(f"Unsupported signature type: {type(signature).__name__}")
