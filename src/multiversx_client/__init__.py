"""
MultiversX Python Client

Builds, canonicalizes, hashes, signs and submits transactions, and queries
network state through a proxy node.
"""

from .version import __version__
from .config import ClientConfig, ENDPOINTS
from .network_config import NetworkConfig
from .transaction import Transaction
from .canonjson import dumps_ordered
from .runtime.address import Address
from .runtime.errors import *
from .codec import TransactionCodec, blake2b_256, big_int_to_bytes, big_int_from_bytes
from .signers import Signer, Ed25519Signer
from .proxy import (
    ProxyProvider, Provider,
    AccountOnNetwork, ESDTData, NFTData, Found, NotFound,
    adjust_token_identifier, nft_identifier,
)

__all__ = [
    "__version__",
    "ClientConfig",
    "ENDPOINTS",
    "NetworkConfig",
    "Transaction",
    "dumps_ordered",
    "Address",

    # Errors
    "ErrorCode",
    "MultiversXError",
    "AddressError",
    "SerializationError",
    "SigningError",
    "TransportError",
    "ProtocolError",
    "CannotSerialize",
    "CannotSign",
    "ErrorHandler",

    # Codec
    "TransactionCodec",
    "blake2b_256",
    "big_int_to_bytes",
    "big_int_from_bytes",

    # Signers
    "Signer",
    "Ed25519Signer",

    # Proxy
    "ProxyProvider",
    "Provider",
    "AccountOnNetwork",
    "ESDTData",
    "NFTData",
    "Found",
    "NotFound",
    "adjust_token_identifier",
    "nft_identifier",
]
