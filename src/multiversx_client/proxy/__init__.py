"""
Proxy (gateway) API client.
"""

from .client import ProxyProvider
from .models import (
    AccountOnNetwork,
    ESDTData,
    Found,
    NFTData,
    NotFound,
    ResponseEnvelope,
)
from .provider import Provider
from .tokens import adjust_token_identifier, nft_identifier, nonce_to_hex

__all__ = [
    "ProxyProvider",
    "Provider",
    "AccountOnNetwork",
    "ESDTData",
    "NFTData",
    "Found",
    "NotFound",
    "ResponseEnvelope",
    "adjust_token_identifier",
    "nft_identifier",
    "nonce_to_hex",
]
