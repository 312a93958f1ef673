"""
Provider interface.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..network_config import NetworkConfig
from ..runtime.address import Address
from .models import AccountOnNetwork, ESDTData

if TYPE_CHECKING:
    from ..transaction import Transaction


class Provider(ABC):
    """Read and write operations against a network node."""

    @abstractmethod
    def get_network_config(self) -> NetworkConfig:
        pass

    @abstractmethod
    def get_account(self, address: Address) -> AccountOnNetwork:
        pass

    @abstractmethod
    def get_esdt_data(self, address: Address, token_identifier: str) -> ESDTData:
        pass

    @abstractmethod
    def get_nft_balance(self, address: Address, token_identifier: str, nonce: int) -> int:
        pass

    @abstractmethod
    def send_transaction(self, transaction: "Transaction") -> str:
        """Submit a signed transaction and return the server-assigned hash."""
        pass
