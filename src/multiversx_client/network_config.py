"""
Network configuration snapshot.

Supplies the defaults (chain ID, minimum gas price and limit) a new
transaction starts from. Values are passed explicitly; there is no
process-wide mutable default.
"""

from __future__ import annotations
from typing import Any, Dict

from pydantic import BaseModel, Field

DEFAULT_CHAIN_ID = "T"
DEFAULT_GAS_PER_DATA_BYTE = 1_500
DEFAULT_MIN_GAS_LIMIT = 50_000
DEFAULT_MIN_GAS_PRICE = 1_000_000_000
DEFAULT_MIN_TRANSACTION_VERSION = 1


class NetworkConfig(BaseModel):
    """
    Read-only snapshot of a network's configuration.

    Field aliases match the keys of the proxy's ``network/config`` payload.
    """

    chain_id: str = Field(default=DEFAULT_CHAIN_ID, alias="erd_chain_id")
    gas_per_data_byte: int = Field(default=DEFAULT_GAS_PER_DATA_BYTE, ge=0, alias="erd_gas_per_data_byte")
    min_gas_limit: int = Field(default=DEFAULT_MIN_GAS_LIMIT, ge=0, alias="erd_min_gas_limit")
    min_gas_price: int = Field(default=DEFAULT_MIN_GAS_PRICE, ge=0, alias="erd_min_gas_price")
    min_transaction_version: int = Field(
        default=DEFAULT_MIN_TRANSACTION_VERSION, ge=0, alias="erd_min_transaction_version"
    )

    model_config = {"populate_by_name": True, "frozen": True, "extra": "ignore"}

    @classmethod
    def default(cls) -> NetworkConfig:
        """A fresh configuration holding the built-in defaults."""
        return cls()

    @classmethod
    def from_provider_payload(cls, payload: Dict[str, Any]) -> NetworkConfig:
        """Build from the ``config`` object returned by ``network/config``."""
        return cls.model_validate(payload)
