"""
Typed proxy responses.

Every proxy reply is an envelope ``{data, error, code}``; token lookups
answer with the bare token object. Token lookups resolve to a tagged
:class:`Found` / :class:`NotFound` result.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, Field, field_validator

from ..network_config import NetworkConfig
from ..runtime.errors import ProtocolError

T = TypeVar("T")

SUCCESSFUL = "successful"

_HEX = re.compile(r"[0-9a-fA-F]+")


class ResponseEnvelope(BaseModel):
    """Proxy response envelope."""

    data: Optional[Any] = None
    error: Optional[str] = None
    code: Optional[str] = None

    model_config = {"extra": "ignore"}

    def is_successful(self) -> bool:
        return not self.error and self.code == SUCCESSFUL

    def raise_if_error(self) -> None:
        """
        Raises:
            ProtocolError: Carrying the server message, or the code when
                there is no message
        """
        if self.error:
            raise ProtocolError(self.error, details={"code": self.code})
        if self.code != SUCCESSFUL:
            raise ProtocolError(self.code or "", details={"code": self.code})


class NetworkConfigWrapper(BaseModel):
    config: NetworkConfig


class AccountOnNetwork(BaseModel):
    """Account state as reported by the proxy."""

    nonce: int = Field(ge=0)
    balance: int = Field(ge=0)

    model_config = {"extra": "ignore"}


class AccountWrapper(BaseModel):
    account: AccountOnNetwork


class SendTransactionPayload(BaseModel):
    tx_hash: str = Field(alias="txHash")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("tx_hash")
    @classmethod
    def _check_hex(cls, v: str) -> str:
        if not _HEX.fullmatch(v) or len(v) % 2:
            raise ValueError(f"txHash is not a hex string: {v!r}")
        return v


class ESDTData(BaseModel):
    """Fungible token data held by an account."""

    name: str = ""
    decimals: int = 0
    owner: str = ""
    minted: int = 0
    balance: int = 0
    burnt: int = 0

    model_config = {"extra": "ignore"}

    @classmethod
    def empty(cls) -> ESDTData:
        """Record returned for tokens the account holds no balance of."""
        return cls(name="", decimals=0, owner="", minted=0, balance=0, burnt=0)


class NFTData(BaseModel):
    balance: int = 0

    model_config = {"extra": "ignore"}


@dataclass(frozen=True)
class Found(Generic[T]):
    """A lookup that returned data."""

    value: T


@dataclass(frozen=True)
class NotFound:
    """A lookup with no recorded balance."""


LookupResult = Union[Found[T], NotFound]
