"""
MultiversX Proxy Client.

Issues blocking HTTP requests against a proxy (gateway) node and decodes the
typed responses. There are no retries; each call is a single round trip.
"""

from __future__ import annotations
import json
import logging
from typing import TYPE_CHECKING, Any, Optional, Type, TypeVar, Union

import requests
from pydantic import BaseModel, ValidationError

from ..config import ClientConfig
from ..network_config import NetworkConfig
from ..runtime.address import Address
from ..runtime.errors import ErrorCode, TransportError
from .models import (
    AccountOnNetwork,
    AccountWrapper,
    ESDTData,
    Found,
    LookupResult,
    NetworkConfigWrapper,
    NFTData,
    NotFound,
    ResponseEnvelope,
    SendTransactionPayload,
)
from .provider import Provider
from .tokens import adjust_token_identifier, nft_identifier

if TYPE_CHECKING:
    from ..transaction import Transaction

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

M = TypeVar("M", bound=BaseModel)


class ProxyProvider(Provider):
    """
    Client for the proxy HTTP API.

    Example:
        ```python
        with ProxyProvider("devnet") as provider:
            config = provider.get_network_config()
            account = provider.get_account(address)
        ```
    """

    def __init__(
        self,
        config: Union[str, ClientConfig],
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the proxy client.

        Args:
            config: Either an endpoint URL / well-known name or a ClientConfig
            session: Optional requests.Session to share between clients
        """
        if isinstance(config, str):
            self.config = ClientConfig(endpoint=config)
        else:
            self.config = config

        if self.config.debug:
            logger.setLevel(logging.DEBUG)

        self._session = session if session is not None else requests.Session()
        self._owns_session = session is None

    @property
    def endpoint(self) -> str:
        """Get the proxy base URL."""
        return self.config.endpoint

    def close(self) -> None:
        """Close the HTTP session if owned by this client."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> ProxyProvider:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Low-level HTTP
    # =========================================================================

    def _url(self, resource: str) -> str:
        return f"{self.config.endpoint}/{resource}"

    def _do_get(self, resource: str) -> Any:
        url = self._url(resource)
        logger.debug("GET %s", url)
        try:
            response = self._session.get(
                url,
                headers={"Accept": "application/json", "User-Agent": self.config.user_agent},
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise _transport_error(e)
        return self._decode(response)

    def _do_post(self, resource: str, body: str) -> Any:
        url = self._url(resource)
        logger.debug("POST %s %s", url, body)
        try:
            response = self._session.post(
                url,
                data=body.encode("utf-8"),
                headers={
                    "Content-Type": JSON_CONTENT_TYPE,
                    "Accept": "application/json",
                    "User-Agent": self.config.user_agent,
                },
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise _transport_error(e)
        return self._decode(response)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        # The proxy reports failures inside the envelope, so the body is
        # decoded whatever the HTTP status.
        logger.debug("HTTP %s: %s", response.status_code, response.text)
        try:
            return json.loads(response.text)
        except json.JSONDecodeError as e:
            raise TransportError(
                f"Invalid JSON response (HTTP {response.status_code}): {e}",
                ErrorCode.INVALID_RESPONSE,
                details={"status": response.status_code},
                cause=e,
            )

    @staticmethod
    def _unwrap(body: Any) -> Any:
        """Decode the envelope, raise ProtocolError on failure, return ``data``."""
        envelope = _validate(ResponseEnvelope, body)
        envelope.raise_if_error()
        return envelope.data

    @staticmethod
    def _unwrap_lookup(body: Any) -> Any:
        """
        Token endpoints answer either with an envelope or with the bare object.

        A failed envelope means nothing is recorded and yields ``None``.
        """
        if isinstance(body, dict) and "code" in body and ("data" in body or "error" in body):
            envelope = _validate(ResponseEnvelope, body)
            if not envelope.is_successful():
                logger.debug("Token lookup failed (%s): %s", envelope.code, envelope.error)
                return None
            return envelope.data
        return body

    # =========================================================================
    # Read operations
    # =========================================================================

    def get_network_config(self) -> NetworkConfig:
        """
        Fetch the network configuration.

        Raises:
            TransportError: On transport failure or malformed body
            ProtocolError: If the proxy reports an error
        """
        payload = self._unwrap(self._do_get("network/config"))
        return _validate(NetworkConfigWrapper, payload).config

    def get_account(self, address: Address) -> AccountOnNetwork:
        """
        Fetch the nonce and balance of an account.

        Raises:
            AddressError: If the address cannot be encoded
            TransportError: On transport failure or malformed body
            ProtocolError: If the proxy reports an error
        """
        payload = self._unwrap(self._do_get(f"address/{address.bech32()}"))
        return _validate(AccountWrapper, payload).account

    def lookup_esdt_data(self, address: Address, token_identifier: str) -> LookupResult[ESDTData]:
        """Fetch fungible token data, as :class:`Found` or :class:`NotFound`."""
        token = adjust_token_identifier(token_identifier)
        payload = self._unwrap_lookup(self._do_get(f"accounts/{address.bech32()}/tokens/{token}"))
        if not _has_balance(payload):
            return NotFound()
        return Found(_validate(ESDTData, payload))

    def get_esdt_data(self, address: Address, token_identifier: str) -> ESDTData:
        """
        Fetch fungible token data held by an account.

        A token the account has no recorded balance of yields
        :meth:`ESDTData.empty` instead of an error.
        """
        result = self.lookup_esdt_data(address, token_identifier)
        if isinstance(result, Found):
            return result.value
        return ESDTData.empty()

    def lookup_nft_balance(self, address: Address, token_identifier: str, nonce: int) -> LookupResult[int]:
        """Fetch one NFT/SFT balance, as :class:`Found` or :class:`NotFound`."""
        nft_id = nft_identifier(token_identifier, nonce)
        payload = self._unwrap_lookup(self._do_get(f"accounts/{address.bech32()}/nfts/{nft_id}"))
        if not _has_balance(payload):
            return NotFound()
        return Found(_validate(NFTData, payload).balance)

    def get_nft_balance(self, address: Address, token_identifier: str, nonce: int) -> int:
        """Balance of one NFT/SFT instance; zero when nothing is recorded."""
        result = self.lookup_nft_balance(address, token_identifier, nonce)
        if isinstance(result, Found):
            return result.value
        return 0

    # =========================================================================
    # Write operations
    # =========================================================================

    def send_transaction(self, transaction: "Transaction") -> str:
        """
        Submit a signed transaction.

        Returns:
            Transaction hash assigned by the node

        Raises:
            SerializationError: If the transaction cannot be serialized
            TransportError: On transport failure or malformed body
            ProtocolError: If the node rejects the transaction
        """
        body = transaction.serialize()
        payload = self._unwrap(self._do_post("transaction/send", body))
        tx_hash = _validate(SendTransactionPayload, payload).tx_hash
        logger.info("Transaction sent: %s", tx_hash)
        return tx_hash


def _has_balance(payload: Any) -> bool:
    return isinstance(payload, dict) and payload.get("balance") is not None


def _validate(model: Type[M], payload: Any) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise TransportError(
            f"Unexpected {model.__name__} payload: {e}",
            ErrorCode.INVALID_RESPONSE,
            cause=e,
        )


def _transport_error(error: requests.exceptions.RequestException) -> TransportError:
    if isinstance(error, requests.exceptions.Timeout):
        code = ErrorCode.TIMEOUT
    elif isinstance(error, requests.exceptions.ConnectionError):
        code = ErrorCode.CONNECTION_FAILED
    else:
        code = ErrorCode.NETWORK_ERROR
    return TransportError(f"HTTP request failed: {error}", code, cause=error)
