"""
Shared fixtures: well-known test accounts, a deterministic signer and a
network configuration.
"""

import pytest

from multiversx_client import Address, Ed25519Signer, NetworkConfig

from tests.helpers import ALICE_HEX


@pytest.fixture
def alice():
    return Address.from_hex(ALICE_HEX)


@pytest.fixture
def bob():
    return Address.from_pubkey(bytes(range(32)))


@pytest.fixture
def network_config():
    return NetworkConfig(
        chain_id="D",
        gas_per_data_byte=1500,
        min_gas_limit=70_000,
        min_gas_price=1_000_000_000,
        min_transaction_version=1,
    )


@pytest.fixture
def signer():
    """Ed25519 signer with a deterministic seed."""
    return Ed25519Signer.from_seed(b"\x01" * 32)
