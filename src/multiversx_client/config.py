"""
Client configuration.
"""

from __future__ import annotations
from dataclasses import dataclass

from .version import __version__

# Well-known proxy endpoints
ENDPOINTS = {
    'mainnet': 'https://gateway.multiversx.com',
    'testnet': 'https://testnet-gateway.multiversx.com',
    'devnet': 'https://devnet-gateway.multiversx.com',
}


@dataclass
class ClientConfig:
    """Configuration for the proxy client."""

    endpoint: str
    timeout: float = 30.0
    debug: bool = False
    user_agent: str = f"multiversx-python-client/{__version__}"

    def __post_init__(self):
        # Resolve well-known endpoint names
        alias = self.endpoint.lower()
        if alias in ENDPOINTS:
            self.endpoint = ENDPOINTS[alias]
        self.endpoint = self.endpoint.rstrip('/')
