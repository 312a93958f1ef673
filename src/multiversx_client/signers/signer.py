"""
Base signer interface.

Transactions hand their signable bytes to a signer and store whatever hex
signature comes back. The algorithm is the signer's concern.
"""

from __future__ import annotations
from abc import ABC, abstractmethod


class Signer(ABC):
    """
    Signing capability used by :meth:`Transaction.sign`.
    """

    @abstractmethod
    def sign(self, message: bytes) -> str:
        """
        Sign a message.

        Args:
            message: Canonical signable bytes of a transaction

        Returns:
            Hex encoded signature

        Raises:
            SigningError: If signing fails
        """
        pass
