"""
Token identifier helpers.
"""

import re

from ..runtime.errors import SerializationError

_HEX = re.compile(r"(?:[0-9a-fA-F]{2})+")


def adjust_token_identifier(token_identifier: str) -> str:
    """
    Return the display form of a token identifier.

    Identifiers containing ``-`` are already in display form. Anything else
    is taken as the hex encoding of the UTF-8 identifier and decoded.

    Raises:
        SerializationError: If a separator-less identifier is not valid hex/UTF-8
    """
    if "-" in token_identifier:
        return token_identifier

    if not _HEX.fullmatch(token_identifier):
        raise SerializationError(f"Invalid token identifier: {token_identifier!r}")
    try:
        return bytes.fromhex(token_identifier).decode("utf-8")
    except UnicodeDecodeError as e:
        raise SerializationError(f"Token identifier is not UTF-8: {token_identifier!r}", cause=e)


def nonce_to_hex(nonce: int) -> str:
    """Lowercase hex of a token nonce, zero-padded to an even length."""
    if nonce < 0:
        raise ValueError(f"Token nonce must be non-negative: {nonce}")
    nonce_hex = format(nonce, "x")
    if len(nonce_hex) % 2 == 1:
        nonce_hex = "0" + nonce_hex
    return nonce_hex


def nft_identifier(token_identifier: str, nonce: int) -> str:
    """Identifier of one NFT/SFT instance: ``{token}-{hexNonce}``."""
    return f"{adjust_token_identifier(token_identifier)}-{nonce_to_hex(nonce)}"
