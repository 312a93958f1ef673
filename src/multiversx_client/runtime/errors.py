"""
MultiversX Error Model

This module provides the error handling framework for the MultiversX Python client.
Local encoding problems (address, serialization, signing) are kept apart from
remote problems (transport, protocol) so callers can pick a recovery strategy.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Client error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    INVALID_ADDRESS = 101
    SERIALIZATION_FAILED = 102

    # Network errors (200-299)
    NETWORK_ERROR = 200
    CONNECTION_FAILED = 201
    TIMEOUT = 202
    INVALID_RESPONSE = 203

    # Signing errors (300-399)
    SIGNING_FAILED = 300

    # Protocol errors (400-499)
    PROTOCOL_ERROR = 400


class MultiversXError(Exception):
    """
    Base class for all client errors.

    Provides structured error information: a message, an error code,
    optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a client error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class AddressError(MultiversXError):
    """Malformed address input (bad checksum, prefix or length)."""

    def __init__(self, message: str = "Invalid address",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ADDRESS, details, cause)


class SerializationError(MultiversXError):
    """Canonical encoding of a transaction failed."""

    def __init__(self, message: str = "Cannot serialize transaction",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SERIALIZATION_FAILED, details, cause)


class SigningError(MultiversXError):
    """The signer failed, or the serialization preceding it failed."""

    def __init__(self, message: str = "Cannot sign transaction",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.SIGNING_FAILED, details, cause)


class TransportError(MultiversXError):
    """HTTP or transport level failure. Never retried by the client."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NETWORK_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class ProtocolError(MultiversXError):
    """
    The node's response envelope signalled failure.

    ``payload`` holds the server supplied error message, or the response
    code when no message was given, verbatim.
    """

    def __init__(self, payload: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(payload, ErrorCode.PROTOCOL_ERROR, details)
        self.payload = payload


# Names used by callers of the transaction API
CannotSerialize = SerializationError
CannotSign = SigningError


class ErrorHandler:
    """
    Utility class for handling and categorizing errors.
    """

    @staticmethod
    def is_retryable(error: Exception) -> bool:
        """
        Check if an error is worth retrying by the caller.

        Transport failures may be transient; local encoding problems and
        protocol rejections need the input fixed first.

        Args:
            error: Exception to check

        Returns:
            True if the error should be retried
        """
        if isinstance(error, TransportError):
            return error.code in (ErrorCode.NETWORK_ERROR, ErrorCode.CONNECTION_FAILED,
                                  ErrorCode.TIMEOUT)
        return False

    @staticmethod
    def is_local(error: Exception) -> bool:
        """Check if an error was raised before anything reached the network."""
        return isinstance(error, (AddressError, SerializationError, SigningError))


__all__ = [
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
]
