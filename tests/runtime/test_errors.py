"""
Error model tests.
"""

from multiversx_client import (
    AddressError, CannotSerialize, CannotSign, ErrorCode, ErrorHandler,
    MultiversXError, ProtocolError, SerializationError, SigningError, TransportError,
)


class TestErrorModel:

    def test_hierarchy(self):
        for cls in (AddressError, SerializationError, SigningError, ProtocolError):
            assert issubclass(cls, MultiversXError)
        assert issubclass(TransportError, MultiversXError)

    def test_aliases(self):
        assert CannotSerialize is SerializationError
        assert CannotSign is SigningError

    def test_protocol_error_payload(self):
        err = ProtocolError("internal_issue")
        assert err.payload == "internal_issue"
        assert err.code == ErrorCode.PROTOCOL_ERROR
        assert "internal_issue" in str(err)

    def test_to_dict_with_cause(self):
        cause = ValueError("boom")
        err = SerializationError("bad", cause=cause)
        data = err.to_dict()
        assert data["code"] == ErrorCode.SERIALIZATION_FAILED.value
        assert data["message"] == "bad"
        assert data["cause"] == "boom"


class TestErrorHandler:

    def test_transport_errors_retryable(self):
        assert ErrorHandler.is_retryable(TransportError("down", ErrorCode.CONNECTION_FAILED))
        assert ErrorHandler.is_retryable(TransportError("slow", ErrorCode.TIMEOUT))

    def test_malformed_body_not_retryable(self):
        assert not ErrorHandler.is_retryable(TransportError("junk", ErrorCode.INVALID_RESPONSE))

    def test_local_errors(self):
        assert ErrorHandler.is_local(AddressError())
        assert ErrorHandler.is_local(SigningError())
        assert not ErrorHandler.is_local(ProtocolError("x"))
        assert not ErrorHandler.is_retryable(ProtocolError("x"))
