"""Error hierarchy tests — codes, statuses, log fields and the flat REST envelope."""

from base64_service.core.errors import (
    Base64ServiceError,
    ErrorCategory,
    InvalidEncodingError,
    MissingInputError,
)


def test_missing_input_error_shape():
    err = MissingInputError("decode")
    assert err.code == "TEXT_REQUIRED"
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.operation == "decode"
    assert err.to_response() == {"error": "Text is required"}


def test_invalid_encoding_error_shape():
    err = InvalidEncodingError("Incorrect padding", operation="base64_decode")
    assert err.code == "INVALID_BASE64"
    assert err.http_status == 400
    assert err.category == ErrorCategory.ENCODING
    assert err.reason == "Incorrect padding"
    assert err.to_response() == {"error": "Invalid base64 string"}


def test_reason_never_leaks_into_response():
    err = InvalidEncodingError("Non-base64 digit found")
    assert "digit" not in str(err.to_response())


def test_all_errors_share_the_base_class():
    assert isinstance(MissingInputError(), Base64ServiceError)
    assert isinstance(InvalidEncodingError(), Base64ServiceError)


# --- log_fields -------------------------------------------------------------------

def test_missing_input_log_fields():
    assert MissingInputError("encode").log_fields() == {
        "error_code": "TEXT_REQUIRED",
        "category": "validation",
        "operation": "encode",
    }


def test_invalid_encoding_log_fields_include_reason():
    err = InvalidEncodingError("Incorrect padding", operation="base64_decode")
    assert err.log_fields() == {
        "error_code": "INVALID_BASE64",
        "category": "encoding",
        "operation": "base64_decode",
        "reason": "Incorrect padding",
    }


def test_operation_defaults_to_none():
    assert MissingInputError().operation is None
