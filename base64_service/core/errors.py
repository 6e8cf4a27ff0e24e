"""Error Hierarchy — typed, categorized exceptions for all service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), operation and http_status
    - Client errors (400-level) carry a fixed, user-facing message
    - to_response() produces the flat {"error": message} envelope
    - log_fields() carries the diagnostic detail; it never reaches the client

Design Decisions:
    - Single hierarchy with Base64ServiceError base: FastAPI global handler catches all (ADR: uniform error shape)
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ENCODING = "encoding"


class Base64ServiceError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        operation: str | None = None,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.operation = operation
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}

    def log_fields(self) -> dict:
        """Structured fields for the `extra` of a log call."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "operation": self.operation,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingInputError(Base64ServiceError):
    """Request body has no usable `text` field."""
    def __init__(self, operation: str | None = None):
        super().__init__(
            "Text is required", "TEXT_REQUIRED", ErrorCategory.VALIDATION,
            operation, 400,
        )


class InvalidEncodingError(Base64ServiceError):
    """Input is not valid base64, or the decoded bytes are not UTF-8."""
    def __init__(self, reason: str = "", operation: str | None = None):
        super().__init__(
            "Invalid base64 string", "INVALID_BASE64", ErrorCategory.ENCODING,
            operation, 400,
        )
        self.reason = reason

    def log_fields(self) -> dict:
        return {**super().log_fields(), "reason": self.reason}
