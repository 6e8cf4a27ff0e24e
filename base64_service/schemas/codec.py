"""Codec Schemas — request/response bodies for /encode and /decode.

Invariants:
    - CodecRequest.text is optional here; presence is enforced by the route
      so the fixed "Text is required" message is returned
    - Responses carry exactly one of result / error

Design Decisions:
    - Optional text over required Field: Pydantic's "missing" error would
      bypass the domain MissingInputError message
"""

from pydantic import BaseModel


class CodecRequest(BaseModel):
    """Body shared by /encode and /decode."""
    text: str | None = None


class CodecResult(BaseModel):
    result: str


class ErrorResponse(BaseModel):
    error: str
