"""Codec Routes — POST /encode and POST /decode.

Invariants:
    - Missing, null or empty text → MissingInputError (400, "Text is required")
    - Decode failures → InvalidEncodingError (400, "Invalid base64 string")
    - Success bodies are exactly {"result": str}

Design Decisions:
    - Routes raise domain errors; the global handler renders them (ADR: uniform error shape)
    - Mounted at the root, no /api prefix: the public paths are /encode and /decode
"""

import logging

from fastapi import APIRouter

from base64_service.core.codec import decode_text, encode_text
from base64_service.core.errors import MissingInputError
from base64_service.schemas.codec import CodecRequest, CodecResult

logger = logging.getLogger(__name__)
router = APIRouter(tags=["codec"])


def _require_text(body: CodecRequest, operation: str) -> str:
    if not body.text:
        raise MissingInputError(operation)
    return body.text


@router.post("/encode", response_model=CodecResult)
async def encode(body: CodecRequest):
    """Encode text as base64 of its UTF-8 bytes."""
    text = _require_text(body, "encode")
    return CodecResult(result=encode_text(text))


@router.post("/decode", response_model=CodecResult)
async def decode(body: CodecRequest):
    """Decode a base64 string into UTF-8 text."""
    text = _require_text(body, "decode")
    return CodecResult(result=decode_text(text))
