"""Text Codec — base64 transforms over UTF-8 text.

Invariants:
    - encode_text is total: any str produces a padded, standard-alphabet string
    - decode_text accepts only strict base64 (no whitespace, padding required)
      whose bytes are valid UTF-8; anything else raises InvalidEncodingError
    - decode_text(encode_text(s)) == s for every s without lone surrogates

Design Decisions:
    - Lone surrogates replaced with U+FFFD before encoding: JSON allows
      "\\ud800" escapes that have no UTF-8 form
"""

import base64
import re

from base64_service.core.errors import InvalidEncodingError

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def encode_text(text: str) -> str:
    """Base64-encode the UTF-8 bytes of text."""
    raw = _LONE_SURROGATE.sub("\ufffd", text).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def decode_text(data: str) -> str:
    """Decode a base64 string back into UTF-8 text."""
    try:
        raw = base64.b64decode(data, validate=True)
    except ValueError as e:
        # binascii.Error for bad alphabet/padding, plain ValueError for non-ASCII
        raise InvalidEncodingError(
            str(e), operation="base64_decode",
        ) from e
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(
            str(e), operation="utf8_decode",
        ) from e
