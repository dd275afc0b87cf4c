"""Utility functions for semcrypt."""

from .encoding import (
    decode_utf8,
    encode_utf8,
    from_base64,
    from_hex,
    to_base64,
    to_base64_lines,
    to_hex,
)

__all__ = [
    "decode_utf8",
    "encode_utf8",
    "from_base64",
    "from_hex",
    "to_base64",
    "to_base64_lines",
    "to_hex",
]
