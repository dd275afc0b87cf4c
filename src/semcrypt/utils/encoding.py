"""Base64, hex and UTF-8 helpers for semcrypt."""

from __future__ import annotations

import base64
import binascii
import re

from ..constants import PEM_LINE_LENGTH
from ..errors import Base64DecodeError, Utf8DecodeError

# Anything outside the standard base64 alphabet
_NON_BASE64_PATTERN = re.compile(r"[^A-Za-z0-9+/=]")

_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")


def to_base64(data: bytes) -> str:
    """Encode bytes to standard base64.

    Args:
        data: The bytes to encode.

    Returns:
        Standard base64 string with padding.
    """
    return base64.b64encode(data).decode("ascii")


def from_base64(s: str, ignore_unknown: bool = False) -> bytes:
    """Decode standard base64 string to bytes.

    Args:
        s: The base64 string to decode.
        ignore_unknown: Drop characters outside the base64 alphabet (line
            breaks, spaces) before decoding instead of rejecting them.

    Returns:
        The decoded bytes.

    Raises:
        Base64DecodeError: If the input is not valid base64.
    """
    if ignore_unknown:
        s = _NON_BASE64_PATTERN.sub("", s)
    try:
        return base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(f"Invalid base64 data: {e}") from e


def to_base64_lines(data: bytes, width: int = PEM_LINE_LENGTH) -> str:
    """Encode bytes to base64 broken into ``width``-character lines.

    Lines are joined with ``\\n``; there is no trailing newline.
    """
    encoded = to_base64(data)
    return "\n".join(encoded[i : i + width] for i in range(0, len(encoded), width))


def to_hex(data: bytes) -> str:
    """Encode bytes as uppercase hexadecimal."""
    return data.hex().upper()


def from_hex(s: str) -> bytes:
    """Decode a hexadecimal string.

    Surrounding ``<``/``>`` and any spaces are ignored, case is not significant.

    Raises:
        ValueError: If the string has an odd length or non-hex characters.
    """
    cleaned = s.strip("<> ").replace(" ", "")
    if not _HEX_PATTERN.match(cleaned) or len(cleaned) % 2 != 0:
        raise ValueError(f"Invalid hexadecimal string: {s!r}")
    return bytes.fromhex(cleaned)


def encode_utf8(text: str) -> bytes:
    return text.encode("utf-8")


def decode_utf8(data: bytes) -> str:
    """Decode UTF-8 bytes.

    Raises:
        Utf8DecodeError: If the bytes are not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Utf8DecodeError(f"Invalid UTF-8 data: {e}") from e
