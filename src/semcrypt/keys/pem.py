"""PEM envelope encoding and decoding for RSA keys."""

from __future__ import annotations

from collections.abc import Sequence

from ..constants import (
    PRIVATE_KEY_PREFIX,
    PRIVATE_KEY_SUFFIX,
    PUBLIC_KEY_PREFIX,
    PUBLIC_KEY_SUFFIX,
    RSA_PRIVATE_KEY_PREFIX,
    RSA_PRIVATE_KEY_SUFFIX,
)
from ..errors import PemParseError
from ..utils.encoding import from_base64, to_base64_lines

# (prefix, suffix) pairs, tried in order
PemMarkers = Sequence[tuple[str, str]]

PRIVATE_KEY_MARKERS: PemMarkers = (
    (PRIVATE_KEY_PREFIX, PRIVATE_KEY_SUFFIX),
    (RSA_PRIVATE_KEY_PREFIX, RSA_PRIVATE_KEY_SUFFIX),
)
PUBLIC_KEY_MARKERS: PemMarkers = ((PUBLIC_KEY_PREFIX, PUBLIC_KEY_SUFFIX),)

ENCRYPTED_BODY_MARKER = "Proc-Type:"


def strip_header(pem_key: str, markers: PemMarkers) -> str:
    """Return the text between the first matching PEM prefix and its suffix.

    Args:
        pem_key: The PEM text.
        markers: Accepted (prefix, suffix) pairs.

    Returns:
        The body text, still base64 with embedded line breaks.

    Raises:
        PemParseError: If no prefix matches or the suffix is missing.
    """
    for prefix, suffix in markers:
        if not pem_key.startswith(prefix):
            continue
        end = pem_key.find(suffix, len(prefix))
        if end < 0:
            raise PemParseError(f"Missing PEM footer {suffix.strip()!r}")
        return pem_key[len(prefix) : end]
    expected = ", ".join(repr(prefix.strip()) for prefix, _ in markers)
    raise PemParseError(f"Unrecognized PEM header, expected one of: {expected}")


def add_header(base64_body: str, prefix: str, suffix: str) -> str:
    return prefix + base64_body + suffix


def pem_to_der(pem_key: str, markers: PemMarkers) -> bytes:
    """Decode a PEM key into its DER bytes.

    Raises:
        PemParseError: If the envelope is not recognized or the body is encrypted.
        Base64DecodeError: If the body is not valid base64.
    """
    body = strip_header(pem_key, markers)
    if body.startswith(ENCRYPTED_BODY_MARKER):
        raise PemParseError("PEM key is encrypted, decrypt it with its passphrase first")
    return from_base64(body, ignore_unknown=True)


def der_to_pem(der_key: bytes, prefix: str, suffix: str) -> str:
    """Encode DER bytes as PEM with 64-character base64 lines."""
    return add_header(to_base64_lines(der_key), prefix, suffix)


def private_pem_to_der(pem_key: str) -> bytes:
    """Decode a ``PRIVATE KEY`` or ``RSA PRIVATE KEY`` PEM (DER may still be PKCS#8)."""
    return pem_to_der(pem_key, PRIVATE_KEY_MARKERS)


def private_der_to_pem(der_key: bytes) -> str:
    """Encode a private key as ``RSA PRIVATE KEY`` PEM."""
    return der_to_pem(der_key, RSA_PRIVATE_KEY_PREFIX, RSA_PRIVATE_KEY_SUFFIX)


def public_pem_to_der(pem_key: str) -> bytes:
    """Decode a ``PUBLIC KEY`` PEM (DER may still be PKCS#8)."""
    return pem_to_der(pem_key, PUBLIC_KEY_MARKERS)


def public_der_to_pem(der_key: bytes) -> str:
    """Encode a public key as ``PUBLIC KEY`` PEM."""
    return der_to_pem(der_key, PUBLIC_KEY_PREFIX, PUBLIC_KEY_SUFFIX)
