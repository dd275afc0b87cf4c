"""Error hierarchy for semcrypt."""

from __future__ import annotations


class SemCryptError(Exception):
    """Base exception for all semcrypt errors."""

    pass


class Base64DecodeError(SemCryptError):
    """Base64 text could not be decoded."""

    pass


class Utf8DecodeError(SemCryptError):
    """Decrypted or stored bytes are not valid UTF-8."""

    pass


class Asn1ParseError(SemCryptError):
    """DER key structure does not match the expected RSA layout."""

    pass


class PemParseError(SemCryptError):
    """PEM text has no recognized header/footer or a malformed body."""

    pass


class SemParseError(SemCryptError):
    """SEM header is malformed or names unknown algorithms."""

    pass


class SemUnsupportedVersionError(SemCryptError):
    """SEM header carries a protocol version this library does not speak."""

    pass


class SemAuthenticationError(SemCryptError):
    """SEM message HMAC does not match.

    CRITICAL: This error indicates the message was tampered with or the wrong
    key was used. No plaintext is produced when it is raised.
    """

    pass


class CryptoProviderError(SemCryptError):
    """Failure reported by the underlying crypto provider.

    Attributes:
        status: Numeric status code of the failure kind.
        message: Human readable description.
    """

    status: int = -2147483648

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(f"Crypto provider error ({self.status}): {message}")


class ParamError(CryptoProviderError):
    """Invalid parameter passed to a primitive (key size, IV size, ...)."""

    status = -4300


class BufferTooSmallError(CryptoProviderError):
    """Input buffer is too small for the requested operation."""

    status = -4301


class DecodeError(CryptoProviderError):
    """Ciphertext could not be decoded (padding, tag or OAEP failure)."""

    status = -4304


class RNGFailureError(CryptoProviderError):
    """Random number generator could not produce bytes."""

    status = -4307


class NotAvailableError(CryptoProviderError):
    """Requested primitive is not available in this provider."""

    status = -2147483647


class UnknownError(CryptoProviderError):
    """Unclassified provider failure."""

    status = -2147483648


class KeyStoreError(SemCryptError):
    """Key store operation failure."""

    pass


class KeyNotFoundError(KeyStoreError):
    """No key is stored under the requested tag."""

    pass


_PROVIDER_ERRORS_BY_STATUS: dict[int, type[CryptoProviderError]] = {
    cls.status: cls
    for cls in (ParamError, BufferTooSmallError, DecodeError, RNGFailureError, NotAvailableError)
}


def provider_error_from_status(status: int, message: str = "") -> CryptoProviderError:
    """Build the provider error matching a numeric status code.

    Unrecognized codes map to ``UnknownError``.
    """
    return _PROVIDER_ERRORS_BY_STATUS.get(status, UnknownError)(message)
