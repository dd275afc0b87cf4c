"""SEM (Simple Encrypted Message) hybrid encryption.

A message is::

    RSA-OAEP-SHA1(header) | AES(payload) | HMAC(everything before it)

The HMAC is optional and keyed with the per-message AES key. On decryption
it is checked before any symmetric decryption takes place.
"""

from __future__ import annotations

import hmac
import logging

from ..errors import DecodeError, SemAuthenticationError
from ..keys import private_pem_to_der, public_pem_to_der
from ..provider import CryptoProvider, get_default_provider
from ..types import AsymmetricPadding, HashAlgorithm, HMACMode, OpMode, SemMode
from ..utils.encoding import decode_utf8, encode_utf8, from_base64, to_base64
from .header import build_header, parse_header

logger = logging.getLogger("semcrypt")

HEADER_DIGEST = HashAlgorithm.SHA1


def encrypt_data(
    data: bytes,
    public_pem: str,
    mode: SemMode | None = None,
    provider: CryptoProvider | None = None,
) -> bytes:
    """Encrypt bytes for the holder of an RSA private key.

    Args:
        data: The plaintext.
        public_pem: Recipient public key as ``PUBLIC KEY`` PEM.
        mode: Algorithm selection, defaults to AES-256/CBC/HMAC-SHA256.
        provider: Crypto provider, defaults to the process-wide one.

    Returns:
        The SEM message bytes.

    Raises:
        PemParseError: If the public key PEM is malformed.
        Asn1ParseError: If the key is not an RSA public key.
        CryptoProviderError: If a primitive fails or is unavailable.
    """
    mode = mode or SemMode()
    provider = provider or get_default_provider()

    aes_key = provider.random_bytes(mode.aes.key_size)
    iv = provider.random_bytes(mode.block.iv_size)
    header = build_header(mode, aes_key, iv)
    der_key = public_pem_to_der(public_pem)

    encrypted_header = provider.rsa_encrypt(header, der_key, AsymmetricPadding.OAEP, HEADER_DIGEST)
    encrypted_data = provider.symmetric_crypt(OpMode.ENCRYPT, mode.block, data, aes_key, iv)
    logger.debug(
        "SEM encrypt %d bytes with %s/%s/%s",
        len(data),
        mode.aes.name,
        mode.block.name,
        mode.hmac.name,
    )

    message = encrypted_header + encrypted_data
    if mode.hmac is not HMACMode.NONE:
        message += _compute_hmac(message, aes_key, mode.hmac, provider)
    return message


def decrypt_data(
    data: bytes,
    private_pem: str,
    provider: CryptoProvider | None = None,
) -> bytes:
    """Decrypt a SEM message.

    CRITICAL: The HMAC, when present, is verified BEFORE symmetric decryption.

    Args:
        data: The SEM message bytes.
        private_pem: Recipient private key PEM (PKCS#1 or PKCS#8).
        provider: Crypto provider, defaults to the process-wide one.

    Returns:
        The plaintext.

    Raises:
        DecodeError: If the message is shorter than one RSA block or the
            symmetric ciphertext does not decode.
        SemAuthenticationError: If the header block does not decrypt under
            this key or the HMAC does not match.
        SemUnsupportedVersionError: If the header version is not 0.
        SemParseError: If the header is malformed.
    """
    provider = provider or get_default_provider()
    der_key = private_pem_to_der(private_pem)

    block_size = provider.rsa_block_size(der_key)
    if len(data) < block_size:
        raise DecodeError(
            f"SEM message of {len(data)} bytes is shorter than one {block_size}-byte RSA block"
        )

    try:
        header, tail = provider.rsa_decrypt(data, der_key, AsymmetricPadding.OAEP, HEADER_DIGEST)
    except DecodeError as e:
        logger.warning("SEM header could not be decrypted: %s", e.message)
        raise SemAuthenticationError(
            "SEM header could not be decrypted - wrong key or tampered message"
        ) from e

    mode, aes_key, iv = parse_header(header)
    logger.debug("SEM decrypt with %s/%s/%s", mode.aes.name, mode.block.name, mode.hmac.name)

    check_hmac(data, aes_key, mode.hmac, provider)

    encrypted_data = tail[: len(tail) - mode.hmac.digest_length]
    return provider.symmetric_crypt(OpMode.DECRYPT, mode.block, encrypted_data, aes_key, iv)


def check_hmac(
    data: bytes,
    aes_key: bytes,
    hmac_mode: HMACMode,
    provider: CryptoProvider | None = None,
) -> None:
    """Verify the trailing HMAC of a SEM message.

    Does nothing for ``HMACMode.NONE``.

    Raises:
        SemAuthenticationError: If the tag is missing or does not match.
    """
    if hmac_mode is HMACMode.NONE:
        return
    provider = provider or get_default_provider()

    digest_length = hmac_mode.digest_length
    if len(data) < digest_length:
        raise SemAuthenticationError(
            f"SEM message too short for a {digest_length}-byte HMAC: {len(data)} bytes"
        )
    hmacced_data = data[: len(data) - digest_length]
    tag = data[len(data) - digest_length :]

    expected = _compute_hmac(hmacced_data, aes_key, hmac_mode, provider)
    if not hmac.compare_digest(expected, tag):
        logger.warning("SEM HMAC-%s verification failed", hmac_mode.name)
        raise SemAuthenticationError("SEM message authentication failed - data may be tampered")


def _compute_hmac(data: bytes, key: bytes, hmac_mode: HMACMode, provider: CryptoProvider) -> bytes:
    algorithm = hmac_mode.hash_algorithm
    if algorithm is None:
        raise ValueError("HMACMode.NONE has no digest")
    return provider.hmac(algorithm, key, data)


def encrypt_message(
    message: str,
    public_pem: str,
    mode: SemMode | None = None,
    provider: CryptoProvider | None = None,
) -> str:
    """Encrypt text and return the SEM message as base64."""
    return to_base64(encrypt_data(encode_utf8(message), public_pem, mode, provider))


def decrypt_message(
    message: str,
    private_pem: str,
    provider: CryptoProvider | None = None,
) -> str:
    """Decrypt a base64 SEM message back to text.

    Raises:
        Base64DecodeError: If ``message`` is not valid base64.
        Utf8DecodeError: If the plaintext is not valid UTF-8.
    """
    return decode_utf8(decrypt_data(from_base64(message), private_pem, provider))
