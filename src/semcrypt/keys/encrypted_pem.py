"""Legacy OpenSSL encrypted private key PEM (``Proc-Type: 4,ENCRYPTED``).

WARNING: this format is insecure by design. The key is derived from the
passphrase with a single MD5 round (``EVP_BytesToKey``) and the ciphertext is
not authenticated: a wrong passphrase is only noticed when PKCS#7 unpadding
happens to fail, otherwise it silently yields garbage. It is supported only
for interoperability with existing OpenSSL-produced key files.
"""

from __future__ import annotations

import logging

from ..constants import (
    ENCRYPTED_PEM_IV_SIZE,
    ENCRYPTED_PEM_SALT_SIZE,
    RSA_PRIVATE_KEY_PREFIX,
    RSA_PRIVATE_KEY_SUFFIX,
)
from ..errors import PemParseError
from ..provider import CryptoProvider, get_default_provider
from ..types import BlockMode, EncryptedPemMode, HashAlgorithm, OpMode
from ..utils.encoding import encode_utf8, from_base64, from_hex, to_base64_lines, to_hex
from .pem import PRIVATE_KEY_MARKERS, add_header, strip_header

logger = logging.getLogger("semcrypt")

_IV_HEX_LENGTH = ENCRYPTED_PEM_IV_SIZE * 2


def derive_key(
    passphrase: str,
    iv: bytes,
    mode: EncryptedPemMode,
    provider: CryptoProvider | None = None,
) -> bytes:
    """Derive the AES key from a passphrase, OpenSSL ``EVP_BytesToKey`` style.

    The salt is the first 8 bytes of the IV::

        key128 = MD5(passphrase + salt)
        key256 = key128 + MD5(key128 + passphrase + salt)

    Args:
        passphrase: The passphrase, encoded as UTF-8.
        iv: The 16-byte IV from the ``DEK-Info`` line.
        mode: Selects the 16- or 32-byte key.
        provider: Crypto provider, defaults to the process-wide one.

    Returns:
        The AES key.
    """
    provider = provider or get_default_provider()
    password = encode_utf8(passphrase)
    salt = iv[:ENCRYPTED_PEM_SALT_SIZE]

    key = provider.hash(HashAlgorithm.MD5, password + salt)
    if mode is EncryptedPemMode.AES256CBC:
        key += provider.hash(HashAlgorithm.MD5, key + password + salt)
    return key


def encrypt_der(
    der_key: bytes,
    passphrase: str,
    mode: EncryptedPemMode,
    provider: CryptoProvider | None = None,
) -> str:
    """Encrypt a DER private key into legacy encrypted ``RSA PRIVATE KEY`` PEM.

    Args:
        der_key: The DER private key.
        passphrase: Passphrase to derive the AES key from.
        mode: AES-128-CBC or AES-256-CBC.
        provider: Crypto provider, defaults to the process-wide one.

    Returns:
        The encrypted PEM text.
    """
    provider = provider or get_default_provider()
    iv = provider.random_bytes(ENCRYPTED_PEM_IV_SIZE)
    aes_key = derive_key(passphrase, iv, mode, provider)
    encrypted = provider.symmetric_crypt(OpMode.ENCRYPT, BlockMode.CBC, der_key, aes_key, iv)
    logger.debug("Encrypted %d byte private key with %s", len(der_key), mode.value)

    body = mode.info + to_hex(iv) + "\n\n" + to_base64_lines(encrypted)
    return add_header(body, RSA_PRIVATE_KEY_PREFIX, RSA_PRIVATE_KEY_SUFFIX)


def parse_dek_info(body: str) -> tuple[EncryptedPemMode, bytes]:
    """Read the cipher and IV from the two header lines of an encrypted body.

    Raises:
        PemParseError: If the header lines are missing or the IV is not hex.
    """
    for mode in EncryptedPemMode:
        if body.startswith(mode.info):
            iv_hex = body[len(mode.info) : len(mode.info) + _IV_HEX_LENGTH]
            try:
                iv = from_hex(iv_hex)
            except ValueError as e:
                raise PemParseError(f"Invalid DEK-Info IV: {e}") from e
            if len(iv) != ENCRYPTED_PEM_IV_SIZE:
                raise PemParseError(f"Invalid DEK-Info IV length: {len(iv)} bytes")
            return mode, iv
    raise PemParseError("Missing or unsupported Proc-Type/DEK-Info header")


def decrypt_der(
    pem_key: str,
    passphrase: str,
    provider: CryptoProvider | None = None,
) -> bytes:
    """Decrypt a legacy encrypted PEM private key to DER.

    A wrong passphrase either raises ``DecodeError`` (bad padding) or returns
    garbage; the format carries no integrity check.

    Raises:
        PemParseError: If the envelope or DEK-Info header is malformed.
        Base64DecodeError: If the body is not valid base64.
        DecodeError: If CBC decryption or unpadding fails.
    """
    provider = provider or get_default_provider()
    body = strip_header(pem_key, PRIVATE_KEY_MARKERS)
    mode, iv = parse_dek_info(body)
    aes_key = derive_key(passphrase, iv, mode, provider)

    encrypted = from_base64(body[len(mode.info) + _IV_HEX_LENGTH :], ignore_unknown=True)
    logger.debug("Decrypting %d byte private key with %s", len(encrypted), mode.value)
    return provider.symmetric_crypt(OpMode.DECRYPT, BlockMode.CBC, encrypted, aes_key, iv)
