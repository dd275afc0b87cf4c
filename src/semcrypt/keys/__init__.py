"""RSA key format conversions for semcrypt.

All functions normalize to PKCS#1 DER, the form the crypto provider consumes.
"""

from __future__ import annotations

from ..constants import DEFAULT_RSA_KEY_SIZE
from ..provider import CryptoProvider, get_default_provider
from ..types import EncryptedPemMode
from . import pem
from .encrypted_pem import decrypt_der, encrypt_der
from .pkcs8 import add_public_key_header, strip_private_key_header, strip_public_key_header


def private_pem_to_der(pem_key: str) -> bytes:
    """Convert a private key PEM (PKCS#1 or PKCS#8) to PKCS#1 DER."""
    return strip_private_key_header(pem.private_pem_to_der(pem_key))


def private_der_to_pem(der_key: bytes) -> str:
    """Convert a PKCS#1 DER private key to ``RSA PRIVATE KEY`` PEM."""
    return pem.private_der_to_pem(der_key)


def public_pem_to_der(pem_key: str) -> bytes:
    """Convert a ``PUBLIC KEY`` PEM (PKCS#1 or SubjectPublicKeyInfo) to PKCS#1 DER."""
    return strip_public_key_header(pem.public_pem_to_der(pem_key))


def public_der_to_pem(der_key: bytes) -> str:
    """Convert a PKCS#1 DER public key to ``PUBLIC KEY`` PEM as-is."""
    return pem.public_der_to_pem(der_key)


def public_der_to_pkcs8_pem(der_key: bytes) -> str:
    """Convert a PKCS#1 DER public key to SubjectPublicKeyInfo ``PUBLIC KEY`` PEM."""
    return pem.public_der_to_pem(add_public_key_header(der_key))


def encrypt_private_pem(
    pem_key: str,
    passphrase: str,
    mode: EncryptedPemMode,
    provider: CryptoProvider | None = None,
) -> str:
    """Encrypt a private key PEM into the legacy OpenSSL encrypted PEM format."""
    return encrypt_der(private_pem_to_der(pem_key), passphrase, mode, provider)


def decrypt_private_pem(
    pem_key: str,
    passphrase: str,
    provider: CryptoProvider | None = None,
) -> str:
    """Decrypt a legacy encrypted PEM into a plain ``RSA PRIVATE KEY`` PEM."""
    return pem.private_der_to_pem(decrypt_der(pem_key, passphrase, provider))


def generate_key_pair(
    bits: int = DEFAULT_RSA_KEY_SIZE,
    provider: CryptoProvider | None = None,
) -> tuple[str, str]:
    """Generate an RSA key pair.

    Args:
        bits: Modulus size in bits.
        provider: Crypto provider, defaults to the process-wide one.

    Returns:
        (private key as ``RSA PRIVATE KEY`` PEM, public key as SubjectPublicKeyInfo PEM).
    """
    provider = provider or get_default_provider()
    private_der, public_der = provider.rsa_generate_key_pair(bits)
    return private_der_to_pem(private_der), public_der_to_pkcs8_pem(public_der)


__all__ = [
    "add_public_key_header",
    "decrypt_private_pem",
    "encrypt_private_pem",
    "generate_key_pair",
    "private_der_to_pem",
    "private_pem_to_der",
    "public_der_to_pem",
    "public_der_to_pkcs8_pem",
    "public_pem_to_der",
    "strip_private_key_header",
    "strip_public_key_header",
]
