"""Crypto provider interface for semcrypt."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..constants import DEFAULT_RSA_KEY_SIZE
from ..errors import NotAvailableError
from ..types import AsymmetricPadding, BlockMode, CryptoFeature, HashAlgorithm, OpMode


class CryptoProvider(ABC):
    """Primitive operations the key codecs and SEM engine are built on.

    Implementations must be safe to call from several threads at once and
    hold no per-call state.
    """

    @abstractmethod
    def is_available(self, feature: CryptoFeature) -> bool:
        """Check whether an optional primitive family can be used."""

    def require(self, feature: CryptoFeature) -> None:
        """Raise ``NotAvailableError`` unless ``feature`` is available."""
        if not self.is_available(feature):
            raise NotAvailableError(f"{feature.value.upper()} is not available in this provider")

    @abstractmethod
    def random_bytes(self, size: int) -> bytes:
        """Return ``size`` cryptographically secure random bytes."""

    @abstractmethod
    def hash(self, algorithm: HashAlgorithm, data: bytes) -> bytes:
        """Return the digest of ``data``."""

    @abstractmethod
    def hmac(self, algorithm: HashAlgorithm, key: bytes, data: bytes) -> bytes:
        """Return the HMAC of ``data`` under ``key``."""

    @abstractmethod
    def symmetric_crypt(
        self,
        op: OpMode,
        block_mode: BlockMode,
        data: bytes,
        key: bytes,
        iv: bytes,
    ) -> bytes:
        """AES encrypt or decrypt.

        CBC uses PKCS#7 padding. GCM uses no associated data; encryption
        returns ``ciphertext + tag`` and decryption expects the same layout.
        """

    @abstractmethod
    def rsa_generate_key_pair(self, bits: int = DEFAULT_RSA_KEY_SIZE) -> tuple[bytes, bytes]:
        """Generate an RSA key pair as (PKCS#1 private DER, PKCS#1 public DER)."""

    @abstractmethod
    def rsa_block_size(self, der_key: bytes) -> int:
        """Return the modulus size in bytes of a PKCS#1 DER private key."""

    @abstractmethod
    def rsa_encrypt(
        self,
        data: bytes,
        der_key: bytes,
        padding: AsymmetricPadding,
        digest: HashAlgorithm,
    ) -> bytes:
        """Encrypt ``data`` with a PKCS#1 DER public key."""

    @abstractmethod
    def rsa_decrypt(
        self,
        data: bytes,
        der_key: bytes,
        padding: AsymmetricPadding,
        digest: HashAlgorithm,
    ) -> tuple[bytes, bytes]:
        """Decrypt the first key-sized block of ``data`` with a PKCS#1 DER private key.

        Returns:
            (plaintext, unconsumed tail of ``data``).

        Raises:
            DecodeError: If ``data`` is shorter than one block or decryption fails.
        """
