"""Type definitions for semcrypt."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .constants import AES128_CBC_INFO, AES256_CBC_INFO, SEM_FIXED_HEADER_SIZE, SEM_PROTOCOL_VERSION


class HashAlgorithm(str, Enum):
    """Digest algorithms offered by the crypto provider."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_length(self) -> int:
        return _HASH_DIGEST_LENGTHS[self]


_HASH_DIGEST_LENGTHS = {
    HashAlgorithm.MD5: 16,
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA224: 28,
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA384: 48,
    HashAlgorithm.SHA512: 64,
}


class OpMode(str, Enum):
    """Direction of a symmetric operation."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class AsymmetricPadding(str, Enum):
    """RSA padding schemes."""

    PKCS1 = "pkcs1"
    OAEP = "oaep"


class CryptoFeature(str, Enum):
    """Optional provider capabilities that may be missing at runtime."""

    GCM = "gcm"
    RSA = "rsa"


class AESMode(IntEnum):
    """AES key size selector. The value is the SEM wire identifier."""

    AES128 = 0
    AES192 = 1
    AES256 = 2

    @property
    def key_size(self) -> int:
        """Key size in bytes."""
        return _AES_KEY_SIZES[self]


_AES_KEY_SIZES = {
    AESMode.AES128: 16,
    AESMode.AES192: 24,
    AESMode.AES256: 32,
}


class BlockMode(IntEnum):
    """Symmetric block mode. The value is the SEM wire identifier."""

    CBC = 0
    GCM = 1

    @property
    def iv_size(self) -> int:
        """IV (nonce) size in bytes."""
        return _BLOCK_IV_SIZES[self]


_BLOCK_IV_SIZES = {
    BlockMode.CBC: 16,
    BlockMode.GCM: 12,
}


class HMACMode(IntEnum):
    """Message authentication selector. The value is the SEM wire identifier."""

    NONE = 0
    SHA256 = 1
    SHA512 = 2

    @property
    def hash_algorithm(self) -> HashAlgorithm | None:
        return _HMAC_HASHES[self]

    @property
    def digest_length(self) -> int:
        """Length of the appended tag in bytes (0 when no HMAC)."""
        algorithm = self.hash_algorithm
        return algorithm.digest_length if algorithm is not None else 0


_HMAC_HASHES: dict[HMACMode, HashAlgorithm | None] = {
    HMACMode.NONE: None,
    HMACMode.SHA256: HashAlgorithm.SHA256,
    HMACMode.SHA512: HashAlgorithm.SHA512,
}


@dataclass(frozen=True)
class SemMode:
    """Algorithm selection for a SEM message.

    Attributes:
        aes: AES key size.
        block: Symmetric block mode.
        hmac: HMAC digest, or HMACMode.NONE for no authentication tag.
        version: Protocol version, always 0.
    """

    aes: AESMode = AESMode.AES256
    block: BlockMode = BlockMode.CBC
    hmac: HMACMode = HMACMode.SHA256
    version: int = field(default=SEM_PROTOCOL_VERSION, init=False)

    @property
    def header_size(self) -> int:
        """Plain header size: 4 id bytes + key + IV."""
        return SEM_FIXED_HEADER_SIZE + self.aes.key_size + self.block.iv_size


class EncryptedPemMode(str, Enum):
    """Cipher used by the legacy OpenSSL encrypted PEM format."""

    AES128CBC = "AES-128-CBC"
    AES256CBC = "AES-256-CBC"

    @property
    def key_size(self) -> int:
        return 16 if self is EncryptedPemMode.AES128CBC else 32

    @property
    def info(self) -> str:
        """The ``Proc-Type``/``DEK-Info`` prefix preceding the hex IV."""
        return AES128_CBC_INFO if self is EncryptedPemMode.AES128CBC else AES256_CBC_INFO
