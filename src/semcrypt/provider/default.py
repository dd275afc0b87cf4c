"""Crypto provider backed by the ``cryptography`` package."""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
from collections.abc import Iterable

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives import padding as sym_padding
from cryptography.hazmat.primitives.asymmetric import padding as asym_padding
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..constants import AES_BLOCK_SIZE, AES_GCM_TAG_SIZE, DEFAULT_RSA_KEY_SIZE, RSA_PUBLIC_EXPONENT
from ..errors import (
    BufferTooSmallError,
    DecodeError,
    NotAvailableError,
    ParamError,
    RNGFailureError,
)
from ..types import AsymmetricPadding, BlockMode, CryptoFeature, HashAlgorithm, OpMode
from .base import CryptoProvider

logger = logging.getLogger("semcrypt")

_AES_KEY_SIZES = (16, 24, 32)

_HASH_CLASSES: dict[HashAlgorithm, type[hashes.HashAlgorithm]] = {
    HashAlgorithm.MD5: hashes.MD5,
    HashAlgorithm.SHA1: hashes.SHA1,
    HashAlgorithm.SHA224: hashes.SHA224,
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA384: hashes.SHA384,
    HashAlgorithm.SHA512: hashes.SHA512,
}


def _detect_gcm() -> bool:
    try:
        Cipher(algorithms.AES(bytes(16)), modes.GCM(bytes(12))).encryptor()
    except UnsupportedAlgorithm:
        return False
    return True


class DefaultCryptoProvider(CryptoProvider):
    """Crypto provider using ``cryptography`` for AES and RSA.

    Digests and HMACs come from ``hashlib``/``hmac`` and randomness from
    ``os.urandom``. Feature detection runs once, at construction.

    Args:
        disabled_features: Features to report as unavailable even if the
            backend supports them.
    """

    def __init__(self, disabled_features: Iterable[CryptoFeature] = ()) -> None:
        detected = {CryptoFeature.GCM: _detect_gcm(), CryptoFeature.RSA: True}
        disabled = set(disabled_features)
        self._features = frozenset(
            feature for feature, present in detected.items() if present and feature not in disabled
        )

    def is_available(self, feature: CryptoFeature) -> bool:
        return feature in self._features

    def random_bytes(self, size: int) -> bytes:
        if size < 0:
            raise ParamError(f"Cannot generate {size} random bytes")
        try:
            return os.urandom(size)
        except OSError as e:
            raise RNGFailureError(f"Entropy source unavailable: {e}") from e

    def hash(self, algorithm: HashAlgorithm, data: bytes) -> bytes:
        try:
            return hashlib.new(algorithm.value, data).digest()
        except ValueError as e:
            raise NotAvailableError(f"Hash {algorithm.value} is not available: {e}") from e

    def hmac(self, algorithm: HashAlgorithm, key: bytes, data: bytes) -> bytes:
        try:
            return hmac.new(key, data, algorithm.value).digest()
        except ValueError as e:
            raise NotAvailableError(f"HMAC-{algorithm.value} is not available: {e}") from e

    def symmetric_crypt(
        self,
        op: OpMode,
        block_mode: BlockMode,
        data: bytes,
        key: bytes,
        iv: bytes,
    ) -> bytes:
        if len(key) not in _AES_KEY_SIZES:
            raise ParamError(f"Invalid AES key size: {len(key)} bytes")
        if len(iv) != block_mode.iv_size:
            raise ParamError(
                f"Invalid IV size for {block_mode.name}: {len(iv)} bytes, "
                f"expected {block_mode.iv_size}"
            )
        if block_mode is BlockMode.GCM:
            self.require(CryptoFeature.GCM)
            return self._gcm_crypt(op, data, key, iv)
        return self._cbc_crypt(op, data, key, iv)

    def _cbc_crypt(self, op: OpMode, data: bytes, key: bytes, iv: bytes) -> bytes:
        cipher = Cipher(algorithms.AES(key), modes.CBC(iv))
        if op is OpMode.ENCRYPT:
            padder = sym_padding.PKCS7(AES_BLOCK_SIZE * 8).padder()
            padded = padder.update(data) + padder.finalize()
            encryptor = cipher.encryptor()
            return encryptor.update(padded) + encryptor.finalize()

        if len(data) == 0 or len(data) % AES_BLOCK_SIZE != 0:
            raise DecodeError(
                f"CBC ciphertext length {len(data)} is not a positive multiple of {AES_BLOCK_SIZE}"
            )
        decryptor = cipher.decryptor()
        padded = decryptor.update(data) + decryptor.finalize()
        unpadder = sym_padding.PKCS7(AES_BLOCK_SIZE * 8).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as e:
            raise DecodeError(f"Invalid PKCS#7 padding: {e}") from e

    def _gcm_crypt(self, op: OpMode, data: bytes, key: bytes, iv: bytes) -> bytes:
        aesgcm = AESGCM(key)
        if op is OpMode.ENCRYPT:
            return aesgcm.encrypt(iv, data, None)

        if len(data) < AES_GCM_TAG_SIZE:
            raise BufferTooSmallError(
                f"GCM ciphertext of {len(data)} bytes cannot hold a {AES_GCM_TAG_SIZE}-byte tag"
            )
        try:
            return aesgcm.decrypt(iv, data, None)
        except InvalidTag as e:
            raise DecodeError("GCM authentication tag mismatch") from e

    def rsa_generate_key_pair(self, bits: int = DEFAULT_RSA_KEY_SIZE) -> tuple[bytes, bytes]:
        self.require(CryptoFeature.RSA)
        try:
            private_key = rsa.generate_private_key(public_exponent=RSA_PUBLIC_EXPONENT, key_size=bits)
        except ValueError as e:
            raise ParamError(f"Invalid RSA key size {bits}: {e}") from e
        logger.debug("Generated %d-bit RSA key pair", bits)

        private_der = private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
        public_der = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.PKCS1,
        )
        return private_der, public_der

    def rsa_block_size(self, der_key: bytes) -> int:
        self.require(CryptoFeature.RSA)
        return _block_size(_load_private_key(der_key))

    def rsa_encrypt(
        self,
        data: bytes,
        der_key: bytes,
        padding: AsymmetricPadding,
        digest: HashAlgorithm,
    ) -> bytes:
        self.require(CryptoFeature.RSA)
        public_key = _load_public_key(der_key)
        try:
            return public_key.encrypt(data, _asymmetric_padding(padding, digest))
        except ValueError as e:
            raise ParamError(f"RSA encryption failed: {e}") from e

    def rsa_decrypt(
        self,
        data: bytes,
        der_key: bytes,
        padding: AsymmetricPadding,
        digest: HashAlgorithm,
    ) -> tuple[bytes, bytes]:
        self.require(CryptoFeature.RSA)
        private_key = _load_private_key(der_key)
        block_size = _block_size(private_key)
        if len(data) < block_size:
            raise DecodeError(
                f"RSA ciphertext of {len(data)} bytes is shorter than one {block_size}-byte block"
            )
        try:
            plaintext = private_key.decrypt(data[:block_size], _asymmetric_padding(padding, digest))
        except ValueError as e:
            raise DecodeError(f"RSA decryption failed: {e}") from e
        return plaintext, data[block_size:]


def _asymmetric_padding(
    padding: AsymmetricPadding, digest: HashAlgorithm
) -> asym_padding.AsymmetricPadding:
    if padding is AsymmetricPadding.PKCS1:
        return asym_padding.PKCS1v15()
    if digest is HashAlgorithm.MD5:
        raise ParamError("MD5 is not an accepted OAEP digest")
    algorithm = _HASH_CLASSES[digest]()
    return asym_padding.OAEP(
        mgf=asym_padding.MGF1(algorithm=algorithm), algorithm=algorithm, label=None
    )


def _block_size(private_key: rsa.RSAPrivateKey) -> int:
    return (private_key.key_size + 7) // 8


def _load_public_key(der_key: bytes) -> rsa.RSAPublicKey:
    # Accepts both PKCS#1 RSAPublicKey and SubjectPublicKeyInfo
    try:
        key = serialization.load_der_public_key(der_key)
    except (ValueError, UnsupportedAlgorithm) as e:
        raise DecodeError(f"Cannot import RSA public key: {e}") from e
    if not isinstance(key, rsa.RSAPublicKey):
        raise ParamError(f"Expected an RSA public key, got {type(key).__name__}")
    return key


def _load_private_key(der_key: bytes) -> rsa.RSAPrivateKey:
    try:
        key = serialization.load_der_private_key(der_key, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise DecodeError(f"Cannot import RSA private key: {e}") from e
    if not isinstance(key, rsa.RSAPrivateKey):
        raise ParamError(f"Expected an RSA private key, got {type(key).__name__}")
    return key
