"""Shared fixtures for semcrypt tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


@dataclass
class RsaKeyMaterial:
    """One RSA key pair in every encoding the tests need."""

    private_pkcs1_der: bytes
    private_pkcs8_der: bytes
    public_pkcs1_der: bytes
    public_spki_der: bytes
    private_pkcs1_pem: str
    private_pkcs8_pem: str
    public_spki_pem: str


def make_key_material(bits: int) -> RsaKeyMaterial:
    """Generate an RSA key and serialize it with ``cryptography``."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=bits)
    public_key = key.public_key()

    def private(encoding: serialization.Encoding, fmt: serialization.PrivateFormat) -> bytes:
        return key.private_bytes(encoding, fmt, serialization.NoEncryption())

    enc = serialization.Encoding
    return RsaKeyMaterial(
        private_pkcs1_der=private(enc.DER, serialization.PrivateFormat.TraditionalOpenSSL),
        private_pkcs8_der=private(enc.DER, serialization.PrivateFormat.PKCS8),
        public_pkcs1_der=public_key.public_bytes(enc.DER, serialization.PublicFormat.PKCS1),
        public_spki_der=public_key.public_bytes(
            enc.DER, serialization.PublicFormat.SubjectPublicKeyInfo
        ),
        private_pkcs1_pem=private(enc.PEM, serialization.PrivateFormat.TraditionalOpenSSL).decode(),
        private_pkcs8_pem=private(enc.PEM, serialization.PrivateFormat.PKCS8).decode(),
        public_spki_pem=public_key.public_bytes(
            enc.PEM, serialization.PublicFormat.SubjectPublicKeyInfo
        ).decode(),
    )


@pytest.fixture(scope="session")
def rsa_keys() -> RsaKeyMaterial:
    """A 2048-bit RSA key pair."""
    return make_key_material(2048)


@pytest.fixture(scope="session")
def other_rsa_keys() -> RsaKeyMaterial:
    """A second, unrelated 2048-bit RSA key pair."""
    return make_key_material(2048)
