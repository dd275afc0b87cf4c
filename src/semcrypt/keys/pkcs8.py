"""PKCS#8 / SubjectPublicKeyInfo envelope handling for RSA keys.

PKCS#1 is the canonical form used everywhere else in semcrypt. A PKCS#8
private key wraps the PKCS#1 body as::

    SEQUENCE { INTEGER version, AlgorithmIdentifier, OCTET STRING { body } }

and a SubjectPublicKeyInfo public key as::

    SEQUENCE { AlgorithmIdentifier, BIT STRING { 0x00, body } }

where AlgorithmIdentifier is the fixed rsaEncryption sequence.
"""

from __future__ import annotations

from ..constants import (
    ASN1_BIT_STRING,
    ASN1_INTEGER,
    ASN1_OCTET_STRING,
    ASN1_SEQUENCE,
    RSA_ALGORITHM_IDENTIFIER,
)
from ..errors import Asn1ParseError
from .asn1 import DerReader, encode_length


def strip_private_key_header(der_key: bytes) -> bytes:
    """Return the PKCS#1 body of an RSA private key.

    Keys that are already PKCS#1 are returned unchanged.

    Args:
        der_key: PKCS#1 or PKCS#8 DER private key.

    Returns:
        The PKCS#1 DER private key.

    Raises:
        Asn1ParseError: If the structure is not an RSA private key.
    """
    reader = DerReader(der_key)
    reader.expect_tag(ASN1_SEQUENCE)
    reader.read_length()

    # version
    reader.expect_tag(ASN1_INTEGER)
    reader.skip(reader.read_length())

    # PKCS#1 continues directly with the modulus
    if reader.peek() == ASN1_INTEGER:
        return bytes(der_key)

    reader.expect_bytes(RSA_ALGORITHM_IDENTIFIER, what="algorithm identifier")
    reader.expect_tag(ASN1_OCTET_STRING)
    reader.read_length()

    if reader.peek() != ASN1_SEQUENCE:
        raise Asn1ParseError(f"Expected PKCS#1 SEQUENCE at offset {reader.offset}")
    return reader.rest()


def strip_public_key_header(der_key: bytes) -> bytes:
    """Return the PKCS#1 body of an RSA public key.

    Keys that are already PKCS#1 are returned unchanged.

    Raises:
        Asn1ParseError: If the structure is not an RSA public key.
    """
    reader = DerReader(der_key)
    reader.expect_tag(ASN1_SEQUENCE)
    reader.read_length()

    # PKCS#1 RSAPublicKey starts with the modulus
    if reader.peek() == ASN1_INTEGER:
        return bytes(der_key)

    reader.expect_bytes(RSA_ALGORITHM_IDENTIFIER, what="algorithm identifier")
    reader.expect_tag(ASN1_BIT_STRING)
    reader.read_length()
    reader.expect_byte(0x00, what="unused-bits byte")
    return reader.rest()


def add_public_key_header(der_key: bytes) -> bytes:
    """Wrap a PKCS#1 RSA public key in a SubjectPublicKeyInfo envelope."""
    bit_string = bytes([ASN1_BIT_STRING]) + encode_length(len(der_key) + 1) + b"\x00" + der_key
    body = RSA_ALGORITHM_IDENTIFIER + bit_string
    return bytes([ASN1_SEQUENCE]) + encode_length(len(body)) + body
