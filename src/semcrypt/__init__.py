"""semcrypt - RSA key format conversion and SEM hybrid encryption.

Converts RSA keys between PEM and PKCS#1/PKCS#8 DER, reads and writes the
legacy OpenSSL encrypted PEM format, and implements SEM (Simple Encrypted
Message): RSA-OAEP key wrapping plus AES-CBC/GCM with an optional HMAC.

Example:
    ```python
    from semcrypt import AESMode, BlockMode, HMACMode, SemMode
    from semcrypt import decrypt_message, encrypt_message, generate_key_pair

    private_pem, public_pem = generate_key_pair(2048)
    mode = SemMode(aes=AESMode.AES256, block=BlockMode.CBC, hmac=HMACMode.SHA256)

    ciphertext = encrypt_message("hello world", public_pem, mode)
    print(decrypt_message(ciphertext, private_pem))
    ```
"""

from .constants import DEFAULT_RSA_KEY_SIZE, PEM_LINE_LENGTH, SEM_PROTOCOL_VERSION
from .errors import (
    Asn1ParseError,
    Base64DecodeError,
    BufferTooSmallError,
    CryptoProviderError,
    DecodeError,
    KeyNotFoundError,
    KeyStoreError,
    NotAvailableError,
    ParamError,
    PemParseError,
    RNGFailureError,
    SemAuthenticationError,
    SemCryptError,
    SemParseError,
    SemUnsupportedVersionError,
    UnknownError,
    Utf8DecodeError,
)
from .keys import (
    decrypt_private_pem,
    encrypt_private_pem,
    generate_key_pair,
    private_der_to_pem,
    private_pem_to_der,
    public_der_to_pem,
    public_der_to_pkcs8_pem,
    public_pem_to_der,
)
from .keystore import InMemoryKeyStore, KeyStore
from .provider import (
    CryptoProvider,
    DefaultCryptoProvider,
    get_default_provider,
    set_default_provider,
)
from .sem import decrypt_data, decrypt_message, encrypt_data, encrypt_message
from .types import (
    AESMode,
    AsymmetricPadding,
    BlockMode,
    CryptoFeature,
    EncryptedPemMode,
    HashAlgorithm,
    HMACMode,
    OpMode,
    SemMode,
)

__version__ = "0.1.0"

__all__ = [
    # Key conversion
    "private_pem_to_der",
    "private_der_to_pem",
    "public_pem_to_der",
    "public_der_to_pem",
    "public_der_to_pkcs8_pem",
    "encrypt_private_pem",
    "decrypt_private_pem",
    "generate_key_pair",
    # SEM
    "encrypt_data",
    "decrypt_data",
    "encrypt_message",
    "decrypt_message",
    # Providers and storage
    "CryptoProvider",
    "DefaultCryptoProvider",
    "get_default_provider",
    "set_default_provider",
    "KeyStore",
    "InMemoryKeyStore",
    # Constants
    "DEFAULT_RSA_KEY_SIZE",
    "PEM_LINE_LENGTH",
    "SEM_PROTOCOL_VERSION",
    # Types
    "AESMode",
    "AsymmetricPadding",
    "BlockMode",
    "CryptoFeature",
    "EncryptedPemMode",
    "HashAlgorithm",
    "HMACMode",
    "OpMode",
    "SemMode",
    # Errors
    "SemCryptError",
    "Base64DecodeError",
    "Utf8DecodeError",
    "Asn1ParseError",
    "PemParseError",
    "SemParseError",
    "SemUnsupportedVersionError",
    "SemAuthenticationError",
    "CryptoProviderError",
    "ParamError",
    "BufferTooSmallError",
    "DecodeError",
    "RNGFailureError",
    "NotAvailableError",
    "UnknownError",
    "KeyStoreError",
    "KeyNotFoundError",
    # Version
    "__version__",
]
