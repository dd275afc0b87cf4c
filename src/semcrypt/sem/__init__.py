"""SEM hybrid encryption for semcrypt."""

from .engine import check_hmac, decrypt_data, decrypt_message, encrypt_data, encrypt_message
from .header import build_header, parse_header

__all__ = [
    "build_header",
    "check_hmac",
    "decrypt_data",
    "decrypt_message",
    "encrypt_data",
    "encrypt_message",
    "parse_header",
]
