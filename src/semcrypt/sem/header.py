"""SEM message header layout.

The plain header, encrypted as one RSA-OAEP block, is::

    version (1) | aes mode (1) | block mode (1) | hmac mode (1) | key | iv

Key and IV lengths follow from the mode bytes, so the total size is fixed for
a given mode. Parsing is performed in order:
1. Validate size - more than the 4 identifier bytes
2. Validate version - must be 0
3. Validate modes - each identifier byte names a known algorithm
4. Validate length - exactly 4 + key size + IV size
"""

from __future__ import annotations

from ..constants import SEM_FIXED_HEADER_SIZE, SEM_PROTOCOL_VERSION
from ..errors import SemParseError, SemUnsupportedVersionError
from ..types import AESMode, BlockMode, HMACMode, SemMode


def build_header(mode: SemMode, aes_key: bytes, iv: bytes) -> bytes:
    """Build the plain header for a message.

    Raises:
        ValueError: If key or IV length does not match the mode.
    """
    if len(aes_key) != mode.aes.key_size:
        raise ValueError(f"Invalid key size: {len(aes_key)}, expected {mode.aes.key_size}")
    if len(iv) != mode.block.iv_size:
        raise ValueError(f"Invalid IV size: {len(iv)}, expected {mode.block.iv_size}")
    return bytes([mode.version, mode.aes.value, mode.block.value, mode.hmac.value]) + aes_key + iv


def parse_header(header: bytes) -> tuple[SemMode, bytes, bytes]:
    """Parse a decrypted header.

    Args:
        header: The plain header recovered from the RSA block.

    Returns:
        (mode, AES key, IV).

    Raises:
        SemParseError: If the header is truncated, names an unknown
            algorithm, or has the wrong length for its modes.
        SemUnsupportedVersionError: If the version byte is not 0.
    """
    # Step 1: Validate size
    if len(header) <= SEM_FIXED_HEADER_SIZE:
        raise SemParseError(f"SEM header too short: {len(header)} bytes")

    # Step 2: Validate version
    _validate_version(header[0])

    # Step 3: Validate modes
    mode = _parse_mode(header[1], header[2], header[3])

    # Step 4: Validate length
    if len(header) != mode.header_size:
        raise SemParseError(
            f"Invalid SEM header length: {len(header)} bytes, expected {mode.header_size} "
            f"for {mode.aes.name}/{mode.block.name}"
        )

    key_end = SEM_FIXED_HEADER_SIZE + mode.aes.key_size
    return mode, header[SEM_FIXED_HEADER_SIZE:key_end], header[key_end:]


def _validate_version(version: int) -> None:
    if version != SEM_PROTOCOL_VERSION:
        raise SemUnsupportedVersionError(
            f"Unsupported SEM version: {version}, expected {SEM_PROTOCOL_VERSION}"
        )


def _parse_mode(aes_id: int, block_id: int, hmac_id: int) -> SemMode:
    try:
        aes = AESMode(aes_id)
    except ValueError as e:
        raise SemParseError(f"Unknown AES mode identifier: {aes_id}") from e
    try:
        block = BlockMode(block_id)
    except ValueError as e:
        raise SemParseError(f"Unknown block mode identifier: {block_id}") from e
    try:
        hmac = HMACMode(hmac_id)
    except ValueError as e:
        raise SemParseError(f"Unknown HMAC mode identifier: {hmac_id}") from e
    return SemMode(aes=aes, block=block, hmac=hmac)
