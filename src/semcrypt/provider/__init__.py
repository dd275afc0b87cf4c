"""Crypto provider selection for semcrypt."""

from __future__ import annotations

import threading

from .base import CryptoProvider
from .default import DefaultCryptoProvider

_default_provider: CryptoProvider | None = None
_default_provider_lock = threading.Lock()


def get_default_provider() -> CryptoProvider:
    """Return the process-wide crypto provider, creating it on first use."""
    global _default_provider
    if _default_provider is None:
        with _default_provider_lock:
            if _default_provider is None:
                _default_provider = DefaultCryptoProvider()
    return _default_provider


def set_default_provider(provider: CryptoProvider | None) -> None:
    """Replace the process-wide crypto provider.

    Passing None resets to a fresh ``DefaultCryptoProvider`` on next use.
    """
    global _default_provider
    with _default_provider_lock:
        _default_provider = provider


__all__ = [
    "CryptoProvider",
    "DefaultCryptoProvider",
    "get_default_provider",
    "set_default_provider",
]
