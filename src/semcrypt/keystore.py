"""Key storage interface for semcrypt."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any

from .errors import KeyNotFoundError

logger = logging.getLogger("semcrypt")


class KeyStore(ABC):
    """Stores PEM keys under application-defined tags."""

    @abstractmethod
    def upsert(self, tag: str, pem_key: str, options: dict[str, Any] | None = None) -> None:
        """Store ``pem_key`` under ``tag``, replacing any key already stored there."""

    @abstractmethod
    def get(self, tag: str) -> str:
        """Return the PEM key stored under ``tag``.

        Raises:
            KeyNotFoundError: If nothing is stored under ``tag``.
        """

    @abstractmethod
    def delete(self, tag: str) -> None:
        """Remove the key stored under ``tag``.

        Raises:
            KeyNotFoundError: If nothing is stored under ``tag``.
        """


def _validate_tag(tag: str) -> None:
    if not tag:
        raise ValueError("Key tag cannot be empty")


class InMemoryKeyStore(KeyStore):
    """Process-local key store. Nothing is persisted.

    Options passed to ``upsert`` are kept alongside the key and can be read
    back with ``get_options``.
    """

    def __init__(self) -> None:
        self._keys: dict[str, tuple[str, dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def upsert(self, tag: str, pem_key: str, options: dict[str, Any] | None = None) -> None:
        _validate_tag(tag)
        with self._lock:
            replaced = tag in self._keys
            self._keys[tag] = (pem_key, dict(options or {}))
        logger.debug("Stored key %r (replaced=%s)", tag, replaced)

    def get(self, tag: str) -> str:
        return self._entry(tag)[0]

    def get_options(self, tag: str) -> dict[str, Any]:
        return dict(self._entry(tag)[1])

    def delete(self, tag: str) -> None:
        _validate_tag(tag)
        with self._lock:
            if self._keys.pop(tag, None) is None:
                raise KeyNotFoundError(f"No key stored under tag {tag!r}")
        logger.debug("Deleted key %r", tag)

    def _entry(self, tag: str) -> tuple[str, dict[str, Any]]:
        _validate_tag(tag)
        with self._lock:
            try:
                return self._keys[tag]
            except KeyError:
                raise KeyNotFoundError(f"No key stored under tag {tag!r}") from None

    def __contains__(self, tag: object) -> bool:
        with self._lock:
            return tag in self._keys

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)
