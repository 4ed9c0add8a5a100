"""
API Key Store

In-memory storage of API keys keyed by identifier. Identifier uniqueness is
enforced here, at insertion time, not by the identifier generator.
"""

import logging
import threading
from typing import TYPE_CHECKING

from authkeys.errors import KeyIdConflictError, KeyNotFoundError
from authkeys.models.key import Key

if TYPE_CHECKING:
    from authkeys.services.key_builder import KeyBuilder

logger = logging.getLogger(__name__)


class InMemoryKeyStore:
    """Thread-safe in-memory store of API keys."""

    def __init__(self):
        self._keys: dict[str, Key] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key_id: object) -> bool:
        return key_id in self._keys

    def insert(self, key: Key) -> Key:
        """
        Store a new key.

        Args:
            key: Key to store

        Returns:
            The stored key

        Raises:
            KeyIdConflictError: If a key with the same id is already stored
        """
        with self._lock:
            if key.id in self._keys:
                raise KeyIdConflictError(key.id)
            self._keys[key.id] = key

        logger.info("API key stored", extra={"api_key_id": key.id[:8]})
        return key

    def get(self, key_id: str) -> Key | None:
        """
        Get a key by id.

        Args:
            key_id: Key identifier

        Returns:
            Key or None if not found
        """
        return self._keys.get(key_id)

    def replace(self, key: Key) -> Key:
        """
        Overwrite a stored key with its updated version.

        Raises:
            KeyNotFoundError: If no key is stored under ``key.id``
        """
        with self._lock:
            if key.id not in self._keys:
                raise KeyNotFoundError(key.id)
            self._keys[key.id] = key
        return key

    def delete(self, key_id: str) -> bool:
        """
        Delete a key.

        Args:
            key_id: Key identifier

        Returns:
            True if a key was removed, False if none was stored
        """
        with self._lock:
            removed = self._keys.pop(key_id, None)

        if removed is not None:
            logger.info("API key deleted", extra={"api_key_id": key_id[:8]})
        return removed is not None

    def list_keys(self) -> list[Key]:
        """List all keys, oldest first."""
        with self._lock:
            keys = list(self._keys.values())
        return sorted(keys, key=lambda k: k.created_at)

    def ensure_default_keys(self, builder: "KeyBuilder") -> list[Key]:
        """
        Seed the default admin and search keys into an empty store.

        Does nothing when the store already holds keys or seeding is disabled
        in the builder's settings.

        Args:
            builder: Builder used to create the default keys

        Returns:
            The keys that were created (empty if nothing was seeded)
        """
        if not builder.settings.seed_default_keys:
            return []

        with self._lock:
            if self._keys:
                return []
            created = [builder.default_admin(), builder.default_search()]
            for key in created:
                self._keys[key.id] = key

        logger.info("Default API keys created", extra={"count": len(created)})
        return created
