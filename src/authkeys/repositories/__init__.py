"""Repositories for API key storage."""

from authkeys.repositories.key_store import InMemoryKeyStore

__all__ = ["InMemoryKeyStore"]
