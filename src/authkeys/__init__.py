"""authkeys: API key records.

Records:
    from authkeys import Key, Action

Building and updating records from untyped input:
    from authkeys import KeyBuilder

Errors:
    from authkeys.errors import AuthKeyError, MissingParameterError
"""

from authkeys.errors import (
    AuthKeyError,
    InvalidActionsError,
    InvalidDescriptionError,
    InvalidExpiresAtError,
    InvalidIndexesError,
    KeyIdConflictError,
    KeyNotFoundError,
    MissingParameterError,
)
from authkeys.models.enums import Action
from authkeys.models.key import Key
from authkeys.repositories.key_store import InMemoryKeyStore
from authkeys.services.expiration import parse_expiration_date
from authkeys.services.key_builder import KeyBuilder

__all__ = [
    # Models
    "Action",
    "Key",
    # Services
    "KeyBuilder",
    "parse_expiration_date",
    # Repositories
    "InMemoryKeyStore",
    # Errors
    "AuthKeyError",
    "MissingParameterError",
    "InvalidDescriptionError",
    "InvalidActionsError",
    "InvalidIndexesError",
    "InvalidExpiresAtError",
    "KeyIdConflictError",
    "KeyNotFoundError",
]
