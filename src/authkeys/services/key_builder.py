"""
API Key Builder

Turns untyped request bodies (JSON-like mappings) into validated ``Key``
records, applies partial updates, and builds the default admin and search
keys.

Recognized input fields: ``description``, ``actions``, ``indexes`` and
``expiresAt``. Unknown fields are ignored.
"""

import logging
import random
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import StrictStr, TypeAdapter, ValidationError

from authkeys.config import Settings, get_settings
from authkeys.core.clock import Clock, utc_now
from authkeys.core.security import generate_key_id
from authkeys.errors import (
    AuthKeyError,
    InvalidActionsError,
    InvalidDescriptionError,
    InvalidIndexesError,
    MissingParameterError,
)
from authkeys.models.enums import Action
from authkeys.models.key import Key
from authkeys.services.expiration import parse_expiration_date

logger = logging.getLogger(__name__)

_description_adapter = TypeAdapter(StrictStr)
_actions_adapter = TypeAdapter(list[Action])
_indexes_adapter = TypeAdapter(list[StrictStr])

# (input name, record attribute) in validation order
UPDATABLE_FIELDS: tuple[tuple[str, str], ...] = (
    ("description", "description"),
    ("actions", "actions"),
    ("indexes", "indexes"),
    ("expiresAt", "expires_at"),
)


def _convert(adapter: TypeAdapter, value: Any, error_cls: type[AuthKeyError]) -> Any:
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        logger.debug("Rejected %s: %s", error_cls.field, e.errors(include_url=False))
        raise error_cls(value) from e


def parse_description(value: Any) -> str | None:
    """Validate a description; null clears it."""
    if value is None:
        return None
    return _convert(_description_adapter, value, InvalidDescriptionError)


def _require_array(value: Any, error_cls: type[AuthKeyError]) -> None:
    # sets would validate as lists in arbitrary order
    if not isinstance(value, (list, tuple)):
        logger.debug("Rejected %s: not an array", error_cls.field)
        raise error_cls(value)


def parse_actions(value: Any) -> list[Action]:
    """Validate a list of action names."""
    _require_array(value, InvalidActionsError)
    return _convert(_actions_adapter, value, InvalidActionsError)


def parse_indexes(value: Any) -> list[str]:
    """Validate a list of index names or patterns."""
    _require_array(value, InvalidIndexesError)
    return _convert(_indexes_adapter, value, InvalidIndexesError)


def _require_mapping(value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"API key input must be a mapping, got {type(value).__name__}")
    return value


class KeyBuilder:
    """
    Builds and updates API key records.

    The clock and random source are injected so records can be built
    deterministically in tests. The builder holds no mutable state and may be
    shared between threads.
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ):
        """
        Initialize the builder.

        Args:
            clock: Callable returning the current aware UTC datetime
            rng: Random source for identifiers (None = OS entropy)
            settings: Settings for default key descriptions (None = get_settings())
        """
        self.clock = clock
        self.rng = rng
        self.settings = settings or get_settings()

    def create(self, value: Mapping[str, Any]) -> Key:
        """
        Create a new API key from an untyped request body.

        ``actions``, ``indexes`` and ``expiresAt`` must be present (``expiresAt``
        may be null). Validation stops at the first invalid field.

        Args:
            value: Request body

        Returns:
            New key with a fresh identifier and identical created/updated times

        Raises:
            MissingParameterError: If a required field is absent
            InvalidDescriptionError: If description is not a string or null
            InvalidActionsError: If actions is not a list of action names
            InvalidIndexesError: If indexes is not a list of strings
            InvalidExpiresAtError: If expiresAt is malformed or not in the future
        """
        value = _require_mapping(value)
        now = self.clock()

        description = parse_description(value.get("description"))

        if "actions" not in value:
            raise MissingParameterError("actions")
        actions = parse_actions(value["actions"])

        if "indexes" not in value:
            raise MissingParameterError("indexes")
        indexes = parse_indexes(value["indexes"])

        if "expiresAt" not in value:
            raise MissingParameterError("expiresAt")
        expires_at = parse_expiration_date(value["expiresAt"], now=now)

        key = Key(
            description=description,
            id=generate_key_id(self.rng),
            actions=actions,
            indexes=indexes,
            expires_at=expires_at,
            created_at=now,
            updated_at=now,
        )

        logger.info(
            "API key created",
            extra={
                "api_key_id": key.id[:8],
                "actions": [action.value for action in key.actions],
                "indexes": key.indexes,
            },
        )
        return key

    def update(self, key: Key, value: Mapping[str, Any]) -> Key:
        """
        Apply a partial update to an existing key in place.

        Only fields present in ``value`` are changed; null clears
        ``description`` and ``expiresAt``. Every supplied field is validated
        before any is applied, so a failed update leaves the key untouched.
        ``id`` and ``created_at`` never change; ``updated_at`` is refreshed on
        success even when no field was supplied.

        Args:
            key: Key to update
            value: Request body

        Returns:
            The updated key (same instance)

        Raises:
            InvalidDescriptionError, InvalidActionsError, InvalidIndexesError,
            InvalidExpiresAtError: For the first invalid field, in the order
                description, actions, indexes, expiresAt
        """
        value = _require_mapping(value)
        now = self.clock()

        changes: dict[str, Any] = {}
        for input_name, attribute in UPDATABLE_FIELDS:
            if input_name in value:
                changes[attribute] = self._parse_field(input_name, value[input_name], now)

        for attribute, new_value in changes.items():
            setattr(key, attribute, new_value)
        key.updated_at = max(now, key.updated_at)

        logger.info(
            "API key updated",
            extra={"api_key_id": key.id[:8], "fields": sorted(changes)},
        )
        return key

    def default_admin(self) -> Key:
        """Build the default admin key: every action on every index, never expires."""
        return self._default_key(self.settings.default_admin_description, Action.ALL)

    def default_search(self) -> Key:
        """Build the default search key: search on every index, never expires."""
        return self._default_key(self.settings.default_search_description, Action.SEARCH)

    def _default_key(self, description: str, action: Action) -> Key:
        now = self.clock()
        return Key(
            description=description,
            id=generate_key_id(self.rng),
            actions=[action],
            indexes=["*"],
            expires_at=None,
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def _parse_field(input_name: str, raw: Any, now: datetime) -> Any:
        match input_name:
            case "description":
                return parse_description(raw)
            case "actions":
                return parse_actions(raw)
            case "indexes":
                return parse_indexes(raw)
            case "expiresAt":
                return parse_expiration_date(raw, now=now)
        raise KeyError(input_name)
