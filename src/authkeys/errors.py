"""
Error taxonomy for API key validation and storage.

Every error carries a stable ``code`` and the offending raw value so callers
can surface precise diagnostics to the user.
"""

import json
from typing import Any

from authkeys.models.contracts.common import ErrorResponse

# marks errors raised without an offending value
_NO_VALUE = object()


def _render(value: Any) -> str:
    """Render a raw input value the way it appeared in the JSON request."""
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


class AuthKeyError(ValueError):
    """Base class for all API key errors."""

    code: str = "invalid_api_key"
    field: str | None = None

    def __init__(self, message: str, value: Any = _NO_VALUE):
        self.has_value = value is not _NO_VALUE
        self.value = value if self.has_value else None
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """
        Build the user-facing error contract for this error.

        Returns:
            ErrorResponse with the error code, message and offending field/value
        """
        details: dict[str, Any] = {}
        if self.field is not None:
            details["field"] = self.field
        if self.has_value:
            details["value"] = self.value
        return ErrorResponse(error=self.code, message=str(self), details=details or None)


class MissingParameterError(AuthKeyError):
    """A required field was absent from a creation request."""

    code = "missing_parameter"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"`{field}` field is mandatory.")


class InvalidDescriptionError(AuthKeyError):
    """The description is neither a string nor null."""

    code = "invalid_api_key_description"
    field = "description"

    def __init__(self, value: Any):
        super().__init__(
            f"`description` field value `{_render(value)}` is invalid. "
            "It should be a string or specified as a null value.",
            value,
        )


class InvalidActionsError(AuthKeyError):
    """The actions are not an array of known action names."""

    code = "invalid_api_key_actions"
    field = "actions"

    def __init__(self, value: Any):
        super().__init__(
            f"`actions` field value `{_render(value)}` is invalid. "
            "It should be an array of strings representing action names.",
            value,
        )


class InvalidIndexesError(AuthKeyError):
    """The indexes are not an array of strings."""

    code = "invalid_api_key_indexes"
    field = "indexes"

    def __init__(self, value: Any):
        super().__init__(
            f"`indexes` field value `{_render(value)}` is invalid. "
            "It should be an array of strings representing index names.",
            value,
        )


class InvalidExpiresAtError(AuthKeyError):
    """The expiration is malformed or not in the future."""

    code = "invalid_api_key_expires_at"
    field = "expiresAt"

    def __init__(self, value: Any):
        super().__init__(
            f"`expiresAt` field value `{_render(value)}` is invalid. "
            "It should follow the RFC 3339 format to represent a date or datetime "
            "in the future or be specified as a null value. "
            "e.g. 'YYYY-MM-DD' or 'YYYY-MM-DD HH:MM:SS'.",
            value,
        )


class KeyIdConflictError(AuthKeyError):
    """A key with the same identifier is already stored."""

    code = "api_key_already_exists"
    field = "id"

    def __init__(self, key_id: str):
        super().__init__(f"An API key with id `{key_id[:8]}...` already exists.")


class KeyNotFoundError(AuthKeyError):
    """No key is stored under the given identifier."""

    code = "api_key_not_found"
    field = "id"

    def __init__(self, key_id: str):
        self.key_id = key_id
        super().__init__(f"API key `{key_id[:8]}...` not found.")
