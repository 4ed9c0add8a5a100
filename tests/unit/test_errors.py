"""
Unit tests for the error taxonomy.
"""

import pytest

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
from authkeys.models.contracts.common import ErrorResponse


@pytest.mark.unit
class TestErrorCodes:
    """Tests for error codes and messages."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (MissingParameterError("actions"), "missing_parameter"),
            (InvalidDescriptionError(1), "invalid_api_key_description"),
            (InvalidActionsError("x"), "invalid_api_key_actions"),
            (InvalidIndexesError("x"), "invalid_api_key_indexes"),
            (InvalidExpiresAtError("x"), "invalid_api_key_expires_at"),
            (KeyIdConflictError("a" * 64), "api_key_already_exists"),
            (KeyNotFoundError("a" * 64), "api_key_not_found"),
        ],
    )
    def test_codes(self, error, code):
        """Test that every error has its stable code and base class."""
        assert error.code == code
        assert isinstance(error, AuthKeyError)
        assert isinstance(error, ValueError)

    def test_missing_parameter_message(self):
        """Test the missing parameter message names the field."""
        error = MissingParameterError("expiresAt")

        assert str(error) == "`expiresAt` field is mandatory."
        assert error.field == "expiresAt"

    def test_value_rendered_as_json(self):
        """Test that the raw value appears in JSON form in the message."""
        error = InvalidActionsError(["search", None])

        assert '["search", null]' in str(error)
        assert error.value == ["search", None]

    def test_unserializable_value_rendered_with_repr(self):
        """Test that values JSON cannot encode still render."""
        error = InvalidExpiresAtError({1, 2})

        assert "{1, 2}" in str(error)

    def test_key_id_is_truncated_in_messages(self):
        """Test that store errors do not echo the full identifier."""
        key_id = "k" * 64

        assert key_id not in str(KeyIdConflictError(key_id))
        assert key_id not in str(KeyNotFoundError(key_id))


@pytest.mark.unit
class TestToResponse:
    """Tests for AuthKeyError.to_response."""

    def test_invalid_value_response(self):
        """Test the response for an invalid field value."""
        response = InvalidIndexesError(5).to_response()

        assert isinstance(response, ErrorResponse)
        assert response.error == "invalid_api_key_indexes"
        assert response.details == {"field": "indexes", "value": 5}
        assert "`5`" in response.message

    def test_missing_parameter_response(self):
        """Test the response for a missing field."""
        response = MissingParameterError("indexes").to_response()

        assert response.error == "missing_parameter"
        assert response.details == {"field": "indexes"}

    @pytest.mark.parametrize(
        "error",
        [InvalidActionsError(None), InvalidIndexesError(None), InvalidDescriptionError(None)],
    )
    def test_null_value_kept_in_response(self, error):
        """Test that a rejected null is reported rather than dropped."""
        response = error.to_response()

        assert "value" in response.details
        assert response.details["value"] is None
        assert "`null`" in response.message

    def test_store_errors_carry_no_value(self):
        """Test that errors raised without a value only report the field."""
        error = KeyNotFoundError("a" * 64)

        assert error.has_value is False
        assert error.to_response().details == {"field": "id"}
