"""
API Key record.

The validated, strongly typed form of an API key. Records are built from
untyped input by ``authkeys.services.key_builder.KeyBuilder``; this module
only defines the shape and its wire serialization.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from authkeys.core.clock import format_rfc3339, utc_now
from authkeys.core.security import KEY_ID_LENGTH, is_valid_key_id
from authkeys.models.enums import Action


class Key(BaseModel):
    """API key record."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    description: str | None = None
    id: str = Field(..., frozen=True, min_length=KEY_ID_LENGTH, max_length=KEY_ID_LENGTH)
    actions: list[Action]
    indexes: list[str]
    expires_at: datetime | None = Field(
        default=None, alias="expiresAt", description="None = never expires"
    )
    created_at: datetime = Field(..., frozen=True, alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Validate that the id only uses the generated alphabet."""
        if not is_valid_key_id(v):
            raise ValueError("id must be 64 characters from [a-z0-9A-Z]")
        return v

    @field_validator("expires_at", "created_at", "updated_at")
    @classmethod
    def normalize_to_utc(cls, v: datetime | None) -> datetime | None:
        """Store every timestamp as an aware UTC datetime (naive values are taken as UTC)."""
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)

    @field_serializer("expires_at", "created_at", "updated_at", when_used="json")
    def serialize_timestamp(self, v: datetime | None) -> str | None:
        return None if v is None else format_rfc3339(v)

    def is_expired(self, now: datetime | None = None) -> bool:
        """
        Check if the API key has expired.

        Args:
            now: Reference time (defaults to the current time)

        Returns:
            True if an expiration is set and is not later than ``now``
        """
        if self.expires_at is None:
            return False
        return self.expires_at <= (now or utc_now())

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the wire/storage shape.

        ``description`` is omitted when unset; ``expiresAt`` is always present
        and is ``None`` for keys that never expire.
        """
        data = self.model_dump(mode="json", by_alias=True)
        if self.description is None:
            del data["description"]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Key":
        """Rebuild a stored record (inverse of to_dict).

        Stored expirations are not re-checked against the current time.
        """
        return cls.model_validate(data)
