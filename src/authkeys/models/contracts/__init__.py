"""Pydantic contracts (request/response schemas)."""

from authkeys.models.contracts.common import ErrorResponse

__all__ = [
    "ErrorResponse",
]
