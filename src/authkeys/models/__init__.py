"""API key models.

Records:
    from authkeys.models import Key
    from authkeys.models.key import Key

Pydantic contracts:
    from authkeys.models.contracts import ErrorResponse

Enums:
    from authkeys.models import Action
    from authkeys.models.enums import Action
"""

from authkeys.models.contracts import ErrorResponse
from authkeys.models.enums import Action
from authkeys.models.key import Key

__all__ = [
    "Action",
    "Key",
    "ErrorResponse",
]
