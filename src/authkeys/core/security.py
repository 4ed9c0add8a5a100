"""
Key Identifier Generation

API key identifiers are 64 printable characters drawn uniformly from
``[a-z0-9A-Z]``. The generator performs no uniqueness check; the key store
rejects collisions at insertion time.
"""

import random
import secrets

KEY_ID_LENGTH = 64
KEY_ID_CHARSET = "abcdefghijklmnopqrstuvwxyz0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def generate_key_id(rng: random.Random | None = None) -> str:
    """
    Generate a new API key identifier.

    Args:
        rng: Random source to draw characters from. Pass a seeded
            ``random.Random`` for reproducible ids; defaults to the OS
            entropy source.

    Returns:
        A 64 character identifier
    """
    if rng is None:
        rng = secrets.SystemRandom()
    return "".join(rng.choice(KEY_ID_CHARSET) for _ in range(KEY_ID_LENGTH))


def is_valid_key_id(value: object) -> bool:
    """Check that a value has the shape of a generated identifier."""
    return (
        isinstance(value, str)
        and len(value) == KEY_ID_LENGTH
        and all(char in KEY_ID_CHARSET for char in value)
    )
