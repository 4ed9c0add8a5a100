"""
Unit tests for key identifier generation.
"""

import random
from collections import Counter

import pytest

from authkeys.core.security import (
    KEY_ID_CHARSET,
    KEY_ID_LENGTH,
    generate_key_id,
    is_valid_key_id,
)


@pytest.mark.unit
class TestGenerateKeyId:
    """Tests for generate_key_id."""

    def test_length_and_alphabet(self):
        """Test that ids are 64 characters from [a-z0-9A-Z]."""
        key_id = generate_key_id()

        assert len(key_id) == 64
        assert set(key_id) <= set(KEY_ID_CHARSET)
        assert len(KEY_ID_CHARSET) == 62

    def test_ids_are_pairwise_distinct(self):
        """Test that many generated ids never collide."""
        ids = [generate_key_id() for _ in range(2000)]

        assert len(set(ids)) == len(ids)

    def test_seeded_source_is_reproducible(self):
        """Test that the same seed yields the same id."""
        assert generate_key_id(random.Random(42)) == generate_key_id(random.Random(42))

    def test_different_seeds_differ(self):
        """Test that different seeds yield different ids."""
        assert generate_key_id(random.Random(1)) != generate_key_id(random.Random(2))

    def test_every_character_is_reachable(self):
        """Test that draws cover the whole alphabet."""
        rng = random.Random(0)
        counts = Counter("".join(generate_key_id(rng) for _ in range(200)))

        assert set(counts) == set(KEY_ID_CHARSET)


@pytest.mark.unit
class TestIsValidKeyId:
    """Tests for is_valid_key_id."""

    def test_generated_id_is_valid(self):
        """Test that generated ids pass the check."""
        assert is_valid_key_id(generate_key_id())

    @pytest.mark.parametrize(
        "value",
        ["", "a" * (KEY_ID_LENGTH - 1), "a" * (KEY_ID_LENGTH + 1), "-" * KEY_ID_LENGTH, None, 42],
    )
    def test_invalid_values(self, value):
        """Test that wrong lengths, characters and types fail the check."""
        assert not is_valid_key_id(value)
