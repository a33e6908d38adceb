"""Tests for uid module."""

import re
import uuid

from handykit.utils import uid


# UUID v4 pattern: xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx
UUID_PATTERN = re.compile(
    r'^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$'
)


class TestGenerateUuid:
    """Tests for generate_uuid function."""

    def test_returns_lowercase_v4(self):
        """Should match the lowercase UUID v4 pattern."""
        result = uid.generate_uuid()
        assert isinstance(result, str)
        assert UUID_PATTERN.match(result) is not None

    def test_returns_unique_values(self):
        """Multiple calls should return different values."""
        results = [uid.generate_uuid() for _ in range(100)]
        assert len(set(results)) == 100


class TestIsUuid:
    """Tests for is_uuid function."""

    def test_accepts_generated_uuid(self):
        """Generated values are valid."""
        assert uid.is_uuid(uid.generate_uuid())

    def test_rejects_other_versions(self):
        """Only version 4 is accepted."""
        assert not uid.is_uuid(str(uuid.uuid1()))

    def test_rejects_non_canonical_forms(self):
        """Uppercase, braces and missing hyphens are not canonical."""
        value = uid.generate_uuid()
        assert not uid.is_uuid(value.upper())
        assert not uid.is_uuid("{" + value + "}")
        assert not uid.is_uuid(value.replace("-", ""))

    def test_rejects_garbage(self):
        """Non-UUID strings and non-strings are rejected."""
        assert not uid.is_uuid("not-a-uuid")
        assert not uid.is_uuid(None)
        assert not uid.is_uuid(12345)
