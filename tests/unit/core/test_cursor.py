"""
Unit tests for pagination cursors.
"""

import base64

import pytest

from core.domain.exceptions import InvalidCursorError
from core.infrastructure.storage.cursor import decode_cursor, encode_cursor


@pytest.mark.unit
class TestCursor:
    """Tests for cursor encoding."""

    def test_cursor_is_url_safe_and_unpadded(self):
        """Tokens can be passed in a query string as-is."""
        token = encode_cursor("licenses", 12345)

        assert "=" not in token
        assert "+" not in token and "/" not in token

    def test_decode_returns_sequence(self):
        """A token decodes to the position it was built from."""
        assert decode_cursor(encode_cursor("users", 42), "users") == 42

    def test_decode_rejects_other_collection(self):
        """Cursors are scoped to one collection."""
        with pytest.raises(InvalidCursorError):
            decode_cursor(encode_cursor("users", 3), "products")

    @pytest.mark.parametrize("token", ["!!!", "not-a-cursor", ""])
    def test_decode_rejects_garbage(self, token):
        """Arbitrary strings are rejected."""
        with pytest.raises(InvalidCursorError):
            decode_cursor(token, "users")

    def test_decode_rejects_non_numeric_position(self):
        """The position part must be ASCII digits."""
        token = base64.urlsafe_b64encode("users:１２".encode("utf-8")).decode("ascii")

        with pytest.raises(InvalidCursorError, match="numeric"):
            decode_cursor(token, "users")
