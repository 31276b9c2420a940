"""Tests for console helpers."""

from __future__ import annotations

from schemagraph.helpers.console import truncate


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("A user", 60) == "A user"

    def test_long_text_shortened(self):
        assert truncate("abcdefghij", 8) == "abcde..."

    def test_trailing_space_dropped(self):
        assert truncate("ab   cdefgh", 8) == "ab..."
