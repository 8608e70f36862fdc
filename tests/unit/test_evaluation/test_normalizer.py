"""
Tests for Text Normalization
"""

import pytest

from ielts_answers.evaluation.normalizer import normalize, strip_spaces


class TestNormalize:
    """Test cases for normalize()."""

    def test_lowercases_and_trims(self):
        """Test case folding and trimming."""
        assert normalize("  The BEACH  ") == "the beach"

    def test_collapses_whitespace(self):
        """Test that runs of whitespace become a single space."""
        assert normalize("well \t known\n\nfact") == "well known fact"

    def test_unifies_quotes(self):
        """Test typographic quotes and apostrophes become ASCII."""
        assert normalize("St John’s") == "st john's"
        assert normalize("‘quoted’") == "'quoted'"
        assert normalize("“quoted”") == '"quoted"'

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_input(self, value):
        """Test empty and missing input normalize to an empty string."""
        assert normalize(value) == ""

    def test_idempotent(self):
        """Test normalizing twice changes nothing."""
        once = normalize("  Nine  O’Clock ")
        assert normalize(once) == once


class TestStripSpaces:
    """Test cases for strip_spaces()."""

    def test_removes_all_whitespace(self):
        """Test that all whitespace is removed."""
        assert strip_spaces("20 20") == "2020"
        assert strip_spaces(" 0161 \t555\n2090 ") == "01615552090"

    def test_empty_input(self):
        """Test empty and missing input."""
        assert strip_spaces("") == ""
        assert strip_spaces(None) == ""
