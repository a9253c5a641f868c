# tests/test_text_utils.py

"""
Unit tests for text utilities.
"""

import pytest
from mdbuilder.exceptions import NormalizationError
from mdbuilder.utils.text_utils import TextUtils


class TestSingleLine:
    """Tests for single-line normalization."""

    def test_plain_text_unchanged(self):
        """Test text without extra whitespace is returned as is."""
        assert TextUtils.single_line("Hello world") == "Hello world"

    def test_newlines_are_deleted(self):
        """Test newlines join words instead of becoming spaces."""
        assert TextUtils.single_line("Multi\nline") == "Multiline"

    def test_whitespace_runs_collapsed(self):
        """Test tabs and repeated spaces become a single space."""
        assert TextUtils.single_line("a  \t b\t\tc") == "a b c"

    def test_trimmed(self):
        """Test leading and trailing whitespace is removed."""
        assert TextUtils.single_line("\n  padded \t\n") == "padded"

    def test_carriage_return_collapsed(self):
        """Test CRLF leaves a space where the CR was."""
        assert TextUtils.single_line("a\r\nb") == "a b"

    def test_non_breaking_space_kept(self):
        """Test only ASCII whitespace is collapsed and trimmed."""
        assert TextUtils.single_line("\u00a0a \t\u00a0b\u00a0 ") == "\u00a0a \u00a0b\u00a0"

    def test_empty(self):
        """Test empty input."""
        assert TextUtils.single_line("") == ""

    def test_failed_substitution_raises(self, monkeypatch):
        """Test a non-string substitution result is reported."""
        class BrokenPattern:
            def sub(self, repl, string):
                return None

        monkeypatch.setattr(TextUtils, "_WHITESPACE_PATTERN", BrokenPattern())

        with pytest.raises(NormalizationError):
            TextUtils.single_line("text")

    def test_normalization_error_is_runtime_error(self):
        """Test the error is an unrecoverable runtime error."""
        assert issubclass(NormalizationError, RuntimeError)


class TestOtherHelpers:
    """Tests for HTML escaping and filename sanitizing."""

    def test_escape_html(self):
        """Test HTML special characters are escaped."""
        assert TextUtils.escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
        assert TextUtils.escape_html(None) == ""

    def test_sanitize_filename(self):
        """Test invalid characters and whitespace are replaced."""
        assert TextUtils.sanitize_filename("release notes: v1/2") == "release_notes_v1_2"

    def test_sanitize_filename_empty(self):
        """Test a fallback name for empty input."""
        assert TextUtils.sanitize_filename("") == "unnamed"
        assert TextUtils.sanitize_filename("???") == "unnamed"
