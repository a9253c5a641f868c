# tests/test_inline.py

"""
Unit tests for inline formatting helpers.
"""

from mdbuilder import MarkdownBuilder
from mdbuilder.inline import (
    inline_bold,
    inline_code,
    inline_img,
    inline_italic,
    inline_link,
    inline_space,
    inline_tab,
)


class TestInlineHelpers:
    """Tests for the pure inline formatting functions."""

    def test_delimiters(self):
        """Test bold, italic and code wrappers."""
        assert inline_bold("x") == "**x**"
        assert inline_italic("x") == "*x*"
        assert inline_code("x") == "`x`"

    def test_link(self):
        """Test url comes first, title is the link text."""
        assert inline_link("u", "t") == "[t](u)"

    def test_image_markdown(self):
        """Test plain Markdown image without dimensions."""
        assert inline_img("a.png", "Logo") == "![Logo](a.png)"

    def test_image_needs_both_dimensions_for_html(self):
        """Test a single dimension still yields Markdown syntax."""
        assert inline_img("a.png", "Logo", width="10") == "![Logo](a.png)"
        assert inline_img("a.png", "Logo", height="10") == "![Logo](a.png)"

    def test_image_html_with_dimensions(self):
        """Test an <img> tag when width and height are given."""
        result = inline_img("a.png", "Logo", "100", "50")

        assert result == '<img src="a.png" width="100" height="50" title="Logo">'

    def test_spaces(self):
        """Test non-breaking space entities."""
        assert inline_space() == "&nbsp;"
        assert inline_tab() == "&nbsp;&nbsp;&nbsp;&nbsp;"

    def test_builder_static_access(self):
        """Test helpers are callable through the builder class and instances."""
        assert MarkdownBuilder.inline_bold("x") == "**x**"
        assert MarkdownBuilder().inline_link("u", "t") == "[t](u)"

    def test_inline_inside_blocks(self):
        """Test inline output composes with block operations."""
        md = MarkdownBuilder().p("Run " + inline_code("make") + " " + inline_italic("now"))

        assert md.get_markdown() == "Run `make` *now*"
