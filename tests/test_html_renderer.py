# tests/test_html_renderer.py

"""
Unit tests for HTML preview rendering.
"""

from mdbuilder import Alignment, MarkdownBuilder
from mdbuilder.utils.html_renderer import HTMLRenderer


class TestHTMLRenderer:
    """Test cases for HTMLRenderer."""

    def test_builder_output_renders(self):
        """Test headings, tables and code from the builder convert to HTML."""
        md = (
            MarkdownBuilder()
            .h1("Title")
            .code("print(1)", "python")
            .table(["A", "B"], [["1", "2"]], [Alignment.LEFT, Alignment.RIGHT])
            .get_markdown()
        )

        html = HTMLRenderer.markdown_to_html(md)

        assert "<h1>Title</h1>" in html
        assert '<code class="language-python">' in html
        assert "<table>" in html
        assert ">A</th>" in html

    def test_title_escaped(self):
        """Test the page title is HTML-escaped."""
        page = HTMLRenderer.build_html_document("<p>x</p>", title="<Notes>")

        assert "<title>&lt;Notes&gt;</title>" in page
        assert "<p>x</p>" in page
        assert HTMLRenderer.DEFAULT_CSS in page

    def test_custom_css(self):
        """Test explicit CSS replaces the default stylesheet."""
        page = HTMLRenderer.build_html_document("", css="body {}")

        assert "body {}" in page
        assert HTMLRenderer.DEFAULT_CSS not in page

    def test_load_css(self, tmp_path):
        """Test CSS files are read and missing ones fall back to defaults."""
        css_file = tmp_path / "style.css"
        css_file.write_text("h1 { color: red; }", encoding="utf-8")

        assert HTMLRenderer.load_css(str(css_file)) == "h1 { color: red; }"
        assert HTMLRenderer.load_css(str(tmp_path / "missing.css")) == HTMLRenderer.DEFAULT_CSS
        assert HTMLRenderer.load_css(None) == HTMLRenderer.DEFAULT_CSS

    def test_render_markdown_to_file(self, tmp_path):
        """Test the page is written and parent directories created."""
        out = tmp_path / "nested" / "doc.html"

        HTMLRenderer.render_markdown_to_file("Hello", str(out), title="Doc")

        page = out.read_text(encoding="utf-8")
        assert "<title>Doc</title>" in page
        assert "<p>Hello</p>" in page
