"""HTML preview rendering for generated Markdown."""

from __future__ import annotations

import logging
import pathlib
from typing import Optional

import markdown

from .text_utils import TextUtils

logger = logging.getLogger(__name__)


class HTMLRenderer:
    """Turns builder output into a standalone HTML page."""

    DEFAULT_CSS = """
body { font-family: -apple-system, Segoe UI, Roboto, sans-serif; line-height: 1.6; padding: 24px; max-width: 960px; }
pre { background: #0b1020; color: #e0e6ff; padding: 12px; overflow: auto; border-radius: 8px; }
code { font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace; }
table { border-collapse: collapse; }
th, td { border: 1px solid #d0d7de; padding: 4px 10px; }
blockquote { border-left: 4px solid #d0d7de; margin-left: 0; padding-left: 12px; color: #57606a; }
details { margin: 1em 0; }
summary { cursor: pointer; font-weight: 600; }
a { color: #005ad6; text-decoration: none; }
"""

    @staticmethod
    def markdown_to_html(md_text: str) -> str:
        """
        Convert Markdown text to HTML.

        ``md_in_html`` is enabled so the body of ``<details>`` sections is
        rendered as Markdown too.

        Parameters
        ----------
        md_text : str
            Markdown text.

        Returns
        -------
        str
            HTML output.
        """
        return markdown.markdown(
            md_text,
            extensions=["fenced_code", "tables", "md_in_html"],
            output_format="html5",
        )

    @staticmethod
    def load_css(css_path: Optional[str] = None) -> str:
        """
        Load CSS from file or return default CSS.

        Parameters
        ----------
        css_path : Optional[str], optional
            Path to CSS file, by default None.

        Returns
        -------
        str
            CSS content.
        """
        if css_path:
            css_file = pathlib.Path(css_path)
            if css_file.is_file():
                return css_file.read_text(encoding="utf-8")
            logger.warning(f"Stylesheet {css_path} not found, using default CSS")

        return HTMLRenderer.DEFAULT_CSS

    @staticmethod
    def build_html_document(
        body_html: str,
        *,
        title: str = "Document",
        css: Optional[str] = None,
    ) -> str:
        """
        Build a complete HTML document.

        Parameters
        ----------
        body_html : str
            HTML content for the body.
        title : str, optional
            Document title, by default "Document".
        css : Optional[str], optional
            CSS content, by default None (uses default CSS).

        Returns
        -------
        str
            Complete HTML document.
        """
        css_content = css if css is not None else HTMLRenderer.DEFAULT_CSS

        return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>{TextUtils.escape_html(title)}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <style>
{css_content}
  </style>
</head>
<body>
{body_html}
</body>
</html>"""

    @staticmethod
    def render_markdown_to_file(
        md_text: str,
        html_path: str,
        *,
        title: str = "Document",
        css_path: Optional[str] = None,
    ) -> None:
        """
        Render Markdown to HTML and write to disk.

        Parameters
        ----------
        md_text : str
            Markdown source.
        html_path : str
            Path to output HTML file.
        title : str, optional
            Document title, by default "Document".
        css_path : Optional[str], optional
            Path to CSS file, by default None.
        """
        body_html = HTMLRenderer.markdown_to_html(md_text)
        css = HTMLRenderer.load_css(css_path)
        html_doc = HTMLRenderer.build_html_document(body_html, title=title, css=css)

        out_path = pathlib.Path(html_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(html_doc, encoding="utf-8")
        logger.debug(f"Wrote HTML preview to {html_path}")
