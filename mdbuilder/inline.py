"""Inline Markdown formatting helpers.

Pure string functions, independent of any builder instance.
"""

from __future__ import annotations

from typing import Optional

NBSP = "&nbsp;"


def inline_code(code: str) -> str:
    """Format text as inline code."""
    return f"`{code}`"


def inline_italic(text: str) -> str:
    """Format text as italic."""
    return f"*{text}*"


def inline_bold(text: str) -> str:
    """Format text as bold."""
    return f"**{text}**"


def inline_link(url: str, title: str) -> str:
    """Create a markdown link."""
    return f"[{title}]({url})"


def inline_img(url: str, title: str, width: Optional[str] = None, height: Optional[str] = None) -> str:
    """
    Create an image reference.

    Markdown has no syntax for image dimensions, so when both ``width`` and
    ``height`` are given an HTML ``<img>`` tag is produced instead.

    Parameters
    ----------
    url : str
        Image URL.
    title : str
        Alt text / title.
    width : Optional[str], optional
        Image width, by default None.
    height : Optional[str], optional
        Image height, by default None.

    Returns
    -------
    str
        Markdown image or HTML tag.
    """
    if width and height:
        return f'<img src="{url}" width="{width}" height="{height}" title="{title}">'
    return f"![{title}]({url})"


def inline_tab() -> str:
    """Four non-breaking spaces."""
    return inline_space() * 4


def inline_space() -> str:
    return NBSP
