# mdbuilder/__init__.py
"""
Markdown Builder

Fluent construction of Markdown documents: headings, lists, tables,
code blocks, blockquotes and collapsible sections.
"""

from .alignment import Alignment
from .builder import MarkdownBuilder
from .exceptions import DocumentError, NormalizationError
from .inline import (
    inline_bold,
    inline_code,
    inline_img,
    inline_italic,
    inline_link,
    inline_space,
    inline_tab,
)

__version__ = "1.0.0"

__all__ = [
    "Alignment",
    "MarkdownBuilder",
    "DocumentError",
    "NormalizationError",
    "inline_bold",
    "inline_code",
    "inline_img",
    "inline_italic",
    "inline_link",
    "inline_space",
    "inline_tab",
]
