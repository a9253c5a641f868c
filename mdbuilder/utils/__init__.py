"""Utility modules for Markdown generation."""

from .text_utils import TextUtils
from .html_renderer import HTMLRenderer

__all__ = [
    "TextUtils",
    "HTMLRenderer",
]
