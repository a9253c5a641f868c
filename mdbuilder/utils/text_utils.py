"""Text processing utilities for Markdown generation."""

from __future__ import annotations

import html
import re

from ..exceptions import NormalizationError


class TextUtils:
    """Centralized text manipulation utilities."""

    # ASCII whitespace only; non-breaking spaces are content
    TRIM_CHARACTERS = " \t\n\r\0\x0b"
    _WHITESPACE_PATTERN = re.compile(r"\s+", re.ASCII)
    _FILENAME_INVALID_PATTERN = re.compile(r'[<>:"/\\|?*\s]')

    @staticmethod
    def single_line(text: str) -> str:
        """
        Squeeze text onto a single line.

        Newlines are deleted outright (not replaced by a space), then every
        remaining whitespace run is collapsed into one space and the result
        is trimmed.

        Parameters
        ----------
        text : str
            Text to normalize.

        Returns
        -------
        str
            Single-line text.

        Raises
        ------
        NormalizationError
            If whitespace collapsing does not produce a string.
        """
        text = text.replace("\n", "")
        result = TextUtils._WHITESPACE_PATTERN.sub(" ", text)

        if not isinstance(result, str):
            raise NormalizationError(f"Whitespace normalization returned {type(result).__name__}")

        return result.strip(TextUtils.TRIM_CHARACTERS)

    @staticmethod
    def escape_html(text: str) -> str:
        """
        Escape HTML special characters.

        Parameters
        ----------
        text : str
            Text to escape.

        Returns
        -------
        str
            HTML-safe text.
        """
        return html.escape(text or "", quote=True)

    @staticmethod
    def sanitize_filename(text: str, replacement: str = "_") -> str:
        """
        Sanitize text for use as a filename.

        Parameters
        ----------
        text : str
            Text to sanitize.
        replacement : str, optional
            Character to replace invalid characters with, by default "_".

        Returns
        -------
        str
            Safe filename string.
        """
        text = text or "unnamed"
        text = TextUtils._FILENAME_INVALID_PATTERN.sub(replacement, text)
        # Collapse multiple replacements
        text = re.sub(f"{re.escape(replacement)}+", replacement, text)
        return text.strip(replacement) or "unnamed"
