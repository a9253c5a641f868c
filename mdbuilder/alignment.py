"""Table column alignment."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class Alignment(Enum):
    """Column alignment for :meth:`MarkdownBuilder.table`."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Optional[Union["Alignment", str]]) -> "Alignment":
        """
        Resolve an alignment from its name.

        Args:
            value: An Alignment, a name such as ``"right"`` (case-insensitive,
                ``"centre"`` accepted) or None for the default

        Returns:
            The matching Alignment; LEFT for None or an empty string

        Raises:
            ValueError: If the name is not a known alignment
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.LEFT

        name = str(value).strip().lower()
        if name == "centre":
            name = "center"
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown table alignment: {value!r}") from None
