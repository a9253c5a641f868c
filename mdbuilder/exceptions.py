"""Exceptions raised by the Markdown builder."""


class NormalizationError(RuntimeError):
    """Single-line normalization of heading text failed."""


class DocumentError(ValueError):
    """A document description could not be loaded or built."""

    def __init__(self, message: str, source: str = ""):
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)
