"""Exception classes for Notitas.

The renumbering engine and the scanner never raise for string input:
malformed footnote syntax is passed through as ordinary text. These
exceptions belong to the layers that sit on top of the engine (the
insertion flow and its configuration).
"""

from __future__ import annotations


class NotitasError(Exception):
    """Base exception for all Notitas errors.

    Subclass this for specific error categories.
    """

    pass


class InsertionError(NotitasError):
    """Error while inserting a new footnote into a document.

    Raised when the requested insertion point or footnote text cannot
    be applied to the document.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize insertion error with optional offset.

        Args:
            message: Error description
            offset: Character offset the caller asked to insert at (optional)
        """
        self.message = message
        self.offset = offset

        location = f"offset {offset}: " if offset is not None else ""
        super().__init__(f"{location}{message}")


class EmptyFootnoteError(InsertionError):
    """Footnote text is empty (or only whitespace when stripping is enabled)."""

    def __init__(self, offset: int | None = None) -> None:
        super().__init__("footnote text is empty", offset=offset)


class ConfigError(NotitasError):
    """Invalid configuration value.

    Raised when an InsertConfig field receives a value it cannot use.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending config field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config '{field}': {message}")
