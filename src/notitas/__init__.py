"""
Notitas: Footnote renumbering for Markdown

Renumbers footnote references into sequential order (1..N) by first
appearance and reorders the definition block to match. Pure functions,
no I/O, zero runtime dependencies.

Quick Start:
    >>> from notitas import renumber
    >>> result = renumber("a[^q] b[^q]\\n\\n[^q]: hi")
    >>> result.document
    'a[^1] b[^1]\\n\\n[^1]: hi'
    >>> result.changed, result.count
    (True, 1)

    >>> # Or use the high-level Footnotes class
    >>> from notitas import Footnotes
    >>> fn = Footnotes()
    >>> fn("x[^b] y[^a]\\n\\n[^a]: A\\n[^b]: B")
    'x[^1] y[^2]\\n\\n[^1]: B\\n[^2]: A'

Inserting Footnotes:
    >>> from notitas import insert_footnote
    >>> result = insert_footnote("Some text here.", 9, "A note")
    >>> result.document
    'Some text[^1] here.\\n\\n[^1]: A note'

Installation:
    pip install notitas              # Core (zero deps)
    pip install notitas[test]        # + pytest and hypothesis
"""

from notitas.config import DEFAULT_CONFIG, InsertConfig
from notitas.errors import ConfigError, EmptyFootnoteError, InsertionError, NotitasError
from notitas.insertion import (
    InsertionResult,
    add_definition,
    insert_footnote,
    next_footnote_number,
)
from notitas.renumber import RenumberResult, renumber
from notitas.scanner import (
    FootnoteDef,
    FootnoteRef,
    detect_line_ending,
    ordered_labels,
    parse_definition,
    scan_definitions,
    scan_references,
    split_lines,
)

__version__ = "0.1.0"


class Footnotes:
    """High-level footnote processor bound to an insertion config.

    Usage:
        >>> fn = Footnotes()
        >>> fn("Text[^z].\\n\\n[^z]: Zed")
        'Text[^1].\\n\\n[^1]: Zed'

        >>> # Full result with metadata
        >>> fn.renumber("plain text").changed
        False

        >>> # Insertion without renumbering
        >>> fn = Footnotes(config=InsertConfig(renumber=False))
        >>> fn.insert("Hi.", 2, "note").document
        'Hi[^1].\\n\\n[^1]: note'

    Thread Safety:
        Holds only an immutable config. Safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, config: InsertConfig | None = None) -> None:
        """Initialize footnote processor.

        Args:
            config: Insertion configuration (uses DEFAULT_CONFIG if None)
        """
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> InsertConfig:
        return self._config

    def __call__(self, document: str) -> str:
        """Renumber and return the document text only."""
        return renumber(document).document

    def renumber(self, document: str) -> RenumberResult:
        """Renumber footnotes; see notitas.renumber.renumber()."""
        return renumber(document)

    def insert(self, document: str, offset: int, text: str) -> InsertionResult:
        """Insert a footnote at offset using this processor's config."""
        return insert_footnote(document, offset, text, config=self._config)

    def next_number(self, document: str) -> int:
        """Next free footnote number for document."""
        return next_footnote_number(document)


__all__ = [  # noqa: RUF022 (grouped by category for maintainability)
    # Version
    "__version__",
    # Core API
    "renumber",
    "RenumberResult",
    # Insertion
    "insert_footnote",
    "add_definition",
    "next_footnote_number",
    "InsertionResult",
    # Scanning
    "FootnoteDef",
    "FootnoteRef",
    "detect_line_ending",
    "ordered_labels",
    "parse_definition",
    "scan_definitions",
    "scan_references",
    "split_lines",
    # Configuration
    "DEFAULT_CONFIG",
    "InsertConfig",
    # Errors
    "NotitasError",
    "InsertionError",
    "EmptyFootnoteError",
    "ConfigError",
    # High-level
    "Footnotes",
]
