"""Footnote insertion flow.

Pure text operations behind an editor's "insert footnote" action. The
editor adapter reads the document and the cursor offset, collects the
footnote text from the user, calls insert_footnote(), writes back
``result.document`` and moves the cursor to ``result.cursor``.

Flow:
1. Pick the next free number (highest numeric label + 1).
2. Splice ``[^n]`` into the document at the cursor offset.
3. Add ``[^n]: text`` after the body, in front of an existing trailing
   definition block if there is one.
4. Renumber the whole document (unless disabled) and place the cursor just
   after the inserted reference in the final text.

Example:
    >>> from notitas import insert_footnote
    >>> result = insert_footnote("Some text here.", 9, "A note")
    >>> result.document
    'Some text[^1] here.\\n\\n[^1]: A note'
    >>> result.cursor
    13

Thread Safety:
    All functions are pure. Safe to call concurrently.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from notitas.config import DEFAULT_CONFIG, InsertConfig
from notitas.errors import EmptyFootnoteError, InsertionError
from notitas.renumber import renumber
from notitas.scanner import (
    LINE_BREAK_RE,
    detect_line_ending,
    ordered_labels,
    scan_references,
)
from notitas.utils.logger import get_logger

logger = get_logger(__name__)

# Any bracketed label, definition openers included
_ANY_LABEL_RE = re.compile(r"\[\^([^\]]+)\]")

# Definition opener at the very start of a line
_LINE_DEFINITION_RE = re.compile(r"^\[\^([^\]]+)\]:", re.MULTILINE)

# Leading integer of a label ("12", "3a", " 7"); other labels are not numeric
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True, slots=True)
class InsertionResult:
    """Outcome of inserting a footnote.

    Attributes:
        document: Document with the new reference and definition
        cursor: Offset just past the inserted reference in ``document``
        number: Number the new footnote ended up with

    """

    document: str
    cursor: int
    number: int


def _numeric_value(label: str) -> int | None:
    match = _LEADING_INT_RE.match(label)
    return int(match.group(1)) if match else None


def next_footnote_number(document: str | None) -> int:
    """Next free footnote number.

    One more than the highest numeric label among references and
    definitions; labels that do not start with an integer are ignored.

    Example:
        >>> next_footnote_number("a[^5] b[^abc] c[^10]")
        11
        >>> next_footnote_number("no footnotes")
        1
    """
    if not document or not isinstance(document, str):
        return 1

    labels = set(_ANY_LABEL_RE.findall(document))
    labels.update(_LINE_DEFINITION_RE.findall(document))

    highest = 0
    for label in labels:
        value = _numeric_value(label)
        if value is not None and value > highest:
            highest = value
    return highest + 1


def _is_definition_line(line: str) -> bool:
    return _LINE_DEFINITION_RE.match(line.strip()) is not None


def add_definition(
    document: str,
    number: int,
    text: str,
    *,
    config: InsertConfig = DEFAULT_CONFIG,
) -> str:
    """Add a ``[^number]: text`` definition line to the document.

    The definition goes in front of a trailing definition block when the
    document ends with one; otherwise it is appended after the body,
    separated by a blank line.

    Args:
        document: Markdown source
        number: Footnote number for the new definition
        text: Definition text (single line)
        config: Insertion configuration (line_ending is used)

    Returns:
        New document text.
    """
    return _add_definition(document, number, text, config)[0]


def _add_definition(
    document: str, number: int, text: str, config: InsertConfig
) -> tuple[str, int]:
    """Add the definition and return (new document, insertion offset)."""
    if not document:
        return f"[^{number}]: {text}", 0

    separator = config.line_ending or detect_line_ending(document)
    definition = f"[^{number}]: {text}"

    spans = _line_spans(document)
    # A final newline terminates the file; it is not a blank line
    if len(spans) > 1 and spans[-1][0] == len(document):
        spans.pop()
    lines = [document[start:end] for start, end in spans]

    # First line of a definition block at the end of the document
    block_start = None
    for index in range(len(lines) - 1, -1, -1):
        if not lines[index].strip():
            continue
        if _is_definition_line(lines[index]):
            block_start = index
            continue
        break

    if block_start is not None:
        offset = spans[block_start][0]
        inserted = definition + separator
    else:
        blank = 0
        for line in reversed(lines):
            if line.strip():
                break
            blank += 1
        offset = spans[-1][1]
        inserted = separator * (2 if blank == 0 else 1) + definition

    return document[:offset] + inserted + document[offset:], offset


def _line_spans(document: str) -> list[tuple[int, int]]:
    """(start, end) of every physical line, terminators excluded."""
    spans = []
    start = 0
    for match in LINE_BREAK_RE.finditer(document):
        spans.append((start, match.start()))
        start = match.end()
    spans.append((start, len(document)))
    return spans


def insert_footnote(
    document: str | None,
    offset: int,
    text: str,
    *,
    config: InsertConfig = DEFAULT_CONFIG,
) -> InsertionResult:
    """Insert a new footnote reference at offset and its definition.

    Args:
        document: Markdown source (None is treated as empty)
        offset: Character offset of the cursor, 0 <= offset <= len(document)
        text: Footnote text entered by the user
        config: Insertion configuration

    Returns:
        InsertionResult with the new document, cursor and footnote number.

    Raises:
        InsertionError: If offset is outside the document, text spans
            several lines, or a reference spliced at offset would not be
            read as one (directly before ":" or inside another label)
        EmptyFootnoteError: If text is empty
    """
    document = document if isinstance(document, str) else ""
    if not 0 <= offset <= len(document):
        raise InsertionError(
            f"cursor outside document of length {len(document)}", offset=offset
        )

    if config.strip_text:
        text = text.strip()
    if not text:
        raise EmptyFootnoteError(offset=offset)
    if "\n" in text or "\r" in text:
        raise InsertionError("footnote text must be a single line", offset=offset)

    number = next_footnote_number(document)
    label = str(number)
    reference = f"[^{label}]"
    spliced = document[:offset] + reference + document[offset:]
    # Before ":" or inside another label the splice is not a reference
    if label not in ordered_labels(spliced):
        raise InsertionError(
            "footnote reference would not be recognised at this position",
            offset=offset,
        )
    updated, definition_offset = _add_definition(spliced, number, text, config)

    if config.renumber:
        result = renumber(updated)
        updated = result.document
        number = result.numbering[label]
        cursor = _reference_end(updated, str(number))
    else:
        cursor = offset + len(reference)
        if definition_offset <= offset:
            cursor += len(updated) - len(spliced)

    logger.debug("Inserted footnote %d at offset %d", number, offset)
    return InsertionResult(document=updated, cursor=cursor, number=number)


def _reference_end(document: str, label: str) -> int:
    """Offset just past the first reference to label."""
    for reference in scan_references(document):
        if reference.label == label:
            return reference.end_offset
    return len(document)


__all__ = [
    "InsertionResult",
    "add_definition",
    "insert_footnote",
    "next_footnote_number",
]
