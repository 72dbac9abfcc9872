"""Footnote micro-syntax scanning.

Recognizes the two footnote forms Notitas reads and writes:

Reference: [^label]            (anywhere, not followed by ":")
Definition: [^label]: text     (at line start, after optional whitespace)

A label is one or more characters that are either not a backslash and not
"]", or an escaped pair (backslash followed by any character), so
``[^a\\]b]`` has the label ``a\\]b``. References and definitions use the
same label grammar, so a label matches consistently on both sides.

All scanners are total over strings: anything that does not match is
ordinary text. Non-string input is treated as an empty document.

Thread Safety:
    Patterns are compiled once at import; records are frozen dataclasses.
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Label body: any char except backslash and "]", or an escaped pair
LABEL = r"(?:[^\]\\]|\\.)+"

# [^label] not followed by ":" (a ":" would make it a definition opener)
REFERENCE_RE = re.compile(r"\[\^(" + LABEL + r")\](?!:)")

# <indent>[^label]:<text> on a single physical line
DEFINITION_RE = re.compile(r"(\s*)\[\^(" + LABEL + r")\]:(.*)")

# Physical line terminators
LINE_BREAK_RE = re.compile(r"\r?\n")

CRLF = "\r\n"
LF = "\n"


@dataclass(frozen=True, slots=True)
class FootnoteRef:
    """Footnote reference occurrence.

    Markdown: [^1] or [^note]

    Attributes:
        label: Label text between "[^" and "]", escapes kept verbatim
        offset: Absolute start offset of "[^" in the document
        end_offset: Absolute offset just past the closing "]"

    """

    label: str
    offset: int
    end_offset: int


@dataclass(frozen=True, slots=True)
class FootnoteDef:
    """Footnote definition line.

    Markdown: [^1]: Footnote content here.

    Attributes:
        label: Label text between "[^" and "]:"
        indent: Leading whitespace, verbatim
        text: Everything after the ":" up to the end of the line, verbatim
        lineno: 0-based index of the line in split_lines() output

    """

    label: str
    indent: str
    text: str
    lineno: int = 0

    def render(self, label: str | None = None) -> str:
        """Rebuild the definition line, optionally under a new label."""
        return f"{self.indent}[^{self.label if label is None else label}]:{self.text}"


def _as_text(text: object) -> str:
    return text if isinstance(text, str) else ""


def detect_line_ending(text: str) -> str:
    """Line separator for newly generated line breaks.

    Returns "\\r\\n" if the two-character sequence occurs anywhere in the
    text, "\\n" otherwise.
    """
    return CRLF if CRLF in _as_text(text) else LF


def split_lines(text: str) -> list[str]:
    """Split text into physical lines on "\\r\\n" or "\\n".

    Terminators are dropped; a text ending in a newline yields a final
    empty string, as str.split does.
    """
    return LINE_BREAK_RE.split(_as_text(text))


def scan_references(text: str) -> list[FootnoteRef]:
    """Find every footnote reference occurrence, left to right.

    Args:
        text: Markdown source

    Returns:
        References in document order, duplicates included.

    Example:
        >>> [r.label for r in scan_references("a[^x] b[^y]\\n\\n[^x]: X")]
        ['x', 'y']
    """
    return [
        FootnoteRef(label=m.group(1), offset=m.start(), end_offset=m.end())
        for m in REFERENCE_RE.finditer(_as_text(text))
    ]


def ordered_labels(text: str) -> tuple[str, ...]:
    """Unique reference labels in order of first appearance.

    The position of a label in the result (1-based) is its sequential
    footnote number.
    """
    seen: set[str] = set()
    ordered: list[str] = []
    for match in REFERENCE_RE.finditer(_as_text(text)):
        label = match.group(1)
        if label not in seen:
            seen.add(label)
            ordered.append(label)
    return tuple(ordered)


def parse_definition(line: str, lineno: int = 0) -> FootnoteDef | None:
    """Parse a single physical line as a footnote definition.

    Args:
        line: One line without its terminator
        lineno: Line index to record on the result

    Returns:
        FootnoteDef if the line is a definition, None otherwise.
    """
    match = DEFINITION_RE.fullmatch(line)
    if match is None:
        return None
    indent, label, text = match.groups()
    return FootnoteDef(label=label, indent=indent, text=text, lineno=lineno)


def scan_definitions(text: str) -> list[FootnoteDef]:
    """Find every footnote definition line, top to bottom."""
    definitions = []
    for lineno, line in enumerate(split_lines(text)):
        definition = parse_definition(line, lineno)
        if definition is not None:
            definitions.append(definition)
    return definitions


__all__ = [
    "CRLF",
    "DEFINITION_RE",
    "LF",
    "LINE_BREAK_RE",
    "REFERENCE_RE",
    "FootnoteDef",
    "FootnoteRef",
    "detect_line_ending",
    "ordered_labels",
    "parse_definition",
    "scan_definitions",
    "scan_references",
    "split_lines",
]
