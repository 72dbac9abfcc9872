"""Footnote renumbering engine.

Renumbers footnote references to 1..N by first appearance of each distinct
label and moves the matching definitions, sorted by their new number, to
the end of the document.

Algorithm:
1. Scan references left to right; each new label gets the next number.
2. Rewrite every reference in two phases: label -> unique placeholder,
   then placeholder -> number. Renumbering "2" -> "10" and "10" -> "2" in
   the same document cannot alias.
3. Split into physical lines. Definition lines whose label was referenced
   are lifted out; unreferenced (orphan) definitions stay where they are.
4. Join the remaining body with the document's line separator, keep the
   blank-line spacing in front of the definitions, and append the
   definitions sorted by number. Indentation and the text after ":" are
   kept verbatim.

Example:
    >>> from notitas import renumber
    >>> result = renumber("x[^b] y[^a]\\n\\n[^a]: A\\n[^b]: B")
    >>> result.document
    'x[^1] y[^2]\\n\\n[^1]: B\\n[^2]: A'
    >>> result.count
    2

Thread Safety:
    renumber() is a pure function with no module-level mutable state and
    no I/O. Safe to call concurrently on independent documents.

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from notitas.scanner import (
    REFERENCE_RE,
    FootnoteDef,
    detect_line_ending,
    ordered_labels,
    parse_definition,
    split_lines,
)
from notitas.utils.hashing import hash_str
from notitas.utils.logger import get_logger

logger = get_logger(__name__)

_PLACEHOLDER = "\x00notitas-{}\x00"


@dataclass(frozen=True, slots=True)
class RenumberResult:
    """Outcome of a renumbering run.

    Attributes:
        document: Transformed text
        changed: True iff document differs from the input
        count: Number of distinct labels with at least one reference
        labels: Original labels in first-appearance order; labels[i]
            received number i + 1

    """

    document: str
    changed: bool
    count: int
    labels: tuple[str, ...] = field(default=())

    @property
    def numbering(self) -> dict[str, int]:
        """Mapping of original label to its new sequential number."""
        return {label: number for number, label in enumerate(self.labels, start=1)}


@dataclass(frozen=True, slots=True)
class _LiveDefinition:
    number: int
    definition: FootnoteDef


def renumber(document: str | None) -> RenumberResult:
    """Renumber footnotes sequentially by order of first reference.

    Args:
        document: Markdown source; None or non-string input is treated as
            an empty document

    Returns:
        RenumberResult with the transformed document and metadata. Input
        without references is returned unchanged (changed=False, count=0).
    """
    if not document or not isinstance(document, str):
        return RenumberResult(document="", changed=False, count=0)

    labels = ordered_labels(document)
    if not labels:
        return RenumberResult(document=document, changed=False, count=0)

    numbering = {label: number for number, label in enumerate(labels, start=1)}
    separator = detect_line_ending(document)
    rewritten = _rewrite_references(document, numbering)

    lines = split_lines(rewritten)
    # A final newline terminates the file; it is not a blank body line
    terminated = len(lines) > 1 and lines[-1] == ""
    if terminated:
        lines.pop()

    body: list[str] = []
    live: list[_LiveDefinition] = []
    for lineno, line in enumerate(lines):
        definition = parse_definition(line, lineno)
        if definition is not None and definition.label in numbering:
            live.append(_LiveDefinition(numbering[definition.label], definition))
        else:
            body.append(line)

    output = separator.join(body)
    if live:
        live.sort(key=lambda item: item.number)
        if body:
            output += separator * _spacing(body)
        output += separator.join(
            item.definition.render(str(item.number)) for item in live
        )
    if terminated:
        output += separator

    changed = output != document
    if changed:
        logger.debug("Renumbered %d footnotes (%d definitions moved)", len(labels), len(live))

    return RenumberResult(document=output, changed=changed, count=len(labels), labels=labels)


def _spacing(body: list[str]) -> int:
    """Separators to append after the joined body before the definitions.

    No trailing blank line gets one inserted; existing blank lines are
    kept as they are (the joined body already ends in a separator).
    """
    blank = 0
    for line in reversed(body):
        if line.strip():
            break
        blank += 1
    return 2 if blank == 0 else 1


def _rewrite_references(text: str, numbering: dict[str, int]) -> str:
    """Replace every reference label with its number, collision-free."""
    placeholders = _placeholders(text, numbering)

    def to_placeholder(match: re.Match[str]) -> str:
        token = placeholders.get(match.group(1))
        return match.group(0) if token is None else f"[^{token}]"

    staged = REFERENCE_RE.sub(to_placeholder, text)

    final = {token: str(numbering[label]) for label, token in placeholders.items()}
    token_re = re.compile("|".join(re.escape(token) for token in final))
    return token_re.sub(lambda match: final[match.group(0)], staged)


def _placeholders(text: str, numbering: dict[str, int]) -> dict[str, str]:
    """One token per label, absent from text and from each other."""
    tokens: dict[str, str] = {}
    taken: set[str] = set()
    for index, label in enumerate(numbering):
        salt = 0
        token = _PLACEHOLDER.format(hash_str(f"{index}:{label}", truncate=16))
        while token in text or token in taken:
            salt += 1
            token = _PLACEHOLDER.format(hash_str(f"{index}:{label}:{salt}", truncate=16))
        taken.add(token)
        tokens[label] = token
    return tokens


__all__ = [
    "RenumberResult",
    "renumber",
]
