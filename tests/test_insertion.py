"""Tests for the footnote insertion flow."""

import pytest

from notitas import (
    EmptyFootnoteError,
    InsertConfig,
    InsertionError,
    add_definition,
    insert_footnote,
    next_footnote_number,
)


class TestNextFootnoteNumber:
    """Highest numeric label + 1."""

    def test_no_footnotes(self) -> None:
        assert next_footnote_number("This is just regular text.") == 1

    def test_sequential(self) -> None:
        content = "Text with[^1] footnotes[^2] and[^3] more.\n\n[^1]: A\n[^2]: B\n[^3]: C"
        assert next_footnote_number(content) == 4

    def test_non_sequential(self) -> None:
        content = "Text with[^5] footnotes[^10] and[^2] more.\n\n[^5]: A\n[^10]: B\n[^2]: C"
        assert next_footnote_number(content) == 11

    def test_mixed_numeric_and_text(self) -> None:
        content = "Text with[^abc] footnotes[^5] and[^xyz] more.\n\n[^abc]: A\n[^5]: B\n[^xyz]: C"
        assert next_footnote_number(content) == 6

    def test_orphan_definition_counts(self) -> None:
        assert next_footnote_number("Body.\n\n[^8]: Orphan") == 9

    def test_leading_integer(self) -> None:
        assert next_footnote_number("a[^12b] b[^x3]") == 13

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value: str | None) -> None:
        assert next_footnote_number(value) == 1


class TestAddDefinition:
    """Placement of the new definition line."""

    def test_append_to_body(self) -> None:
        assert add_definition("Some text[^1] here.", 1, "Test footnote") == (
            "Some text[^1] here.\n\n[^1]: Test footnote"
        )

    def test_before_existing_block(self) -> None:
        content = "Some text[^1] here.\n\n[^2]: Existing footnote"
        assert add_definition(content, 1, "New footnote") == (
            "Some text[^1] here.\n\n[^1]: New footnote\n[^2]: Existing footnote"
        )

    def test_trailing_newline(self) -> None:
        assert add_definition("Body[^1]\n", 1, "Note") == "Body[^1]\n\n[^1]: Note\n"

    def test_existing_blank_line(self) -> None:
        assert add_definition("Body[^1]\n\n", 1, "Note") == "Body[^1]\n\n[^1]: Note\n"

    def test_empty_document(self) -> None:
        assert add_definition("", 1, "Note") == "[^1]: Note"

    def test_crlf(self) -> None:
        assert add_definition("Body[^1]\r\nMore", 1, "Note") == "Body[^1]\r\nMore\r\n\r\n[^1]: Note"

    def test_configured_line_ending(self) -> None:
        config = InsertConfig(line_ending="\r\n")
        assert add_definition("Body[^1]", 1, "Note", config=config) == "Body[^1]\r\n\r\n[^1]: Note"

    def test_mixed_endings_untouched(self) -> None:
        content = "a\nb\r\nc[^1]"
        assert add_definition(content, 1, "N") == "a\nb\r\nc[^1]\r\n\r\n[^1]: N"


class TestInsertFootnote:
    """End-to-end insertion with renumbering and cursor placement."""

    def test_first_footnote(self) -> None:
        result = insert_footnote("Some text here.", 9, "A note")
        assert result.document == "Some text[^1] here.\n\n[^1]: A note"
        assert result.cursor == 13
        assert result.number == 1
        assert result.document[result.cursor] == " "

    def test_insert_before_existing_renumbers(self) -> None:
        content = "First[^1] and third[^2].\n\n[^1]: One\n[^2]: Three"
        result = insert_footnote(content, 0, "Zero")
        assert result.document == (
            "[^1]First[^2] and third[^3].\n\n[^1]: Zero\n[^2]: One\n[^3]: Three"
        )
        assert result.number == 1
        assert result.cursor == 4

    def test_insert_in_middle(self) -> None:
        content = "First[^1] and third[^2].\n\n[^1]: One\n[^2]: Three"
        offset = content.index(" and") + len(" and")
        result = insert_footnote(content, offset, "Two")
        assert result.document == (
            "First[^1] and[^2] third[^3].\n\n[^1]: One\n[^2]: Two\n[^3]: Three"
        )
        assert result.number == 2
        assert result.document[: result.cursor].endswith("and[^2]")

    def test_without_renumber(self) -> None:
        content = "First[^1] and third[^2].\n\n[^1]: One\n[^2]: Three"
        result = insert_footnote(content, 0, "Zero", config=InsertConfig(renumber=False))
        assert result.document == (
            "[^3]First[^1] and third[^2].\n\n[^3]: Zero\n[^1]: One\n[^2]: Three"
        )
        assert result.number == 3
        assert result.cursor == 4

    def test_cursor_inside_definition_block(self) -> None:
        content = "Body[^1].\n\n[^1]: One"
        offset = len(content)
        result = insert_footnote(content, offset, "Two", config=InsertConfig(renumber=False))
        assert result.document == "Body[^1].\n\n[^2]: Two\n[^1]: One[^2]"
        assert result.document[: result.cursor].endswith("One[^2]")

    def test_text_is_stripped(self) -> None:
        result = insert_footnote("Hi.", 2, "  padded  ")
        assert result.document.endswith("[^1]: padded")

    def test_text_not_stripped(self) -> None:
        result = insert_footnote("Hi.", 2, " padded", config=InsertConfig(strip_text=False))
        assert result.document.endswith("[^1]:  padded")

    def test_crlf_document(self) -> None:
        result = insert_footnote("Line one.\r\nLine two.", 8, "Note")
        assert result.document == "Line one[^1].\r\nLine two.\r\n\r\n[^1]: Note"

    def test_none_document(self) -> None:
        result = insert_footnote(None, 0, "Note")
        assert result.document == "[^1]\n\n[^1]: Note"
        assert result.cursor == 4


class TestInsertErrors:
    """Invalid insertions raise InsertionError subclasses."""

    @pytest.mark.parametrize("offset", [-1, 4])
    def test_offset_out_of_range(self, offset: int) -> None:
        with pytest.raises(InsertionError) as exc_info:
            insert_footnote("abc", offset, "Note")
        assert exc_info.value.offset == offset

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty_text(self, text: str) -> None:
        with pytest.raises(EmptyFootnoteError):
            insert_footnote("abc", 1, text)

    def test_multiline_text(self) -> None:
        with pytest.raises(InsertionError, match="single line"):
            insert_footnote("abc", 1, "one\ntwo")

    def test_offset_before_colon(self) -> None:
        content = "a[^x] Note: t\n\n[^x]: X"
        offset = content.index(":")
        with pytest.raises(InsertionError, match="not be recognised") as exc_info:
            insert_footnote(content, offset, "new")
        assert exc_info.value.offset == offset

    def test_offset_inside_existing_label(self) -> None:
        with pytest.raises(InsertionError):
            insert_footnote("a[^xy]\n\n[^xy]: XY", 3, "new")

    def test_offset_after_colon(self) -> None:
        content = "a[^x] Note: t\n\n[^x]: X"
        result = insert_footnote(content, content.index(":") + 1, "new")
        assert result.document == "a[^1] Note:[^2] t\n\n[^1]: X\n[^2]: new"
        assert result.number == 2
        assert result.cursor == 15
        assert result.document[: result.cursor].endswith("Note:[^2]")

    def test_empty_error_is_insertion_error(self) -> None:
        assert issubclass(EmptyFootnoteError, InsertionError)
