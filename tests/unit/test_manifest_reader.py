"""Unit tests for read_manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from packs.application.manifest import (
    DuplicateHeaderError,
    InvalidCountError,
    MalformedLineStartError,
    ManifestError,
    WrongFieldCountError,
    read_manifest,
)
from packs.domain import SortOrder


def _lines(text: str) -> list[str]:
    return text.splitlines(keepends=True)


class TestReadManifest:
    """Tests for reading whole manifests."""

    def test_valid_manifest(self) -> None:
        """The reference manifest yields its header and two batches."""
        constraints, items = read_manifest(
            _lines("NATURAL,10,20.0\n100,10.5,20,3.0\n110,8.0,15,5.0")
        )
        assert constraints.max_pieces == 10
        assert constraints.max_weight == 20.0
        assert constraints.order is SortOrder.NATURAL
        assert [item.id for item in items] == ["100", "110"]

    def test_lines_without_terminators(self) -> None:
        """Plain strings without newlines are accepted."""
        constraints, items = read_manifest(["SHORT_TO_LONG,3,9.0", "1,2.0,3,1.0"])
        assert constraints.order is SortOrder.SHORT_TO_LONG
        assert len(items) == 1

    def test_crlf_line_endings(self) -> None:
        """Windows line endings are stripped."""
        constraints, items = read_manifest(_lines("NATURAL,10,20.0\r\n100,10.5,20,3.0\r\n"))
        assert constraints.max_weight == 20.0
        assert items[0].weight == 3.0

    def test_surrounding_whitespace_trimmed(self) -> None:
        """Lines are trimmed before classification and parsing."""
        _, items = read_manifest(["NATURAL,10,20.0", "   100,10.5,20,3.0\t"])
        assert items[0].id == "100"
        assert items[0].weight == 3.0

    def test_stops_at_first_empty_line(self) -> None:
        """Reading stops without error at the first empty line."""
        _, items = read_manifest(_lines("NATURAL,10,20.0\n1,1.0,1,1.0\n\n2,1.0,1,1.0\nnot parsed\n"))
        assert [item.id for item in items] == ["1"]

    def test_does_not_read_past_empty_line(self) -> None:
        """Lines after the terminating empty line stay in the iterator."""
        source: Iterator[str] = iter(["NATURAL,1,1.0", "", "1,1.0,1,1.0"])
        read_manifest(source)
        assert next(source) == "1,1.0,1,1.0"

    def test_empty_input(self) -> None:
        """Empty input gives unset constraints and no items."""
        constraints, items = read_manifest([])
        assert not constraints.is_set
        assert items == []

    def test_missing_header_is_accepted(self) -> None:
        """Without a header the constraints stay unset."""
        constraints, items = read_manifest(["100,10.5,20,3.0"])
        assert constraints.order is None
        assert constraints.max_pieces == 0
        assert len(items) == 1

    def test_items_keep_manifest_order(self) -> None:
        """Items are returned in input order regardless of the sort order."""
        _, items = read_manifest(["LONG_TO_SHORT,5,5.0", "1,1.0,1,1.0", "2,9.0,1,1.0"])
        assert [item.id for item in items] == ["1", "2"]

    def test_duplicate_header(self) -> None:
        """A second header line is rejected."""
        with pytest.raises(DuplicateHeaderError) as exc_info:
            read_manifest(_lines("NATURAL,10,20.0\nNATURAL,8,15.0\n100,10.5,20,3.0"))
        assert exc_info.value.line_index == 1
        assert exc_info.value.line == "NATURAL,8,15.0"

    def test_header_after_items_is_duplicate(self) -> None:
        """Only the very first line may be the header."""
        with pytest.raises(DuplicateHeaderError) as exc_info:
            read_manifest(["100,10.5,20,3.0", "NATURAL,10,20.0"])
        assert exc_info.value.line_index == 1

    def test_invalid_keyword_start(self) -> None:
        """A line with an unknown keyword is malformed."""
        with pytest.raises(MalformedLineStartError) as exc_info:
            read_manifest(_lines("INVALID_KEYWORD,10,20.0\n100,10.5,20,3.0"))
        assert exc_info.value.line == "INVALID_KEYWORD,10,20.0"
        assert exc_info.value.line_index == 0

    def test_invalid_item_start(self) -> None:
        """An item line must start with a digit."""
        with pytest.raises(MalformedLineStartError) as exc_info:
            read_manifest(_lines("NATURAL,10,20.0\ninvalid_item_format\n100,10.5,20,3.0"))
        assert exc_info.value.line == "invalid_item_format"

    def test_whitespace_only_line_is_malformed(self) -> None:
        """A line of spaces is not empty, so it is not a terminator."""
        with pytest.raises(MalformedLineStartError):
            read_manifest(["NATURAL,10,20.0", "   ", "1,1.0,1,1.0"])

    def test_keyword_prefix_is_parsed_as_header(self) -> None:
        """A keyword prefix classifies the line; the field parse then fails."""
        with pytest.raises(ManifestError) as exc_info:
            read_manifest(["NATURALLY,10,20.0"])
        assert exc_info.value.line_index == 0

    def test_parse_failure_carries_line_index(self) -> None:
        """Record parse errors raised by the reader know their line."""
        with pytest.raises(InvalidCountError) as exc_info:
            read_manifest(["NATURAL,10,20.0", "1,1.0,1,1.0", "2,1.0,x,1.0"])
        assert exc_info.value.line_index == 2
        assert str(exc_info.value).startswith("Line 3:")

    def test_reads_open_file(self, manifests_path: Path) -> None:
        """An open text file is a valid line source."""
        with (manifests_path / "valid_natural.txt").open(encoding="utf-8") as handle:
            constraints, items = read_manifest(handle)
        assert constraints.is_set
        assert sum(item.count for item in items) == 35

    def test_field_error_reports_line_as_written(self) -> None:
        """Field errors show the line before trimming, like shape errors do."""
        with pytest.raises(InvalidCountError) as exc_info:
            read_manifest(["NATURAL,10,20.0", "  1,1.0,x,1.0\t\n"])
        assert exc_info.value.line == "  1,1.0,x,1.0\t"

    def test_field_count_error_reports_line_as_written(self) -> None:
        """Field count errors also keep the untrimmed line."""
        with pytest.raises(WrongFieldCountError) as exc_info:
            read_manifest([" NATURAL,10"])
        assert exc_info.value.line == " NATURAL,10"
