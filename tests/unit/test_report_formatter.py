"""Unit tests for ReportFormatter."""

import pytest

from packs.domain import PackFillEvent, PackOpened, PackSummary
from packs.infrastructure import ReportFormatter


class TestReportFormatter:
    """Tests for rendering pack events as report lines."""

    @pytest.fixture
    def formatter(self) -> ReportFormatter:
        return ReportFormatter()

    def test_pack_header(self, formatter: ReportFormatter) -> None:
        """PackOpened renders as the pack number header."""
        assert list(formatter.format_events([PackOpened(3)])) == ["Pack Number: 3"]

    def test_unannounced_pack_has_no_header(self, formatter: ReportFormatter) -> None:
        """A pack that is not announced prints no header line."""
        assert list(formatter.format_events([PackOpened(2, announced=False)])) == []

    def test_fill_line(self, formatter: ReportFormatter) -> None:
        """Fill lines show id, length, count and unit weight."""
        lines = list(formatter.format_events([PackFillEvent("100", 10.5, 6, 3.0)]))
        assert lines == ["100,10.5,6,3.0"]

    def test_fill_line_rounds_to_one_decimal(self, formatter: ReportFormatter) -> None:
        """Lengths and weights are printed with one decimal place."""
        lines = list(formatter.format_events([PackFillEvent("x", 2.0 / 3.0, 1, 12.0)]))
        assert lines == ["x,0.7,1,12.0"]

    def test_summary_and_separator(self, formatter: ReportFormatter) -> None:
        """A summary is followed by a blank separator line."""
        lines = list(formatter.format_events([PackSummary(1, 18.0, 10.5)]))
        assert lines == ["Pack Length: 10.5, Pack Weight: 18.0", ""]

    def test_format_joins_lines(self, formatter: ReportFormatter) -> None:
        """format() returns newline-terminated text."""
        text = formatter.format(
            [PackOpened(1), PackFillEvent("a", 1.0, 2, 1.0), PackSummary(1, 2.0, 1.0)]
        )
        assert text == "Pack Number: 1\na,1.0,2,1.0\nPack Length: 1.0, Pack Weight: 2.0\n\n"

    def test_no_events(self, formatter: ReportFormatter) -> None:
        """No events give an empty report."""
        assert formatter.format([]) == ""

    def test_custom_decimals(self) -> None:
        """The number of decimal places is configurable."""
        formatter = ReportFormatter(decimals=2)
        assert list(formatter.format_events([PackSummary(1, 2.0, 1.25)])) == [
            "Pack Length: 1.25, Pack Weight: 2.00",
            "",
        ]

    def test_negative_decimals_rejected(self) -> None:
        """Decimals must be non-negative."""
        with pytest.raises(ValueError):
            ReportFormatter(decimals=-1)

    def test_unknown_event_rejected(self, formatter: ReportFormatter) -> None:
        """Only pack events can be formatted."""
        with pytest.raises(TypeError):
            list(formatter.format_events(["not an event"]))  # type: ignore[list-item]
