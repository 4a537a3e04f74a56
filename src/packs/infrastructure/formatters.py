"""Text rendering of pack events."""

from __future__ import annotations

from typing import Iterable, Iterator

from packs.domain import PackEvent, PackFillEvent, PackOpened, PackSummary


class ReportFormatter:
    """Formats pack events as the line-oriented pack report.

    Output per event:

    - PackOpened: ``Pack Number: <n>``, unless the pack is not announced
    - PackFillEvent: ``<id>,<length>,<count>,<weight>``
    - PackSummary: ``Pack Length: <longest>, Pack Weight: <total>`` and a
      blank separator line
    """

    def __init__(self, decimals: int = 1) -> None:
        """Initialize formatter.

        Args:
            decimals: Decimal places for lengths and weights.
        """
        if decimals < 0:
            raise ValueError("Decimals must be non-negative")
        self._decimals = decimals

    def _number(self, value: float) -> str:
        return f"{value:.{self._decimals}f}"

    def format_events(self, events: Iterable[PackEvent]) -> Iterator[str]:
        """Yield report lines, without line terminators, for ``events``."""
        for event in events:
            if isinstance(event, PackOpened):
                if event.announced:
                    yield f"Pack Number: {event.pack_number}"
            elif isinstance(event, PackFillEvent):
                yield (
                    f"{event.item_id},{self._number(event.length)},"
                    f"{event.quantity_placed},{self._number(event.unit_weight)}"
                )
            elif isinstance(event, PackSummary):
                yield (
                    f"Pack Length: {self._number(event.longest_item_length)}, "
                    f"Pack Weight: {self._number(event.total_weight)}"
                )
                yield ""
            else:
                raise TypeError(f"Unknown pack event: {event!r}")

    def format(self, events: Iterable[PackEvent]) -> str:
        """Format ``events`` as a single newline-terminated report."""
        return "".join(f"{line}\n" for line in self.format_events(events))
