"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from packs.domain import (
    ItemBatch,
    PackConstraints,
    PackEvent,
    PackFillEvent,
    PackOpened,
    PackSummary,
)


@dataclass(frozen=True)
class PackingOutput:
    """Result of packing one manifest.

    Attributes:
        constraints: Pack limits read from the manifest header.
        items: Item batches in the order they were packed.
        events: Pack events produced by the engine, in emission order.
    """

    constraints: PackConstraints
    items: tuple[ItemBatch, ...]
    events: tuple[PackEvent, ...]

    @property
    def pack_count(self) -> int:
        """Number of packs opened."""
        return sum(1 for event in self.events if isinstance(event, PackOpened))

    @property
    def pieces_placed(self) -> int:
        """Total number of items placed across all packs."""
        return sum(
            event.quantity_placed
            for event in self.events
            if isinstance(event, PackFillEvent)
        )

    @property
    def summaries(self) -> tuple[PackSummary, ...]:
        """Summaries of the packs that were closed."""
        return tuple(event for event in self.events if isinstance(event, PackSummary))
