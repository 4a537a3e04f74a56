"""Greedy first-fit packing of item batches into weight and piece limited packs.

Batches are consumed in the order given. Each batch is placed completely,
slice by slice, before the next one starts: the current pack takes as many
units as its weight and piece headroom allow, and a pack with no headroom
left is closed and replaced by a fresh one. Packs are never revisited, so
the result is a deterministic first-fit partition rather than an optimal one.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import ItemExceedsPackCapacityError
from .value_objects import (
    ItemBatch,
    PackConstraints,
    PackEvent,
    PackFillEvent,
    PackOpened,
    PackSummary,
)

logger = logging.getLogger(__name__)


def max_units_to_add(
    constraints: PackConstraints,
    current_pack_weight: float,
    current_pack_pieces: int,
    batch: ItemBatch,
) -> int:
    """Number of units of ``batch`` that still fit into the current pack.

    The result is the smaller of the weight headroom (in whole units) and
    the piece headroom. It is zero or negative when the pack is full along
    either axis. Zero-weight items are limited by piece headroom only.

    Args:
        constraints: Pack limits.
        current_pack_weight: Weight already in the pack.
        current_pack_pieces: Pieces already in the pack.
        batch: The batch being placed.

    Returns:
        The room left for this batch, in units.

    Example:
        >>> limits = PackConstraints(max_pieces=10, max_weight=50.0)
        >>> max_units_to_add(limits, 30.0, 5, ItemBatch("a", 1.0, 5.0, 1))
        4
    """
    weight_headroom = constraints.max_weight - current_pack_weight
    piece_headroom = constraints.max_pieces - current_pack_pieces

    if batch.weight == 0:
        return piece_headroom

    units_by_weight = weight_headroom / batch.weight
    if math.isinf(units_by_weight):
        return piece_headroom if units_by_weight > 0 else 0

    return min(math.floor(units_by_weight), piece_headroom)


@dataclass
class _PackState:
    """Running totals of the pack currently being filled."""

    pack_number: int
    weight: float = 0.0
    pieces: int = 0
    longest_item_length: float = 0.0

    def summary(self) -> PackSummary:
        return PackSummary(
            pack_number=self.pack_number,
            total_weight=self.weight,
            longest_item_length=self.longest_item_length,
        )


class PackingEngine:
    """Greedy allocator that turns ordered item batches into pack events.

    ``pack`` yields, in order:

    - ``PackOpened`` right before the first slice goes into a new pack,
    - one ``PackFillEvent`` per slice of a batch placed into that pack,
    - ``PackSummary`` when the pack is closed.

    A pack is closed when it has no room for the next unit of the current
    batch, or when a placement used up exactly all of its room. The pack
    still open when the batches run out gets no summary unless
    ``flush_final_summary`` is set.

    Every pack is announced except one opened after a batch ended exactly
    on a full pack: its contents follow the previous summary without a
    header, unless ``announce_every_pack`` is set.

    Attributes:
        constraints: Pack limits for the run.
        flush_final_summary: Emit a summary for the last open pack.
        announce_every_pack: Announce packs opened after an exact fill too.
    """

    def __init__(
        self,
        constraints: PackConstraints,
        flush_final_summary: bool = False,
        announce_every_pack: bool = False,
    ) -> None:
        """Initialize the engine.

        Args:
            constraints: Pack limits. The ordering policy is not used here;
                batches are expected to arrive already ordered.
            flush_final_summary: Whether to close the last pack with a
                summary at the end of the run.
            announce_every_pack: Whether a pack opened after a batch ended
                exactly on a full pack is announced.
        """
        self.constraints = constraints
        self.flush_final_summary = flush_final_summary
        self.announce_every_pack = announce_every_pack

    def pack(self, batches: Iterable[ItemBatch]) -> Iterator[PackEvent]:
        """Allocate ``batches`` to packs, yielding events as they happen.

        Args:
            batches: Item batches in packing order.

        Yields:
            PackOpened, PackFillEvent and PackSummary events.

        Raises:
            ItemExceedsPackCapacityError: If a unit of some batch is heavier
                than a whole pack, or cannot fit even into an empty pack.
                Packing stops at that batch.
        """
        pack_count = 0
        current: _PackState | None = None
        announce_next = True

        for batch in batches:
            # Also rejects NaN weights, which compare false against everything
            if not batch.weight <= self.constraints.max_weight:
                raise ItemExceedsPackCapacityError(batch, self.constraints)

            logger.debug("Packing %d x %r (weight %s)", batch.count, batch.id, batch.weight)

            remaining = batch.count
            while remaining > 0:
                if current is None:
                    pack_count += 1
                    current = _PackState(pack_number=pack_count)
                    yield PackOpened(
                        pack_number=pack_count,
                        announced=announce_next or self.announce_every_pack,
                    )

                room = max_units_to_add(
                    self.constraints, current.weight, current.pieces, batch
                )

                if room <= 0:
                    if current.pieces == 0:
                        raise ItemExceedsPackCapacityError(batch, self.constraints)
                    yield self._close(current)
                    current = None
                    announce_next = True
                    continue

                placed = min(room, remaining)
                yield PackFillEvent(
                    item_id=batch.id,
                    length=batch.length,
                    quantity_placed=placed,
                    unit_weight=batch.weight,
                )
                current.weight += placed * batch.weight
                current.pieces += placed
                current.longest_item_length = max(
                    current.longest_item_length, batch.length
                )
                remaining -= placed

                if placed == room:
                    yield self._close(current)
                    current = None
                    announce_next = remaining > 0

        if current is not None and self.flush_final_summary:
            yield self._close(current)

        logger.info("Packed items into %d pack(s)", pack_count)

    def _close(self, state: _PackState) -> PackSummary:
        logger.debug(
            "Pack %d closed: %d pieces, weight %s",
            state.pack_number,
            state.pieces,
            state.weight,
        )
        return state.summary()
