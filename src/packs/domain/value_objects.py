"""Value objects for the packing domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class SortOrder(Enum):
    """Order in which item batches are handed to the packing engine.

    The enum values are the manifest keywords, so ``SortOrder("NATURAL")``
    and ``order.value`` convert between the two.
    """

    NATURAL = "NATURAL"
    SHORT_TO_LONG = "SHORT_TO_LONG"
    LONG_TO_SHORT = "LONG_TO_SHORT"


@dataclass(frozen=True)
class PackConstraints:
    """Limits that apply to every pack in a run.

    Built from the manifest header line. Values are taken as parsed, so zero
    or negative limits are representable here; the pipeline rejects them
    before packing starts.

    Attributes:
        max_pieces: Maximum number of pieces in a single pack.
        max_weight: Maximum total weight of a single pack.
        order: Ordering policy, or None when the manifest had no header.
    """

    max_pieces: int = 0
    max_weight: float = 0.0
    order: SortOrder | None = None

    @property
    def is_set(self) -> bool:
        """True when a header supplied an ordering policy."""
        return self.order is not None


@dataclass(frozen=True)
class ItemBatch:
    """``count`` identical items sharing an id, a length and a unit weight.

    Attributes:
        id: Item identifier, taken verbatim from the manifest.
        length: Length of one item.
        weight: Weight of one item.
        count: Number of items in the batch.
    """

    id: str
    length: float
    weight: float
    count: int

    @property
    def total_weight(self) -> float:
        """Weight of the whole batch."""
        return self.weight * self.count


@dataclass(frozen=True)
class PackOpened:
    """A new pack was opened and is about to receive its first items.

    Attributes:
        pack_number: One-based number of the pack.
        announced: Whether the report shows a header for this pack. A pack
            opened because the previous batch ended exactly on a full pack
            is not announced.
    """

    pack_number: int
    announced: bool = True


@dataclass(frozen=True)
class PackFillEvent:
    """A contiguous slice of one batch placed into the current pack.

    Attributes:
        item_id: Id of the batch the slice came from.
        length: Length of each item in the slice.
        quantity_placed: Number of items placed.
        unit_weight: Weight of each item in the slice.
    """

    item_id: str
    length: float
    quantity_placed: int
    unit_weight: float

    @property
    def slice_weight(self) -> float:
        """Total weight added to the pack by this slice."""
        return self.quantity_placed * self.unit_weight


@dataclass(frozen=True)
class PackSummary:
    """Totals of a pack, emitted when the pack is closed.

    Attributes:
        pack_number: 1-based number of the closed pack.
        total_weight: Sum of the weights of all items in the pack.
        longest_item_length: Length of the longest item in the pack.
    """

    pack_number: int
    total_weight: float
    longest_item_length: float


PackEvent = Union[PackOpened, PackFillEvent, PackSummary]
