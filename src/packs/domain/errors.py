"""Errors raised by the ordering and packing stages."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects import ItemBatch, PackConstraints


class PackingError(Exception):
    """Base class for failures that abort a packing run."""


class ItemExceedsPackCapacityError(PackingError):
    """Raised when not even an empty pack can hold one unit of a batch."""

    def __init__(self, batch: ItemBatch, constraints: PackConstraints) -> None:
        self.batch = batch
        self.constraints = constraints
        super().__init__(
            f"Item {batch.id!r} (unit weight {batch.weight}) can never be placed: "
            f"a pack holds at most {constraints.max_pieces} pieces "
            f"and {constraints.max_weight} weight"
        )


class MissingPackConstraintsError(PackingError):
    """Raised when a manifest without a header line reaches packing."""

    def __init__(self) -> None:
        super().__init__(
            "The manifest has no pack constraints header. Expected a first line "
            "like 'NATURAL,10,20.0'."
        )


class InvalidPackConstraintsError(PackingError):
    """Raised when the pack limits leave no room for any item."""

    def __init__(self, constraints: PackConstraints) -> None:
        self.constraints = constraints
        super().__init__(
            f"Pack limits must be positive, got max_pieces={constraints.max_pieces} "
            f"and max_weight={constraints.max_weight}"
        )


class OrderingError(RuntimeError):
    """Raised when item lengths cannot be compared.

    Lengths come from validated manifest lines, so this signals a broken
    parser contract rather than bad user input.
    """
