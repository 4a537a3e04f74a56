"""Ordering of item batches before packing."""

from __future__ import annotations

import math
from typing import Sequence

from .errors import OrderingError
from .value_objects import ItemBatch, SortOrder


def _length_key(batch: ItemBatch) -> float:
    if math.isnan(batch.length):
        raise OrderingError(f"Item {batch.id!r} has a NaN length and cannot be ordered")
    return batch.length


def apply_ordering(order: SortOrder | None, items: Sequence[ItemBatch]) -> list[ItemBatch]:
    """Return ``items`` in the sequence the packing engine should see them.

    Both length orderings are stable: batches of equal length keep their
    manifest order.

    Args:
        order: The ordering policy from the manifest header.
        items: Item batches in manifest order.

    Returns:
        A new list of batches.

    Raises:
        ValueError: If ``order`` is None. Callers must reject manifests
            without a header before ordering.
        OrderingError: If a batch length is NaN.
    """
    if order is None:
        raise ValueError("Sort order must be set before ordering items")

    if order is SortOrder.NATURAL:
        return list(items)
    if order is SortOrder.SHORT_TO_LONG:
        return sorted(items, key=_length_key)
    if order is SortOrder.LONG_TO_SHORT:
        return sorted(items, key=_length_key, reverse=True)

    raise ValueError(f"Unsupported sort order: {order!r}")
