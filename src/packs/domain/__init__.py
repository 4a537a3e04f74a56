"""Domain layer - core packing logic."""

from .errors import (
    InvalidPackConstraintsError,
    ItemExceedsPackCapacityError,
    MissingPackConstraintsError,
    OrderingError,
    PackingError,
)
from .ordering import apply_ordering
from .packing import PackingEngine, max_units_to_add
from .sort_order import format_sort_order, parse_sort_order
from .value_objects import (
    ItemBatch,
    PackConstraints,
    PackEvent,
    PackFillEvent,
    PackOpened,
    PackSummary,
    SortOrder,
)

__all__ = [
    "InvalidPackConstraintsError",
    "ItemBatch",
    "ItemExceedsPackCapacityError",
    "MissingPackConstraintsError",
    "OrderingError",
    "PackConstraints",
    "PackEvent",
    "PackFillEvent",
    "PackOpened",
    "PackSummary",
    "PackingEngine",
    "PackingError",
    "SortOrder",
    "apply_ordering",
    "format_sort_order",
    "max_units_to_add",
    "parse_sort_order",
]
