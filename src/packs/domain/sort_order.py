"""Conversion between manifest keywords and SortOrder values."""

from __future__ import annotations

from .value_objects import SortOrder

SORT_ORDER_KEYWORDS: tuple[str, ...] = tuple(order.value for order in SortOrder)


def parse_sort_order(token: str) -> SortOrder:
    """Parse a manifest ordering keyword.

    Matching is exact and case-sensitive.

    Args:
        token: The raw keyword text.

    Returns:
        The matching SortOrder.

    Raises:
        ValueError: If the token is not one of NATURAL, SHORT_TO_LONG or
            LONG_TO_SHORT.
    """
    try:
        return SortOrder(token)
    except ValueError:
        raise ValueError(
            f"{token!r} is not a sort order, expected one of "
            f"[{', '.join(SORT_ORDER_KEYWORDS)}]"
        ) from None


def format_sort_order(order: SortOrder | None) -> str:
    """Return the manifest keyword for ``order``.

    Raises:
        ValueError: If ``order`` is None; an unset order has no keyword.
    """
    if order is None:
        raise ValueError("An unset sort order has no textual form")
    return order.value
