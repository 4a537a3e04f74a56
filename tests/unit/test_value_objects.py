"""Unit tests for packing value objects."""

import pytest

from packs.domain import ItemBatch, PackConstraints, PackFillEvent, SortOrder


class TestPackConstraints:
    """Tests for PackConstraints."""

    def test_defaults_are_unset(self) -> None:
        """Constraints without a header are zeroed and unset."""
        constraints = PackConstraints()
        assert constraints.max_pieces == 0
        assert constraints.max_weight == 0.0
        assert constraints.order is None
        assert not constraints.is_set

    def test_non_positive_limits_are_representable(self) -> None:
        """Parsing does not enforce positive limits, so neither does the model."""
        constraints = PackConstraints(max_pieces=-1, max_weight=0.0, order=SortOrder.NATURAL)
        assert constraints.is_set
        assert constraints.max_pieces == -1

    def test_is_frozen(self) -> None:
        """PackConstraints should be immutable."""
        constraints = PackConstraints(10, 20.0, SortOrder.NATURAL)
        with pytest.raises(AttributeError):
            constraints.max_pieces = 5  # type: ignore


class TestItemBatch:
    """Tests for ItemBatch."""

    def test_total_weight(self) -> None:
        """Batch weight is unit weight times count."""
        assert ItemBatch("a", 1.0, 2.5, 4).total_weight == 10.0

    def test_is_frozen(self) -> None:
        """ItemBatch should be immutable."""
        batch = ItemBatch("a", 1.0, 2.5, 4)
        with pytest.raises(AttributeError):
            batch.count = 1  # type: ignore


class TestPackFillEvent:
    """Tests for PackFillEvent."""

    def test_slice_weight(self) -> None:
        """Slice weight is quantity times unit weight."""
        event = PackFillEvent(item_id="a", length=1.0, quantity_placed=3, unit_weight=2.0)
        assert event.slice_weight == 6.0
