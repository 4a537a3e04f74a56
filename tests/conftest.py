"""Pytest configuration and shared fixtures for pack planner tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from packs.domain import ItemBatch, PackConstraints, SortOrder

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def manifests_path() -> Path:
    """Directory holding manifest fixture files."""
    return FIXTURES_PATH / "manifests"


@pytest.fixture
def configs_path() -> Path:
    """Directory holding configuration fixture files."""
    return FIXTURES_PATH / "configs"


@pytest.fixture
def natural_constraints() -> PackConstraints:
    """Packs of at most 10 pieces and 20.0 weight, natural order."""
    return PackConstraints(max_pieces=10, max_weight=20.0, order=SortOrder.NATURAL)


@pytest.fixture
def sample_batches() -> list[ItemBatch]:
    """The two batches of the reference manifest."""
    return [
        ItemBatch(id="100", length=10.5, weight=3.0, count=20),
        ItemBatch(id="110", length=8.0, weight=5.0, count=15),
    ]
