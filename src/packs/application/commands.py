"""Application commands (use cases) for packing manifests."""

from __future__ import annotations

import logging
from typing import Iterable

from packs.application.config import PackerConfiguration
from packs.application.manifest import read_manifest
from packs.domain import (
    InvalidPackConstraintsError,
    MissingPackConstraintsError,
    PackConstraints,
    PackingEngine,
    apply_ordering,
)

from .dtos import PackingOutput

logger = logging.getLogger(__name__)


class PackManifestCommand:
    """Command to read a manifest, order its items and pack them.

    Runs the whole pipeline: read, guard, order, pack. Any failure aborts
    the run; there is no partial output.
    """

    def __init__(self, config: PackerConfiguration | None = None) -> None:
        self.config = config or PackerConfiguration()

    def execute(self, lines: Iterable[str]) -> PackingOutput:
        """Execute the packing command.

        Args:
            lines: Manifest lines.

        Returns:
            PackingOutput with the constraints, ordered items and pack events.

        Raises:
            ManifestError: If the manifest cannot be parsed.
            MissingPackConstraintsError: If the manifest has no header.
            InvalidPackConstraintsError: If the pack limits are not positive
                and ``packing.reject_non_positive_constraints`` is enabled.
            ItemExceedsPackCapacityError: If an item can never fit a pack.
        """
        constraints, items = read_manifest(lines)
        self._check_constraints(constraints)

        ordered = apply_ordering(constraints.order, items)
        engine = PackingEngine(
            constraints,
            flush_final_summary=self.config.packing.flush_final_summary,
            announce_every_pack=self.config.packing.announce_every_pack,
        )
        events = tuple(engine.pack(ordered))

        output = PackingOutput(
            constraints=constraints,
            items=tuple(ordered),
            events=events,
        )
        logger.info(
            "Packed %d piece(s) from %d batch(es) into %d pack(s)",
            output.pieces_placed,
            len(items),
            output.pack_count,
        )
        return output

    def _check_constraints(self, constraints: PackConstraints) -> None:
        if not constraints.is_set:
            raise MissingPackConstraintsError()

        if constraints.max_pieces > 0 and constraints.max_weight > 0:
            return

        if self.config.packing.reject_non_positive_constraints:
            raise InvalidPackConstraintsError(constraints)

        logger.warning(
            "Packing with non-positive limits (max_pieces=%s, max_weight=%s)",
            constraints.max_pieces,
            constraints.max_weight,
        )
