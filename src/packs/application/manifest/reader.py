"""Reading a whole manifest into pack constraints and item batches."""

from __future__ import annotations

import logging
from typing import Iterable

from packs.domain.sort_order import SORT_ORDER_KEYWORDS
from packs.domain.value_objects import ItemBatch, PackConstraints

from .errors import DuplicateHeaderError, MalformedLineStartError
from .parser import parse_constraints, parse_item

logger = logging.getLogger(__name__)


def read_manifest(lines: Iterable[str]) -> tuple[PackConstraints, list[ItemBatch]]:
    """Read manifest lines until the first empty line or the end of input.

    Each line is trimmed and classified by its first characters: a leading
    ASCII digit marks an item line, a leading ordering keyword marks the
    pack constraints header. Only the first line may be the header. Lines
    are pulled one at a time, so nothing past the terminating empty line is
    consumed from ``lines``.

    Args:
        lines: Manifest lines, with or without trailing newlines.

    Returns:
        Tuple of (constraints, item batches in manifest order). Without a
        header line the constraints are the unset defaults.

    Raises:
        MalformedLineStartError: If a line starts with anything else.
        DuplicateHeaderError: If a header appears after the first line.
        ManifestError: Any record parse failure; reading stops there.

    Example:
        >>> constraints, items = read_manifest(["NATURAL,10,20.0", "100,10.5,20,3.0"])
        >>> constraints.max_pieces, items[0].id
        (10, '100')
    """
    constraints = PackConstraints()
    items: list[ItemBatch] = []

    line_index = 0
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if not line:
            break

        trimmed = line.strip()
        is_item = trimmed[:1].isascii() and trimmed[:1].isdigit()
        is_header = trimmed.startswith(SORT_ORDER_KEYWORDS)

        if is_header:
            if line_index != 0:
                raise DuplicateHeaderError(line, line_index)
            constraints = parse_constraints(trimmed, line_index, source_line=line)
        elif is_item:
            items.append(parse_item(trimmed, line_index, source_line=line))
        else:
            raise MalformedLineStartError(line, line_index)

        line_index += 1

    logger.debug(
        "Read manifest: %d line(s), %d item batch(es), header %s",
        line_index,
        len(items),
        "present" if constraints.is_set else "missing",
    )
    return constraints, items
