"""Parsing of single manifest records.

A manifest has two record shapes, both comma separated:

- pack constraints header: ``ORDER,MAX_PIECES,MAX_WEIGHT``
- item batch: ``ID,LENGTH,COUNT,WEIGHT`` (count comes before weight)

Fields are parsed in order and the first bad field is reported; later
fields are not looked at.
"""

from __future__ import annotations

import re
from typing import Callable, TypeVar

from packs.domain.sort_order import parse_sort_order
from packs.domain.value_objects import ItemBatch, PackConstraints

from .errors import (
    FieldValueError,
    InvalidCountError,
    InvalidLengthError,
    InvalidPieceCountError,
    InvalidSortOrderError,
    InvalidWeightError,
    RecordType,
    WrongFieldCountError,
)

PACK_FIELD_COUNT = 3
ITEM_FIELD_COUNT = 4

# Python's int() and float() also accept surrounding whitespace, "_" digit
# separators and non-ASCII digits, none of which are numbers in a manifest.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
# Counts are 32-bit signed integers
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1
_REAL_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|(?i:inf|infinity|nan))"
)

T = TypeVar("T")


def parse_integer(text: str) -> int:
    """Parse an optionally signed decimal integer.

    Raises:
        ValueError: If ``text`` is empty, not an integer, or outside the
            32-bit signed range.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"invalid digit found in {text!r}")
    value = int(text)
    if value > INTEGER_MAX:
        raise ValueError(f"number too large to fit in a 32-bit integer: {text!r}")
    if value < INTEGER_MIN:
        raise ValueError(f"number too small to fit in a 32-bit integer: {text!r}")
    return value


def parse_real(text: str) -> float:
    """Parse a decimal or exponent real number, or inf/infinity/nan.

    Raises:
        ValueError: If ``text`` is empty or not a number.
    """
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _REAL_PATTERN.fullmatch(text):
        raise ValueError(f"invalid float literal {text!r}")
    return float(text)


def _parse_field(
    parse: Callable[[str], T],
    value: str,
    error_type: type[FieldValueError],
    *,
    line: str,
    record_type: RecordType,
    field_name: str,
    line_index: int | None,
) -> T:
    try:
        return parse(value)
    except ValueError as e:
        raise error_type(
            line=line,
            record_type=record_type,
            field_name=field_name,
            value=value,
            reason=str(e),
            line_index=line_index,
        ) from e


def parse_constraints(
    line: str,
    line_index: int | None = None,
    source_line: str | None = None,
) -> PackConstraints:
    """Parse a pack constraints header line.

    Args:
        line: Trimmed manifest line, e.g. ``"NATURAL,10,20.0"``.
        line_index: Zero-based position of the line, for error reports.
        source_line: The line as it appeared in the manifest, before
            trimming. Errors report it instead of ``line`` when given.

    Returns:
        The parsed PackConstraints.

    Raises:
        WrongFieldCountError: If the line does not have exactly 3 fields.
        InvalidSortOrderError: If the first field is not an ordering keyword.
        InvalidPieceCountError: If the second field is not an integer.
        InvalidWeightError: If the third field is not a number.
    """
    reported = line if source_line is None else source_line
    parts = line.split(",")
    if len(parts) != PACK_FIELD_COUNT:
        raise WrongFieldCountError(
            reported,
            record_type="pack",
            expected=PACK_FIELD_COUNT,
            actual=len(parts),
            line_index=line_index,
        )

    order_text, max_pieces_text, max_weight_text = parts
    context = {"line": reported, "record_type": "pack", "line_index": line_index}

    order = _parse_field(
        parse_sort_order, order_text, InvalidSortOrderError,
        field_name="sort order", **context,
    )
    max_pieces = _parse_field(
        parse_integer, max_pieces_text, InvalidPieceCountError,
        field_name="maximum piece count", **context,
    )
    max_weight = _parse_field(
        parse_real, max_weight_text, InvalidWeightError,
        field_name="maximum weight", **context,
    )

    return PackConstraints(max_pieces=max_pieces, max_weight=max_weight, order=order)


def parse_item(
    line: str,
    line_index: int | None = None,
    source_line: str | None = None,
) -> ItemBatch:
    """Parse an item batch line.

    The id is taken verbatim; it may hold any character except a comma.

    Args:
        line: Trimmed manifest line, e.g. ``"100,10.5,20,3.0"``.
        line_index: Zero-based position of the line, for error reports.
        source_line: The line as it appeared in the manifest, before
            trimming. Errors report it instead of ``line`` when given.

    Returns:
        The parsed ItemBatch.

    Raises:
        WrongFieldCountError: If the line does not have exactly 4 fields.
        InvalidLengthError: If the length is not a number.
        InvalidCountError: If the count is not an integer.
        InvalidWeightError: If the weight is not a number.
    """
    reported = line if source_line is None else source_line
    parts = line.split(",")
    if len(parts) != ITEM_FIELD_COUNT:
        raise WrongFieldCountError(
            reported,
            record_type="item",
            expected=ITEM_FIELD_COUNT,
            actual=len(parts),
            line_index=line_index,
        )

    item_id, length_text, count_text, weight_text = parts
    context = {"line": reported, "record_type": "item", "line_index": line_index}

    length = _parse_field(
        parse_real, length_text, InvalidLengthError, field_name="length", **context
    )
    count = _parse_field(
        parse_integer, count_text, InvalidCountError, field_name="count", **context
    )
    weight = _parse_field(
        parse_real, weight_text, InvalidWeightError, field_name="weight", **context
    )

    return ItemBatch(id=item_id, length=length, weight=weight, count=count)
