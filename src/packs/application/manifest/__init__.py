"""Manifest parsing: record grammar, validation errors and the line reader.

Public API:
    - read_manifest: Read a manifest into constraints and item batches
    - parse_constraints: Parse a pack constraints header line
    - parse_item: Parse an item batch line
    - ManifestError and its subclasses: Structured parse failures
"""

from packs.application.manifest.errors import (
    DuplicateHeaderError,
    FieldValueError,
    InvalidCountError,
    InvalidLengthError,
    InvalidPieceCountError,
    InvalidSortOrderError,
    InvalidWeightError,
    MalformedLineStartError,
    ManifestError,
    WrongFieldCountError,
)
from packs.application.manifest.parser import (
    parse_constraints,
    parse_integer,
    parse_item,
    parse_real,
)
from packs.application.manifest.reader import read_manifest

__all__ = [
    "DuplicateHeaderError",
    "FieldValueError",
    "InvalidCountError",
    "InvalidLengthError",
    "InvalidPieceCountError",
    "InvalidSortOrderError",
    "InvalidWeightError",
    "MalformedLineStartError",
    "ManifestError",
    "WrongFieldCountError",
    "parse_constraints",
    "parse_integer",
    "parse_item",
    "parse_real",
    "read_manifest",
]
