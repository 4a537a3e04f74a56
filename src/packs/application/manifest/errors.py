"""Errors raised while reading a manifest.

Every error keeps the offending line verbatim and, when raised by the
reader, the zero-based index of that line, so a user can find and fix the
problem without re-deriving it from column positions. Field errors also
keep the raw field text and the reason the value was rejected; the
original exception is chained as ``__cause__``.

Hierarchy:
    ManifestError
    ├── MalformedLineStartError
    ├── DuplicateHeaderError
    ├── WrongFieldCountError
    └── FieldValueError
        ├── InvalidSortOrderError
        ├── InvalidPieceCountError
        ├── InvalidWeightError
        ├── InvalidLengthError
        └── InvalidCountError
"""

from __future__ import annotations

from typing import Literal

RecordType = Literal["pack", "item"]


class ManifestError(Exception):
    """Base class for manifest parsing errors.

    Attributes:
        message: Human-readable description of the problem.
        line: The offending manifest line.
        line_index: Zero-based index of the line, if known.
    """

    def __init__(self, message: str, line: str, line_index: int | None = None) -> None:
        self.message = message
        self.line = line
        self.line_index = line_index
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_index is None:
            return self.message
        return f"Line {self.line_index + 1}: {self.message}"


class MalformedLineStartError(ManifestError):
    """A line starts with neither a digit nor an ordering keyword."""

    def __init__(self, line: str, line_index: int | None = None) -> None:
        super().__init__(
            f"The line {line!r} is not valid. Expected it to start with a number "
            "or one of [NATURAL, SHORT_TO_LONG, LONG_TO_SHORT].",
            line,
            line_index,
        )


class DuplicateHeaderError(ManifestError):
    """A pack constraints header appears after the first line."""

    def __init__(self, line: str, line_index: int) -> None:
        super().__init__(
            f"The line {line!r} contains pack information, but only the first "
            f"line may. It is line index {line_index}, so the header is duplicated.",
            line,
            line_index,
        )


class WrongFieldCountError(ManifestError):
    """A record has too few or too many comma-separated fields.

    Attributes:
        record_type: "pack" for the header, "item" for item lines.
        expected: Number of fields the record type requires.
        actual: Number of fields found.
    """

    def __init__(
        self,
        line: str,
        record_type: RecordType,
        expected: int,
        actual: int,
        line_index: int | None = None,
    ) -> None:
        self.record_type = record_type
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"The {record_type} line {line!r} has the wrong number of values. "
            f"Expected {expected}, got {actual}.",
            line,
            line_index,
        )


class FieldValueError(ManifestError):
    """A single field of a record could not be parsed.

    Attributes:
        record_type: "pack" or "item".
        field_name: Name of the rejected field.
        value: The raw field text.
        reason: Why the value was rejected.
    """

    expectation = "a valid value"

    def __init__(
        self,
        line: str,
        record_type: RecordType,
        field_name: str,
        value: str,
        reason: str,
        line_index: int | None = None,
    ) -> None:
        self.record_type = record_type
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(
            f"The {record_type} line {line!r} has an invalid {field_name}: "
            f"{value!r} ({reason}). Expected {self.expectation}.",
            line,
            line_index,
        )


class InvalidSortOrderError(FieldValueError):
    expectation = "one of [NATURAL, SHORT_TO_LONG, LONG_TO_SHORT]"


class InvalidPieceCountError(FieldValueError):
    expectation = "an integer number"


class InvalidWeightError(FieldValueError):
    expectation = "a floating point number"


class InvalidLengthError(FieldValueError):
    expectation = "a floating point number"


class InvalidCountError(FieldValueError):
    expectation = "an integer number"
