"""Validate command for checking manifest files.

This module provides the `validate` command that reads a manifest without
packing it and reports the first error found, if any.
"""

from pathlib import Path
from typing import Annotated

import typer

from packs.application.manifest import (
    FieldValueError,
    ManifestError,
    WrongFieldCountError,
    read_manifest,
)
from packs.domain import ItemBatch, PackConstraints, format_sort_order


def validate_command(
    manifest_file: Annotated[
        Path,
        typer.Argument(
            help="Path to the manifest file to validate",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
) -> None:
    """Validate a manifest file.

    Checks every line up to the first blank line for:
    - Line shape (item line or pack constraints header)
    - Field counts and field values
    - A single header on the first line

    Exit codes:
        0 - Manifest is valid
        1 - Manifest has errors (cannot be packed)
        2 - Manifest parses but has no pack constraints header

    Example:
        packs validate manifest.txt
    """
    typer.echo(f"Validating {manifest_file}...")
    typer.echo()

    try:
        with manifest_file.open(encoding="utf-8") as handle:
            constraints, items = read_manifest(handle)
    except ManifestError as e:
        _display_manifest_error(e)
        raise typer.Exit(code=1)

    exit_code = _display_manifest_summary(constraints, items)
    raise typer.Exit(code=exit_code)


def _display_manifest_error(error: ManifestError) -> None:
    """Display a manifest error with the location of the offending text.

    Args:
        error: The ManifestError to display
    """
    typer.echo("Errors:", err=True)
    typer.echo(f"  {error}", err=True)
    if error.line_index is not None:
        typer.echo(f"    Line: {error.line_index + 1}", err=True)
    typer.echo(f"    Text: {error.line!r}", err=True)

    if isinstance(error, FieldValueError):
        typer.echo(f"    Field: {error.field_name}", err=True)
        typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo(f"    Reason: {error.reason}", err=True)
    elif isinstance(error, WrongFieldCountError):
        typer.echo(
            f"    Fields: expected {error.expected}, got {error.actual}", err=True
        )

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_manifest_summary(
    constraints: PackConstraints, items: list[ItemBatch]
) -> int:
    """Display what was read and return the exit code."""
    piece_count = sum(item.count for item in items)

    if constraints.is_set:
        typer.echo(
            f"Pack constraints: {format_sort_order(constraints.order)}, "
            f"max {constraints.max_pieces} pieces, "
            f"max weight {constraints.max_weight}"
        )
    typer.echo(f"Item batches: {len(items)} ({piece_count} pieces)")
    typer.echo()

    if not constraints.is_set:
        typer.echo("Warnings:")
        typer.echo("  No pack constraints header; the manifest cannot be packed.")
        typer.echo()
        typer.echo("Validation passed with 1 warning(s)")
        return 2

    typer.echo("Validation passed. Manifest is valid.")
    return 0
