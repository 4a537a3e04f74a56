"""Typer CLI for packing item manifests."""

import logging
import sys
from pathlib import Path
from typing import Annotated, TextIO

import typer

from packs.application import PackManifestCommand, PackingOutput
from packs.application.config import (
    ConfigError,
    PackerConfiguration,
    load_config,
    merge_config_with_cli,
)
from packs.application.manifest import ManifestError
from packs.cli.commands import validate_command
from packs.domain import PackingError
from packs.infrastructure import ReportFormatter

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(level: str) -> None:
    """Send log records to stderr so the report on stdout stays clean."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("packs").setLevel(level)


def _run_pack(command: PackManifestCommand, source: TextIO) -> PackingOutput:
    try:
        return command.execute(source)
    except ManifestError as e:
        typer.echo(f"Manifest error: {e}", err=True)
        raise typer.Exit(code=1)
    except PackingError as e:
        typer.echo(f"Packing error: {e}", err=True)
        raise typer.Exit(code=1)


app = typer.Typer(
    name="packs",
    help="Split an item manifest into packs limited by piece count and weight.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def pack(
    manifest_file: Annotated[
        Path | None,
        typer.Argument(
            help="Manifest file to pack (reads standard input when omitted)",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    flush_final_summary: Annotated[
        bool,
        typer.Option(
            "--flush-final-summary",
            help="Also print the summary of the last pack",
        ),
    ] = False,
    decimals: Annotated[
        int | None,
        typer.Option(
            "--decimals",
            min=0,
            max=6,
            help="Decimal places for lengths and weights (default: 1)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log packing details to stderr"),
    ] = False,
) -> None:
    """Pack a manifest and print the pack report.

    The manifest starts with a header line ORDER,MAX_PIECES,MAX_WEIGHT
    followed by item lines ID,LENGTH,COUNT,WEIGHT, and ends at the first
    blank line.

    Examples:
        packs pack manifest.txt
        cat manifest.txt | packs pack
        packs pack manifest.txt --config packer.json --flush-final-summary
    """
    config = PackerConfiguration()
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    config = merge_config_with_cli(
        config,
        flush_final_summary=True if flush_final_summary else None,
        decimals=decimals,
        log_level="DEBUG" if verbose else None,
    )
    _configure_logging(config.logging.level)

    command = PackManifestCommand(config)
    if manifest_file is None:
        output = _run_pack(command, sys.stdin)
    else:
        with manifest_file.open(encoding="utf-8") as handle:
            output = _run_pack(command, handle)

    formatter = ReportFormatter(decimals=config.output.decimals)
    typer.echo(formatter.format(output.events), nl=False)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
