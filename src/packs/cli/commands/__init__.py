"""CLI command implementations for the packs application.

This package contains subcommands for the packs CLI, including:
- validate: Validate a manifest file
"""

from packs.cli.commands.validate import validate_command

__all__ = ["validate_command"]
