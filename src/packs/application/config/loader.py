"""Loading of JSON run configuration files.

A packer configuration is a small JSON object (see ``schema.py``). Every
failure, from a missing file to a misspelled option, surfaces as a single
``ConfigError`` that the CLI prints before any manifest is read.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from packs.application.config.schema import PackerConfiguration


class ConfigError(Exception):
    """Raised when a run configuration cannot be loaded.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, file_read_error, json_parse,
            validation
        path: The configuration file, when loading from disk
        details: One dict per problem. JSON errors carry line and column,
            validation errors carry the dotted option path and the
            rejected value.
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)


def _validate(data: Any, path: Path | None = None) -> PackerConfiguration:
    try:
        return PackerConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [
            {
                "path": ".".join(str(part) for part in err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
            }
            for err in e.errors()
        ]
        source = f" in {path}" if path is not None else ""
        lines = [f"Invalid packer configuration{source}:"]
        lines.extend(f"  - {d['path']}: {d['message']} (got: {d['value']!r})" for d in details)
        raise ConfigError("\n".join(lines), "validation", path, details) from e


def load_config(path: Path) -> PackerConfiguration:
    """Load and validate a run configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated PackerConfiguration instance

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the configuration schema.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}", "file_read_error", path
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> PackerConfiguration:
    """Validate a run configuration given as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
