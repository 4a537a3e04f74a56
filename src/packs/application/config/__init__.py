"""Run configuration schema, loading and CLI merging.

Public API:
    - PackerConfiguration: Root configuration model
    - PackingConfig: Packing engine options
    - OutputConfig: Report output options
    - LoggingConfig: Logging options
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - merge_config_with_cli: Apply CLI overrides to a configuration
    - ConfigError: Exception for configuration errors

Example:
    >>> from pathlib import Path
    >>> from packs.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("packer.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from packs.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from packs.application.config.merger import merge_config_with_cli
from packs.application.config.schema import (
    SUPPORTED_VERSIONS,
    LoggingConfig,
    OutputConfig,
    PackerConfiguration,
    PackingConfig,
)

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "OutputConfig",
    "PackerConfiguration",
    "PackingConfig",
    "SUPPORTED_VERSIONS",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
