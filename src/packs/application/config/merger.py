"""Configuration merging utilities for CLI override support.

Precedence: CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from packs.application.config.schema import (
    LoggingConfig,
    OutputConfig,
    PackerConfiguration,
    PackingConfig,
)


def merge_config_with_cli(
    config: PackerConfiguration,
    *,
    flush_final_summary: bool | None = None,
    decimals: int | None = None,
    log_level: str | None = None,
) -> PackerConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base PackerConfiguration to merge with
        flush_final_summary: Override for packing.flush_final_summary
        decimals: Override for output.decimals
        log_level: Override for logging.level

    Returns:
        A new, re-validated PackerConfiguration with merged values

    Example:
        >>> merged = merge_config_with_cli(PackerConfiguration(), decimals=2)
        >>> merged.output.decimals
        2
    """
    packing_data = config.packing.model_dump()
    if flush_final_summary is not None:
        packing_data["flush_final_summary"] = flush_final_summary

    output_data = config.output.model_dump()
    if decimals is not None:
        output_data["decimals"] = decimals

    logging_data = config.logging.model_dump()
    if log_level is not None:
        logging_data["level"] = log_level

    return PackerConfiguration(
        schema_version=config.schema_version,
        packing=PackingConfig.model_validate(packing_data),
        output=OutputConfig.model_validate(output_data),
        logging=LoggingConfig.model_validate(logging_data),
    )
