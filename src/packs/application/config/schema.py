"""Pydantic models for the pack planner run configuration.

A configuration file is optional; every section has defaults that
reproduce the plain manifest behaviour.

Example file:
    {
        "schema_version": "1.0",
        "packing": {"flush_final_summary": true},
        "output": {"decimals": 2},
        "logging": {"level": "INFO"}
    }
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Supported schema versions for configuration files
# Version 1.0: Packing, output and logging sections
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class PackingConfig(BaseModel):
    """Packing engine options.

    Attributes:
        flush_final_summary: Emit a summary line for the last pack too.
            Off by default, matching the established report layout where
            only packs closed by a following pack are summarised.
        reject_non_positive_constraints: Refuse to pack when the header
            limits are zero or negative.
        announce_every_pack: Print a pack header even for a pack opened
            after a batch ended exactly on a full pack. Off by default,
            where such a pack continues without a header.
    """

    model_config = ConfigDict(extra="forbid")

    flush_final_summary: bool = Field(
        default=False, description="Emit a summary for the last open pack"
    )
    reject_non_positive_constraints: bool = Field(
        default=True, description="Fail before packing on non-positive pack limits"
    )
    announce_every_pack: bool = Field(
        default=False, description="Announce every pack, including after exact fills"
    )


class OutputConfig(BaseModel):
    """Report output options.

    Attributes:
        decimals: Decimal places for lengths and weights in the report.
    """

    model_config = ConfigDict(extra="forbid")

    decimals: int = Field(
        default=1, ge=0, le=6, description="Decimal places for lengths and weights"
    )


class LoggingConfig(BaseModel):
    """Logging options for the command line tool."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(default="WARNING", description="Root log level")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class PackerConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        packing: Packing engine options
        output: Report output options
        logging: Logging options
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    packing: PackingConfig = Field(default_factory=PackingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version: {v}. Supported versions: {supported}"
            )
        return v
