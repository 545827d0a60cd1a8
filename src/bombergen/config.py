"""Generator configuration for bombergen.

This module provides the generator configuration and reads overrides from
environment variables.

Configuration via environment variables:
    BOMBERGEN_OUT_OF_RANGE: "passthrough" or "clamp" (default: "passthrough")
    BOMBERGEN_LOG_LEVEL: logging level name for the CLI (default: "WARNING")
"""

import logging
import os
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OutOfRangePolicy(str, Enum):
    """What Story mode does with level numbers outside 1..50.

    Both policies log a warning; neither raises.
    """

    PASSTHROUGH = "passthrough"  # Evaluate the tables' fallback arms as-is
    CLAMP = "clamp"  # Clamp to the nearest valid level first


# Default configuration (can be overridden via environment variables)
DEFAULT_OUT_OF_RANGE_POLICY = OutOfRangePolicy.PASSTHROUGH
DEFAULT_LOG_LEVEL = "WARNING"


class GeneratorConfig(BaseModel):
    """Settings for LevelBlueprintGenerator.

    Attributes:
        out_of_range: Policy for Story level numbers outside 1..50
        log_level: Logging level name used by the CLI
    """

    model_config = ConfigDict(frozen=True)

    out_of_range: OutOfRangePolicy = Field(default=DEFAULT_OUT_OF_RANGE_POLICY)
    log_level: str = Field(default=DEFAULT_LOG_LEVEL)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level name is one the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def get_out_of_range_policy() -> OutOfRangePolicy:
    """Get configured out-of-range policy from environment.

    Raises:
        ValueError: If BOMBERGEN_OUT_OF_RANGE holds an unknown value
    """
    policy_str = os.environ.get(
        "BOMBERGEN_OUT_OF_RANGE", DEFAULT_OUT_OF_RANGE_POLICY.value
    ).lower()
    try:
        return OutOfRangePolicy(policy_str)
    except ValueError:
        valid = ", ".join(p.value for p in OutOfRangePolicy)
        raise ValueError(
            f"BOMBERGEN_OUT_OF_RANGE must be one of: {valid} (got {policy_str!r})"
        ) from None


def get_log_level() -> str:
    """Get configured log level name from environment."""
    return os.environ.get("BOMBERGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def load_config() -> GeneratorConfig:
    """Build a GeneratorConfig from the environment.

    Raises:
        ValueError: If an environment variable holds an invalid value
    """
    log_level = get_log_level()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"BOMBERGEN_LOG_LEVEL is not a logging level: {log_level!r}")
    return GeneratorConfig(out_of_range=get_out_of_range_policy(), log_level=log_level)
