"""Configuration defaults and environment overrides for shamir-plots."""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================
#
# SHAMIR_PLOTS_OUTPUT_DIR: Directory the figures are written to (default: plots)
#   The CLI creates it if missing; the renderer itself never creates directories.
#
# SHAMIR_PLOTS_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

import logging
import os
from pathlib import Path
from typing import Optional

from shamir_plots.exceptions import ConfigurationError

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_OUTPUT_DIR = "plots"
DEFAULT_LOG_LEVEL = "INFO"

OUTPUT_DIR_ENV = "SHAMIR_PLOTS_OUTPUT_DIR"
LOG_LEVEL_ENV = "SHAMIR_PLOTS_LOG_LEVEL"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Resolves settings from explicit values, the environment, then defaults."""

    @classmethod
    def get_output_dir(cls, override: Optional[str] = None) -> Path:
        if override:
            return Path(override)
        return Path(os.environ.get(OUTPUT_DIR_ENV) or DEFAULT_OUTPUT_DIR)

    @classmethod
    def get_log_level(cls, override: Optional[str] = None) -> int:
        """Return the numeric logging level.

        Raises:
            ConfigurationError: If the level name is not recognised
        """
        name = override or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
        name = name.strip().upper()
        if name not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{name}'. Expected one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        return getattr(logging, name)


def get_config_summary() -> dict:
    """Get a summary of the current configuration from the environment."""
    return {
        "output_dir": str(Config.get_output_dir()),
        "log_level": logging.getLevelName(Config.get_log_level()),
    }
