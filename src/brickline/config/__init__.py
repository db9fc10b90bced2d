"""Application configuration helpers."""

from __future__ import annotations

from .env import env_non_negative_int, optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging, get_logging_level
from .merge import (
    IMPLICIT_EXISTING_QTY_VAR,
    IMPLICIT_INCOMING_QTY_VAR,
    MergeConfig,
    get_merge_config,
)

__all__ = [
    "IMPLICIT_EXISTING_QTY_VAR",
    "IMPLICIT_INCOMING_QTY_VAR",
    "ConfigurationError",
    "MergeConfig",
    "configure_logging",
    "env_non_negative_int",
    "get_logging_level",
    "get_merge_config",
    "optional_env_var",
]
