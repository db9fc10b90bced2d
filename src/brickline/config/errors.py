"""Errors raised while reading brickline settings from the environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""
