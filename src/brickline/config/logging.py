"""Shared logging helpers for brickline."""

from __future__ import annotations

import logging
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_VAR: Final[str] = "BRICKLINE_LOG_LEVEL"


def get_logging_level(default: int = logging.INFO) -> int:
    """Return the level named by ``BRICKLINE_LOG_LEVEL`` (e.g. ``DEBUG``)."""

    name = optional_env_var(LOG_LEVEL_VAR)
    if name is None:
        return default
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(f"{LOG_LEVEL_VAR} is not a logging level: {name!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the
    level defaults to ``BRICKLINE_LOG_LEVEL`` (INFO when unset) and the format is
    terse enough for CLI output. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=get_logging_level() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
