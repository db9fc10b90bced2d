"""Merge configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from brickline.domain.reconciliation import DEFAULT_IMPLICIT_QUANTITY, QuantityPolicy

from .env import env_non_negative_int

IMPLICIT_INCOMING_QTY_VAR: Final[str] = "BRICKLINE_IMPLICIT_INCOMING_QTY"
IMPLICIT_EXISTING_QTY_VAR: Final[str] = "BRICKLINE_IMPLICIT_EXISTING_QTY"


@dataclass(frozen=True, slots=True)
class MergeConfig:
    quantity_policy: QuantityPolicy = field(default_factory=QuantityPolicy)


def get_merge_config() -> MergeConfig:
    return MergeConfig(
        quantity_policy=QuantityPolicy(
            implicit_incoming=env_non_negative_int(
                IMPLICIT_INCOMING_QTY_VAR, DEFAULT_IMPLICIT_QUANTITY
            ),
            implicit_existing=env_non_negative_int(
                IMPLICIT_EXISTING_QTY_VAR, DEFAULT_IMPLICIT_QUANTITY
            ),
        )
    )
