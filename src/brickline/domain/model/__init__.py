"""Public domain model surface."""

from __future__ import annotations

from brickline.domain.model.enums import Condition, ItemType, YesNo
from brickline.domain.model.primitives import (
    COLOR_MAX,
    COLOR_MIN,
    CatalogId,
    ColorId,
    Price,
    Quantity,
    Remarks,
    WantedListId,
)
from brickline.domain.model.wanted import ItemColorKey, WantedItem, WantedList

__all__ = [  # noqa: RUF022
    # entities
    "ItemColorKey",
    "WantedItem",
    "WantedList",
    # enums
    "Condition",
    "ItemType",
    "YesNo",
    # primitives
    "COLOR_MAX",
    "COLOR_MIN",
    "CatalogId",
    "ColorId",
    "Price",
    "Quantity",
    "Remarks",
    "WantedListId",
]
