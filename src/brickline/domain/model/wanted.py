"""Wanted list entities.

A wanted list is an ordered sequence of catalog items. Items are immutable
values; operations that change quantities build new items with
``dataclasses.replace`` instead of mutating shared instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from brickline.domain.model.primitives import COLOR_MAX, COLOR_MIN

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from brickline.domain.model.enums import Condition, ItemType, YesNo
    from brickline.domain.model.primitives import (
        CatalogId,
        ColorId,
        Price,
        Quantity,
        Remarks,
        WantedListId,
    )


@dataclass(frozen=True, slots=True)
class ItemColorKey:
    """Identity of a wanted item: catalog id plus optional color.

    An absent color is its own bucket and never equals a present color.
    """

    item_id: CatalogId
    color: ColorId | None = None

    @property
    def sort_key(self) -> tuple[str, bool, int]:
        # absent colors sort before any present color
        return (self.item_id, self.color is not None, self.color or 0)


@dataclass(frozen=True, slots=True, kw_only=True)
class WantedItem:
    item_type: ItemType
    item_id: CatalogId
    color: ColorId | None = None
    max_price: Price | None = None
    min_qty: Quantity | None = None
    qty_filled: Quantity | None = None
    condition: Condition | None = None
    remarks: Remarks | None = None
    notify: YesNo | None = None
    wanted_show: YesNo | None = None
    wanted_list_id: WantedListId | None = None

    def __post_init__(self) -> None:
        if self.color is not None and not COLOR_MIN <= self.color <= COLOR_MAX:
            raise ValueError(f"color {self.color} outside {COLOR_MIN}..{COLOR_MAX}")
        if self.min_qty is not None and self.min_qty < 0:
            raise ValueError(f"min_qty must be non-negative, got {self.min_qty}")
        if self.qty_filled is not None and self.qty_filled < 0:
            raise ValueError(f"qty_filled must be non-negative, got {self.qty_filled}")

    @property
    def key(self) -> ItemColorKey:
        return ItemColorKey(item_id=self.item_id, color=self.color)


@dataclass(frozen=True, slots=True)
class WantedList:
    """Ordered collection of wanted items."""

    items: tuple[WantedItem, ...] = ()

    @classmethod
    def of(cls, items: Iterable[WantedItem]) -> WantedList:
        return cls(items=tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[WantedItem]:
        return iter(self.items)

    @property
    def keys(self) -> tuple[ItemColorKey, ...]:
        return tuple(item.key for item in self.items)
