"""Summary counts over a wanted list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brickline.domain.model import ColorId, ItemColorKey, WantedItem, WantedList


@dataclass(frozen=True, slots=True)
class WantedListStatistics:
    total_items: int = 0
    total_parts: int = 0
    unique_item_color_count: int = 0
    unique_color_count: int = 0

    def __str__(self) -> str:
        return (
            f"Total Items: {self.total_items}\n"
            f"Total Parts: {self.total_parts}\n"
            f"Unique Item/Color Count: {self.unique_item_color_count}\n"
            f"Unique Color Count: {self.unique_color_count}"
        )


@dataclass(slots=True)
class _StatisticsFold:
    total_items: int = 0
    total_parts: int = 0
    seen_keys: set[ItemColorKey] = field(default_factory=set["ItemColorKey"])
    seen_colors: set[ColorId] = field(default_factory=set["ColorId"])

    def update(self, item: WantedItem) -> None:
        self.total_items += 1
        # an item without a quantity still counts as one part
        self.total_parts += 1 if item.min_qty is None else item.min_qty
        self.seen_keys.add(item.key)
        if item.color is not None:
            self.seen_colors.add(item.color)

    def build(self) -> WantedListStatistics:
        return WantedListStatistics(
            total_items=self.total_items,
            total_parts=self.total_parts,
            unique_item_color_count=len(self.seen_keys),
            unique_color_count=len(self.seen_colors),
        )


def aggregate(wanted_list: WantedList) -> WantedListStatistics:
    """Fold ``wanted_list`` into its summary counts."""

    fold = _StatisticsFold()
    for item in wanted_list:
        fold.update(item)
    return fold.build()
