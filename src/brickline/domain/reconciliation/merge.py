"""Key-based join of two wanted lists.

The primary list seeds an index keyed by (item id, color). Each secondary item
either accumulates its quantity into the indexed item or is added as a new
entry. Non-quantity metadata always comes from whichever list first
established the key, so ``reconcile(a, b)`` and ``reconcile(b, a)`` generally
differ. The result is ordered by key, independent of input order.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from brickline.domain.model import WantedList

from .quantity import DEFAULT_QUANTITY_POLICY

if TYPE_CHECKING:
    from brickline.domain.model import ItemColorKey, WantedItem

    from .quantity import QuantityPolicy


def index_by_key(wanted_list: WantedList) -> dict[ItemColorKey, WantedItem]:
    """Map every item of ``wanted_list`` by its identity key.

    A key repeated within one list keeps the last item seen.
    """

    index: dict[ItemColorKey, WantedItem] = {}
    for item in wanted_list:
        index[item.key] = item
    return index


def increment_item(
    existing: WantedItem,
    incoming: WantedItem,
    *,
    policy: QuantityPolicy = DEFAULT_QUANTITY_POLICY,
) -> WantedItem:
    """Return ``existing`` with the quantity of ``incoming`` added to it."""

    return replace(existing, min_qty=policy.accumulate(existing.min_qty, incoming.min_qty))


def reconcile(
    primary: WantedList,
    secondary: WantedList,
    *,
    policy: QuantityPolicy = DEFAULT_QUANTITY_POLICY,
) -> WantedList:
    """Merge ``secondary`` into ``primary`` and return a new, key-ordered list."""

    merged = index_by_key(primary)
    for item in secondary:
        key = item.key
        existing = merged.get(key)
        if existing is None:
            merged[key] = item
        else:
            merged[key] = increment_item(existing, item, policy=policy)

    ordered_keys = sorted(merged, key=lambda key: key.sort_key)
    return WantedList.of(merged[key] for key in ordered_keys)
