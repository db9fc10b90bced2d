from __future__ import annotations

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from brickline.domain.model import (
    Condition,
    ItemColorKey,
    ItemType,
    WantedItem,
    WantedList,
    YesNo,
)


def test_item_key_combines_item_id_and_color() -> None:
    item = WantedItem(item_type=ItemType.PART, item_id="3622", color=11)

    assert item.key == ItemColorKey(item_id="3622", color=11)


def test_absent_color_is_its_own_key_bucket() -> None:
    without_color = ItemColorKey(item_id="3039")

    assert without_color != ItemColorKey(item_id="3039", color=0)
    assert without_color == ItemColorKey(item_id="3039", color=None)


def test_sort_key_orders_item_id_then_absent_color_first() -> None:
    keys = [
        ItemColorKey(item_id="3623", color=1),
        ItemColorKey(item_id="3001", color=5),
        ItemColorKey(item_id="3001", color=-3),
        ItemColorKey(item_id="3001"),
        ItemColorKey(item_id="3001", color=0),
    ]

    ordered = sorted(keys, key=lambda key: key.sort_key)

    assert ordered == [
        ItemColorKey(item_id="3001"),
        ItemColorKey(item_id="3001", color=-3),
        ItemColorKey(item_id="3001", color=0),
        ItemColorKey(item_id="3001", color=5),
        ItemColorKey(item_id="3623", color=1),
    ]


def test_item_rejects_color_outside_signed_byte() -> None:
    with pytest.raises(ValueError, match="color 128 outside"):
        WantedItem(item_type=ItemType.PART, item_id="3001", color=128)

    with pytest.raises(ValueError, match="color -129 outside"):
        WantedItem(item_type=ItemType.PART, item_id="3001", color=-129)


def test_item_rejects_negative_quantities() -> None:
    with pytest.raises(ValueError, match="min_qty must be non-negative"):
        WantedItem(item_type=ItemType.PART, item_id="3001", min_qty=-1)

    with pytest.raises(ValueError, match="qty_filled must be non-negative"):
        WantedItem(item_type=ItemType.PART, item_id="3001", qty_filled=-2)


def test_item_is_immutable() -> None:
    item = WantedItem(item_type=ItemType.SET, item_id="6020-1", min_qty=1)

    with pytest.raises(FrozenInstanceError):
        item.min_qty = 2  # type: ignore[misc]


def test_items_compare_by_value() -> None:
    first = WantedItem(
        item_type=ItemType.PART,
        item_id="3001",
        color=5,
        max_price=Decimal("1.00"),
        condition=Condition.NEW,
        notify=YesNo.NO,
    )
    second = WantedItem(
        item_type=ItemType.PART,
        item_id="3001",
        color=5,
        max_price=Decimal("1.0"),
        condition=Condition.NEW,
        notify=YesNo.NO,
    )

    assert first == second


def test_wanted_list_preserves_order_and_supports_len_and_iteration() -> None:
    items = [
        WantedItem(item_type=ItemType.PART, item_id="3622", color=11),
        WantedItem(item_type=ItemType.PART, item_id="3039"),
    ]

    wanted_list = WantedList.of(items)

    assert len(wanted_list) == 2
    assert list(wanted_list) == items
    assert wanted_list.keys == (
        ItemColorKey(item_id="3622", color=11),
        ItemColorKey(item_id="3039"),
    )
    assert WantedList() == WantedList.of([])
