"""Translate Bricklink wire payloads into domain entities and back."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import TYPE_CHECKING, Final, TypeVar

from pydantic import ValidationError

from brickline.domain.model import WantedItem, WantedList

from .codes import (
    CONDITION_CODES,
    CONDITIONS_BY_CODE,
    ITEM_TYPE_CODES,
    ITEM_TYPES_BY_CODE,
    YES_NO_BY_CODE,
    YES_NO_CODES,
)
from .errors import DecodeError, EncodeError
from .schema import ITEM_TAG, WantedItemPayload, WantedListPayload

if TYPE_CHECKING:
    from collections.abc import Mapping

    from brickline.domain.model import Price

PRICE_QUANTUM: Final[Decimal] = Decimal("0.01")


T = TypeVar("T")


def _lookup(table: Mapping[str, T], *, field: str, raw: str) -> T:
    try:
        return table[raw]
    except KeyError:
        raise DecodeError(field=field, raw_value=raw) from None


def parse_price(raw: str) -> Price:
    try:
        price = Decimal(raw)
    except InvalidOperation:
        raise DecodeError(field="MAXPRICE", raw_value=raw) from None
    if not price.is_finite():
        raise DecodeError(field="MAXPRICE", raw_value=raw)
    return price


def format_price(price: Price) -> str:
    """Render ``price`` with exactly two fractional digits."""

    try:
        with localcontext() as context:
            # room for every integer digit plus the two fractional ones
            context.prec = max(context.prec, price.adjusted() + 3)
            return format(price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP), "f")
    except InvalidOperation as exc:
        raise EncodeError(f"Cannot render price {price!r}") from exc


def to_domain(payload: WantedItemPayload) -> WantedItem:
    return WantedItem(
        item_type=_lookup(ITEM_TYPES_BY_CODE, field="ITEMTYPE", raw=payload.item_type),
        item_id=payload.item_id,
        color=payload.color,
        max_price=None if payload.max_price is None else parse_price(payload.max_price),
        min_qty=payload.min_qty,
        qty_filled=payload.qty_filled,
        condition=(
            None
            if payload.condition is None
            else _lookup(CONDITIONS_BY_CODE, field="CONDITION", raw=payload.condition)
        ),
        remarks=payload.remarks,
        notify=(
            None
            if payload.notify is None
            else _lookup(YES_NO_BY_CODE, field="NOTIFY", raw=payload.notify)
        ),
        wanted_show=(
            None
            if payload.wanted_show is None
            else _lookup(YES_NO_BY_CODE, field="WANTEDSHOW", raw=payload.wanted_show)
        ),
        wanted_list_id=payload.wanted_list_id,
    )


def to_payload(item: WantedItem) -> WantedItemPayload:
    fields: dict[str, object] = {
        "ITEMTYPE": ITEM_TYPE_CODES[item.item_type],
        "ITEMID": item.item_id,
        "COLOR": item.color,
        "MAXPRICE": None if item.max_price is None else format_price(item.max_price),
        "MINQTY": item.min_qty,
        "QTYFILLED": item.qty_filled,
        "CONDITION": None if item.condition is None else CONDITION_CODES[item.condition],
        "REMARKS": item.remarks,
        "NOTIFY": None if item.notify is None else YES_NO_CODES[item.notify],
        "WANTEDSHOW": None if item.wanted_show is None else YES_NO_CODES[item.wanted_show],
        "WANTEDLISTID": item.wanted_list_id,
    }
    try:
        return WantedItemPayload.model_validate(
            {tag: value for tag, value in fields.items() if value is not None}
        )
    except ValidationError as exc:
        raise EncodeError(f"Item {item.item_id!r} cannot be written: {exc}") from exc


def wanted_list_from_payload(payload: WantedListPayload) -> WantedList:
    items: list[WantedItem] = []
    for position, item_payload in enumerate(payload.items):
        try:
            items.append(to_domain(item_payload))
        except DecodeError as exc:
            raise DecodeError(
                field=exc.field, raw_value=exc.raw_value, position=position
            ) from exc
    return WantedList.of(items)


def wanted_list_to_payload(wanted_list: WantedList) -> WantedListPayload:
    return WantedListPayload.model_validate(
        {ITEM_TAG: [to_payload(item) for item in wanted_list]}
    )
