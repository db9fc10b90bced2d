"""Pydantic models describing the Bricklink wanted list XML payload.

The wire model only holds primitives: enumerations stay as their single-letter
codes and prices as text. ``translator`` turns these into domain values. Field
declaration order is the element order written inside each ``ITEM``.

Surrounding whitespace is ignored in coded, numeric and price elements. Free
text (``ITEMID``, ``REMARKS``, ``WANTEDLISTID``) is kept verbatim.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from brickline.domain.model import COLOR_MAX, COLOR_MIN

ROOT_TAG: Final[str] = "INVENTORY"
ITEM_TAG: Final[str] = "ITEM"


class BricklinkBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class WantedItemPayload(BricklinkBaseModel):
    item_type: str = Field(alias="ITEMTYPE")
    item_id: str = Field(alias="ITEMID")
    color: int | None = Field(default=None, alias="COLOR", ge=COLOR_MIN, le=COLOR_MAX)
    max_price: str | None = Field(default=None, alias="MAXPRICE")
    min_qty: int | None = Field(default=None, alias="MINQTY", ge=0)
    qty_filled: int | None = Field(default=None, alias="QTYFILLED", ge=0)
    condition: str | None = Field(default=None, alias="CONDITION")
    remarks: str | None = Field(default=None, alias="REMARKS")
    notify: str | None = Field(default=None, alias="NOTIFY")
    wanted_show: str | None = Field(default=None, alias="WANTEDSHOW")
    wanted_list_id: str | None = Field(default=None, alias="WANTEDLISTID")

    @field_validator(
        "item_type",
        "color",
        "max_price",
        "min_qty",
        "qty_filled",
        "condition",
        "notify",
        "wanted_show",
        mode="before",
    )
    @classmethod
    def _strip_whitespace(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    def wire_fields(self) -> dict[str, str | int]:
        """Return the present fields keyed by element name, in element order."""

        return self.model_dump(by_alias=True, exclude_none=True)


class WantedListPayload(BricklinkBaseModel):
    items: list[WantedItemPayload] = Field(
        default_factory=list["WantedItemPayload"], alias=ITEM_TAG
    )
