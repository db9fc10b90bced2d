"""Single-letter Bricklink codes for the domain enums.

Each table maps a domain enum member to its wire letter; the decode tables are
the exact inverses and are checked to be bijective when the module loads.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final, TypeVar

from brickline.domain.model import Condition, ItemType, YesNo

if TYPE_CHECKING:
    from collections.abc import Mapping


K = TypeVar("K")
V = TypeVar("V")


def _invert(table: Mapping[K, V]) -> Mapping[V, K]:
    inverted = {code: member for member, code in table.items()}
    if len(inverted) != len(table):
        raise ValueError(f"code table is not bijective: {dict(table)}")
    return MappingProxyType(inverted)


ITEM_TYPE_CODES: Final[Mapping[ItemType, str]] = MappingProxyType(
    {
        ItemType.SET: "S",
        ItemType.PART: "P",
        ItemType.MINIFIG: "M",
        ItemType.BOOK: "B",
        ItemType.GEAR: "G",
        ItemType.CATALOG: "C",
        ItemType.INSTRUCTION: "I",
        ItemType.ORIGINAL_BOX: "O",
        ItemType.UNSORTED_LOT: "U",
    }
)

CONDITION_CODES: Final[Mapping[Condition, str]] = MappingProxyType(
    {
        Condition.NEW: "N",
        Condition.USED: "U",
        Condition.COMPLETE: "C",
        Condition.INCOMPLETE: "I",
        Condition.SEALED: "S",
        Condition.NOT_PROVIDED: "X",
    }
)

YES_NO_CODES: Final[Mapping[YesNo, str]] = MappingProxyType(
    {
        YesNo.YES: "Y",
        YesNo.NO: "N",
    }
)

ITEM_TYPES_BY_CODE: Final[Mapping[str, ItemType]] = _invert(ITEM_TYPE_CODES)
CONDITIONS_BY_CODE: Final[Mapping[str, Condition]] = _invert(CONDITION_CODES)
YES_NO_BY_CODE: Final[Mapping[str, YesNo]] = _invert(YES_NO_CODES)
