"""Quantity accumulation policy for reconciling wanted lists.

When both lists want the same item/color, the incoming quantity is added to
the quantity already recorded for that key. A missing ``min_qty`` on either
side stands for an implicit quantity; the two sides are configured separately
because the historical rule counts a missing left-hand quantity as 1 and then
adds the incoming quantity on top, so two quantity-less items merge to 2
rather than 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from brickline.domain.model import Quantity

DEFAULT_IMPLICIT_QUANTITY: Final[int] = 1


@dataclass(frozen=True, slots=True)
class QuantityPolicy:
    implicit_incoming: Quantity = DEFAULT_IMPLICIT_QUANTITY
    implicit_existing: Quantity = DEFAULT_IMPLICIT_QUANTITY

    def __post_init__(self) -> None:
        if self.implicit_incoming < 0 or self.implicit_existing < 0:
            raise ValueError("implicit quantities must be non-negative")

    def accumulate(self, existing: Quantity | None, incoming: Quantity | None) -> Quantity:
        incoming_qty = self.implicit_incoming if incoming is None else incoming
        base = self.implicit_existing if existing is None else existing
        return base + incoming_qty


DEFAULT_QUANTITY_POLICY: Final[QuantityPolicy] = QuantityPolicy()
