"""Reconciliation of two wanted lists into one.

Flow:
1) index the primary list by item/color key
2) fold the secondary list into the index, accumulating quantities
3) emit the index values in deterministic key order
"""

from __future__ import annotations

from .merge import increment_item, index_by_key, reconcile
from .quantity import DEFAULT_IMPLICIT_QUANTITY, DEFAULT_QUANTITY_POLICY, QuantityPolicy

__all__ = [
    "DEFAULT_IMPLICIT_QUANTITY",
    "DEFAULT_QUANTITY_POLICY",
    "QuantityPolicy",
    "increment_item",
    "index_by_key",
    "reconcile",
]
