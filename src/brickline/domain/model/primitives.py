"""Domain primitives: scalar aliases.

Aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Final, TypeAlias

CatalogId: TypeAlias = str
ColorId: TypeAlias = int
Quantity: TypeAlias = int
Price: TypeAlias = Decimal
Remarks: TypeAlias = str
WantedListId: TypeAlias = str

# Bricklink stores color ids as a signed byte.
COLOR_MIN: Final[int] = -128
COLOR_MAX: Final[int] = 127
