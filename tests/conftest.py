from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from brickline.adapters.bricklink_xml import decode
from brickline.domain.model import ItemType, WantedItem

if TYPE_CHECKING:
    from collections.abc import Callable

    from brickline.domain.model import WantedList

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture(scope="session")
def fixture_text() -> Callable[[str], str]:
    """Return a fixture file's text with line breaks removed."""

    def load(name: str) -> str:
        return (DATA_DIR / name).read_text(encoding="utf-8").replace("\n", "")

    return load


@pytest.fixture(scope="session")
def fixture_wanted_list() -> Callable[[str], WantedList]:
    def load(name: str) -> WantedList:
        return decode((DATA_DIR / name).read_bytes())

    return load


@pytest.fixture(scope="session")
def make_part() -> Callable[..., WantedItem]:
    def build(
        item_id: str,
        color: int | None = None,
        min_qty: int | None = None,
        *,
        remarks: str | None = None,
    ) -> WantedItem:
        return WantedItem(
            item_type=ItemType.PART,
            item_id=item_id,
            color=color,
            min_qty=min_qty,
            remarks=remarks,
        )

    return build
