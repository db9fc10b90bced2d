from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from brickline.adapters.bricklink_xml import DecodeError, decode, encode
from brickline.app import (
    DestinationExistsError,
    load_wanted_list,
    merge_wanted_list_files,
    repair_wanted_list_file,
    wanted_list_statistics,
    write_wanted_list,
)
from brickline.domain.model import WantedList
from brickline.domain.reconciliation import QuantityPolicy, reconcile
from brickline.domain.statistics import WantedListStatistics

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from brickline.domain.model import WantedItem


def test_merge_wanted_list_files(
    tmp_path: Path,
    data_dir: Path,
    fixture_wanted_list: Callable[[str], WantedList],
) -> None:
    output = tmp_path / "merged.xml"

    result = merge_wanted_list_files(
        data_dir / "test_wanted_list_1.xml",
        data_dir / "test_wanted_list_2.xml",
        output,
    )

    expected = reconcile(
        fixture_wanted_list("test_wanted_list_1.xml"),
        fixture_wanted_list("test_wanted_list_2.xml"),
    )
    assert result.left_items == 3
    assert result.right_items == 3
    assert result.merged == expected
    assert result.statistics == WantedListStatistics(
        total_items=4,
        total_parts=219,
        unique_item_color_count=4,
        unique_color_count=3,
    )
    assert output.read_text(encoding="utf-8") == encode(expected)


def test_merge_wanted_list_files_uses_policy(
    tmp_path: Path,
    make_part: Callable[..., WantedItem],
) -> None:
    left = tmp_path / "left.xml"
    right = tmp_path / "right.xml"
    write_wanted_list(WantedList.of([make_part("3001", 5)]), left)
    write_wanted_list(WantedList.of([make_part("3001", 5)]), right)

    result = merge_wanted_list_files(
        left,
        right,
        tmp_path / "out.xml",
        policy=QuantityPolicy(implicit_incoming=1, implicit_existing=0),
    )

    assert [item.min_qty for item in result.merged] == [1]


def test_merge_refuses_to_overwrite_by_default(tmp_path: Path, data_dir: Path) -> None:
    output = tmp_path / "merged.xml"
    output.write_text("keep me", encoding="utf-8")

    with pytest.raises(DestinationExistsError) as exc_info:
        merge_wanted_list_files(
            data_dir / "test_wanted_list_1.xml",
            data_dir / "test_wanted_list_2.xml",
            output,
        )

    assert exc_info.value.path == output
    assert output.read_text(encoding="utf-8") == "keep me"


def test_merge_overwrites_when_allowed(tmp_path: Path, data_dir: Path) -> None:
    output = tmp_path / "merged.xml"
    output.write_text("old", encoding="utf-8")

    merge_wanted_list_files(
        data_dir / "bricklink_example.xml",
        data_dir / "test_wanted_list_1.xml",
        output,
        overwrite=True,
    )

    assert len(load_wanted_list(output)) == 4


def test_write_wanted_list_creates_parent_directories(
    tmp_path: Path,
    fixture_wanted_list: Callable[[str], WantedList],
) -> None:
    wanted = fixture_wanted_list("bricklink_example.xml")
    output = tmp_path / "nested" / "dir" / "list.xml"

    write_wanted_list(wanted, output)

    assert load_wanted_list(output) == wanted


def test_load_wanted_list_reports_decode_errors(tmp_path: Path) -> None:
    broken = tmp_path / "broken.xml"
    broken.write_text("<INVENTORY><ITEM></INVENTORY>", encoding="utf-8")

    with pytest.raises(DecodeError):
        load_wanted_list(broken)


def test_wanted_list_statistics(data_dir: Path) -> None:
    statistics = wanted_list_statistics(data_dir / "bricklink_example.xml")

    assert (statistics.total_items, statistics.total_parts) == (3, 102)


def test_repair_wanted_list_file(
    tmp_path: Path,
    fixture_text: Callable[[str], str],
) -> None:
    expected = fixture_text("test_wanted_list_2.xml")
    inner = expected.split("<INVENTORY>", 1)[1].removesuffix("</INVENTORY>")
    source = tmp_path / "legacy.xml"
    source.write_text(f"<INVENTORY><ITEM>{inner}</ITEM></INVENTORY>\n", encoding="utf-8")
    output = tmp_path / "repaired.xml"

    repaired = repair_wanted_list_file(source, output)

    assert output.read_text(encoding="utf-8") == expected
    assert repaired == decode(expected)


def test_repair_wanted_list_file_rejects_clean_documents(
    tmp_path: Path,
    data_dir: Path,
) -> None:
    output = tmp_path / "repaired.xml"

    with pytest.raises(DecodeError, match="redundant ITEM wrapper"):
        repair_wanted_list_file(data_dir / "test_wanted_list_1.xml", output)

    assert not output.exists()
