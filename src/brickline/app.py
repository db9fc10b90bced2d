"""Application entry points working on wanted list files."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from brickline.adapters.bricklink_xml import decode, encode, repair_legacy_output
from brickline.domain.reconciliation import DEFAULT_QUANTITY_POLICY, reconcile
from brickline.domain.statistics import WantedListStatistics, aggregate

if TYPE_CHECKING:
    from pathlib import Path

    from brickline.domain.model import WantedList
    from brickline.domain.reconciliation import QuantityPolicy


log = getLogger(__name__)


class DestinationExistsError(FileExistsError):
    """Raised when an output file exists and overwriting was not allowed."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Refusing to overwrite existing file: {path}")


@dataclass(slots=True)
class MergeFilesResult:
    """Outcome of merging two wanted list files."""

    left_items: int
    right_items: int
    merged: WantedList
    statistics: WantedListStatistics


def load_wanted_list(path: Path) -> WantedList:
    return decode(path.read_bytes())


def _write_text(text: str, path: Path, *, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise DestinationExistsError(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def write_wanted_list(wanted_list: WantedList, path: Path, *, overwrite: bool = False) -> None:
    _write_text(encode(wanted_list), path, overwrite=overwrite)


def merge_wanted_list_files(
    left: Path,
    right: Path,
    output: Path,
    *,
    overwrite: bool = False,
    policy: QuantityPolicy = DEFAULT_QUANTITY_POLICY,
) -> MergeFilesResult:
    """Merge ``right`` into ``left`` and write the combined list to ``output``.

    Metadata is kept from ``left`` wherever both files want the same item/color.
    """

    left_list = load_wanted_list(left)
    right_list = load_wanted_list(right)
    log.info(
        "Merging wanted lists: left=%s (%s items), right=%s (%s items)",
        left,
        len(left_list),
        right,
        len(right_list),
    )

    merged = reconcile(left_list, right_list, policy=policy)
    write_wanted_list(merged, output, overwrite=overwrite)
    statistics = aggregate(merged)

    log.info(
        "Wrote %s: items=%s, parts=%s",
        output,
        statistics.total_items,
        statistics.total_parts,
    )
    return MergeFilesResult(
        left_items=len(left_list),
        right_items=len(right_list),
        merged=merged,
        statistics=statistics,
    )


def wanted_list_statistics(path: Path) -> WantedListStatistics:
    return aggregate(load_wanted_list(path))


def repair_wanted_list_file(source: Path, output: Path, *, overwrite: bool = False) -> WantedList:
    """Fix a document written by the legacy serializer and validate the result."""

    repaired = repair_legacy_output(source.read_text(encoding="utf-8"))
    wanted_list = decode(repaired)
    _write_text(repaired, output, overwrite=overwrite)
    log.info("Repaired %s into %s (%s items)", source, output, len(wanted_list))
    return wanted_list
