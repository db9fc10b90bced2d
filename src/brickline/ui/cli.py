# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from brickline.app import (
    merge_wanted_list_files,
    repair_wanted_list_file,
    wanted_list_statistics,
)
from brickline.config import ConfigurationError, configure_logging, get_merge_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bricklink wanted list helper tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge = subparsers.add_parser("merge", help="Merge two Bricklink wanted lists")
    merge.add_argument(
        "-l",
        "--left",
        type=Path,
        required=True,
        help="Path to lefthand wanted list, will have right merged into it",
    )
    merge.add_argument(
        "-r",
        "--right",
        type=Path,
        required=True,
        help="Path to righthand wanted list, will be merged into left",
    )
    merge.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Path the merged wanted list is written to",
    )
    merge.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite the output file without asking",
    )

    stats = subparsers.add_parser("stats", help="Summarise one or more wanted lists")
    stats.add_argument("paths", type=Path, nargs="+", help="Wanted list files")

    repair = subparsers.add_parser(
        "repair",
        help="Fix a wanted list written with the redundant ITEM wrapper",
    )
    repair.add_argument("source", type=Path, help="Wanted list file to repair")
    repair.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Path the repaired wanted list is written to",
    )
    repair.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite the output file without asking",
    )

    return parser.parse_args(list(argv))


def _confirm_overwrite(path: Path) -> bool:
    answer = input(f"{path} already exists. Overwrite? [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


def _may_write(path: Path, *, force: bool) -> bool:
    return force or not path.exists() or _confirm_overwrite(path)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        configure_logging()
    except ConfigurationError:
        configure_logging(level=logging.INFO, force=True)
        log.exception("Invalid logging configuration")
        sys.exit(2)

    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        merge_config = get_merge_config()
    except ConfigurationError:
        log.exception("Invalid merge configuration")
        sys.exit(2)

    try:
        if parsed_args.command == "merge":
            if not _may_write(parsed_args.output, force=parsed_args.force):
                log.error("Not overwriting %s", parsed_args.output)
                sys.exit(1)
            merge_wanted_list_files(
                parsed_args.left,
                parsed_args.right,
                parsed_args.output,
                overwrite=True,
                policy=merge_config.quantity_policy,
            )
        elif parsed_args.command == "stats":
            for path in parsed_args.paths:
                print(f"{path}:\n{wanted_list_statistics(path)}")
        elif parsed_args.command == "repair":
            if not _may_write(parsed_args.output, force=parsed_args.force):
                log.error("Not overwriting %s", parsed_args.output)
                sys.exit(1)
            repair_wanted_list_file(parsed_args.source, parsed_args.output, overwrite=True)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error running %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def entrypoint() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    entrypoint()
