"""Domain enums (pure, dependency-light).

Values are descriptive names; the single-letter Bricklink codes live with the
XML adapter so the domain never depends on the wire spelling.
"""

from __future__ import annotations

from enum import StrEnum


class ItemType(StrEnum):
    SET = "set"
    PART = "part"
    MINIFIG = "minifig"
    BOOK = "book"
    GEAR = "gear"
    CATALOG = "catalog"
    INSTRUCTION = "instruction"
    ORIGINAL_BOX = "original_box"
    UNSORTED_LOT = "unsorted_lot"


class Condition(StrEnum):
    NEW = "new"
    USED = "used"
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    SEALED = "sealed"
    NOT_PROVIDED = "not_provided"


class YesNo(StrEnum):
    """Boolean-like flag used by ``notify`` and ``wanted_show``."""

    YES = "yes"
    NO = "no"
