"""Text-level fixes for Bricklink wanted list XML.

``codec.encode`` writes the tree itself and only needs the declaration header.
The excision helpers exist for documents produced by the legacy serializer,
which wraps the item sequence in one extra ``<ITEM>`` start/end pair:

    <INVENTORY><ITEM><ITEM>...</ITEM>...<ITEM>...</ITEM></ITEM></INVENTORY>

The redundant tags sit at fixed offsets from both ends of the text, so they are
removed by position once their spelling has been checked.
"""

from __future__ import annotations

from typing import Final

from .errors import DecodeError
from .schema import ITEM_TAG, ROOT_TAG

XML_DECLARATION: Final[str] = '<?xml version="1.0" encoding="UTF-8"?>'

_ROOT_OPEN: Final[str] = f"<{ROOT_TAG}>"
_ROOT_CLOSE: Final[str] = f"</{ROOT_TAG}>"
_ITEM_OPEN: Final[str] = f"<{ITEM_TAG}>"
_ITEM_CLOSE: Final[str] = f"</{ITEM_TAG}>"


def add_declaration(body: str) -> str:
    if body.startswith(XML_DECLARATION):
        return body
    return XML_DECLARATION + body


def has_redundant_wrapper(text: str) -> bool:
    head = len(_ROOT_OPEN)
    tail = len(text) - len(_ROOT_CLOSE)
    return (
        text.startswith(_ROOT_OPEN + _ITEM_OPEN + _ITEM_OPEN)
        and text.endswith(_ITEM_CLOSE + _ITEM_CLOSE + _ROOT_CLOSE)
        and tail - len(_ITEM_CLOSE) >= head + len(_ITEM_OPEN)
    )


def strip_redundant_wrapper(text: str) -> str:
    """Remove the wrapper ``<ITEM>``/``</ITEM>`` pair the legacy serializer emits."""

    if not has_redundant_wrapper(text):
        raise DecodeError("Text does not carry the redundant ITEM wrapper")
    head = len(_ROOT_OPEN)
    tail = len(text) - len(_ROOT_CLOSE)
    return text[:head] + text[head + len(_ITEM_OPEN) : tail - len(_ITEM_CLOSE)] + text[tail:]


def repair_legacy_output(text: str) -> str:
    """Turn raw legacy serializer output into a valid wanted list document."""

    body = text.strip().removeprefix(XML_DECLARATION)
    return add_declaration(strip_redundant_wrapper(body))
