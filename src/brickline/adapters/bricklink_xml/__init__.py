"""Public interface for the Bricklink wanted list XML adapter."""

from __future__ import annotations

from .codec import decode, encode, parse_payload, render_payload
from .errors import DecodeError, EncodeError, WantedListCodecError
from .repair import (
    XML_DECLARATION,
    add_declaration,
    has_redundant_wrapper,
    repair_legacy_output,
    strip_redundant_wrapper,
)
from .schema import WantedItemPayload, WantedListPayload
from .translator import to_domain, to_payload

__all__ = [
    "XML_DECLARATION",
    "DecodeError",
    "EncodeError",
    "WantedItemPayload",
    "WantedListCodecError",
    "WantedListPayload",
    "add_declaration",
    "decode",
    "encode",
    "has_redundant_wrapper",
    "parse_payload",
    "render_payload",
    "repair_legacy_output",
    "strip_redundant_wrapper",
    "to_domain",
    "to_payload",
]
