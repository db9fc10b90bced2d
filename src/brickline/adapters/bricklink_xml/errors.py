"""Errors raised while converting wanted lists to and from Bricklink XML."""

from __future__ import annotations


class WantedListCodecError(ValueError):
    """Base class for wanted list codec failures."""


class DecodeError(WantedListCodecError):
    """Raised when wanted list XML is malformed or holds an invalid field value.

    ``field`` is the XML element name (e.g. ``CONDITION``) and ``raw_value`` the
    offending text; both are ``None`` for document-level failures. ``position`` is
    the zero-based index of the offending ``ITEM`` when known.
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        field: str | None = None,
        raw_value: object = None,
        position: int | None = None,
    ) -> None:
        self.field = field
        self.raw_value = raw_value
        self.position = position
        if message is None:
            message = f"Invalid value for {field}: {raw_value!r}"
        if position is not None:
            message = f"{message} (item {position})"
        super().__init__(message)


class EncodeError(WantedListCodecError):
    """Raised when a wanted list cannot be written as Bricklink XML."""
