"""Read and write Bricklink wanted list XML.

Decoding goes XML -> ``WantedListPayload`` -> domain; encoding reverses it and
serialises the tree with lxml directly, so no wrapper repair is needed and the
output is one line with no whitespace between tags.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from lxml import etree
from pydantic import ValidationError

from .errors import DecodeError, EncodeError
from .repair import add_declaration
from .schema import ITEM_TAG, ROOT_TAG, WantedListPayload
from .translator import wanted_list_from_payload, wanted_list_to_payload

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

    from brickline.domain.model import WantedList

_PARSER_OPTIONS: Final[dict[str, bool]] = {
    "resolve_entities": False,
    "no_network": True,
    "load_dtd": False,
    "huge_tree": False,
}
_PARSER: Final[etree.XMLParser] = etree.XMLParser(**_PARSER_OPTIONS)
# text input is handed to lxml as UTF-8, whatever the declaration says
_TEXT_PARSER: Final[etree.XMLParser] = etree.XMLParser(encoding="utf-8", **_PARSER_OPTIONS)


def _item_fields(element: etree._Element, position: int) -> dict[str, str]:
    fields: dict[str, str] = {}
    for child in element.iterchildren(etree.Element):
        tag = str(child.tag)
        if tag in fields:
            raise DecodeError(
                f"Duplicate {tag} element", field=tag, raw_value=child.text, position=position
            )
        if len(child):
            raise DecodeError(
                f"Unexpected nested content in {tag}", field=tag, position=position
            )
        fields[tag] = child.text or ""
    return fields


def _decode_error_from_validation(exc: ValidationError) -> DecodeError:
    error: ErrorDetails = exc.errors()[0]
    loc = error["loc"]
    field = next((part for part in reversed(loc) if isinstance(part, str)), None)
    position = next((part for part in loc if isinstance(part, int)), None)
    raw_value = None if error["type"] == "missing" else error.get("input")
    message = f"{field}: {error['msg']}"
    if raw_value is not None:
        message = f"{message} (got {raw_value!r})"
    return DecodeError(message, field=field, raw_value=raw_value, position=position)


def parse_payload(text: str | bytes) -> WantedListPayload:
    """Parse wanted list XML into its primitive wire model."""

    if isinstance(text, str):
        data, parser = text.encode("utf-8"), _TEXT_PARSER
    else:
        data, parser = text, _PARSER
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise DecodeError(f"Malformed wanted list XML: {exc}") from exc

    if root.tag != ROOT_TAG:
        raise DecodeError(
            f"Expected root element {ROOT_TAG}, found {root.tag}", field=str(root.tag)
        )

    items: list[dict[str, str]] = []
    for position, element in enumerate(root.iterchildren(etree.Element)):
        if element.tag != ITEM_TAG:
            raise DecodeError(
                f"Unexpected element {element.tag} in {ROOT_TAG}",
                field=str(element.tag),
                position=position,
            )
        items.append(_item_fields(element, position))

    try:
        return WantedListPayload.model_validate({ITEM_TAG: items})
    except ValidationError as exc:
        raise _decode_error_from_validation(exc) from exc


def decode(text: str | bytes) -> WantedList:
    """Decode wanted list XML; the XML declaration is optional."""

    return wanted_list_from_payload(parse_payload(text))


def render_payload(payload: WantedListPayload) -> str:
    root = etree.Element(ROOT_TAG)
    # an empty text node keeps an empty list as <INVENTORY></INVENTORY>
    root.text = ""
    for item_payload in payload.items:
        item_element = etree.SubElement(root, ITEM_TAG)
        for tag, value in item_payload.wire_fields().items():
            etree.SubElement(item_element, tag).text = str(value)
    return etree.tostring(root, encoding="unicode")


def encode(wanted_list: WantedList) -> str:
    """Encode ``wanted_list`` as a single-line XML document with declaration."""

    payload = wanted_list_to_payload(wanted_list)
    try:
        body = render_payload(payload)
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Cannot serialise wanted list: {exc}") from exc
    return add_declaration(body)
