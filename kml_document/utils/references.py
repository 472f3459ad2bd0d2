"""Style-reference integrity check.

The model treats ``Placemark.set_style`` as a loose name: nothing stops
a placemark referring to a style that was never added to the document.
These helpers layer a check on top by rendering the document (with
escaping enabled, so free text cannot break the parse) and comparing
``<styleUrl>`` references against declared ``<Style id>`` values.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_document.core.config import RenderConfig
from kml_document.core.constants import KML_NAMESPACE
from kml_document.core.exceptions import ReferenceIntegrityError, ValidationError

if TYPE_CHECKING:
    from kml_document.models.document import Document

logger = logging.getLogger("kml_document.utils.references")

_NS = {"kml": KML_NAMESPACE}


def check_style_references(document: Document) -> list[str]:
    """Return style ids referenced by placemarks but never declared.

    Returns:
        Sorted, de-duplicated list of missing ids. Empty when every
        reference resolves.

    Raises:
        ValidationError: If the rendered document is not well-formed XML,
            e.g. a name containing a control character.
    """
    from lxml import etree  # type: ignore[attr-defined]

    rendered = document.render(RenderConfig(escape_text=True))
    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(rendered.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Rendered KML is not well-formed XML: {exc}"
        raise ValidationError(msg, stage="references", code="RENDERED_KML_INVALID") from exc

    declared = {style.get("id") for style in root.iterfind(".//kml:Style", _NS)}
    referenced = {
        (url.text or "").strip().removeprefix("#")
        for url in root.iterfind(".//kml:Placemark/kml:styleUrl", _NS)
    }

    missing = sorted(referenced - declared)
    if missing:
        logger.warning("Document references undeclared style(s): %s", ", ".join(missing))
    return missing


def validate_style_references(document: Document) -> None:
    """Raise if any placemark references an undeclared style.

    Raises:
        ReferenceIntegrityError: Listing every missing style id.
        ValidationError: If the rendered document is not well-formed XML.
    """
    missing = check_style_references(document)
    if missing:
        raise ReferenceIntegrityError(missing)
