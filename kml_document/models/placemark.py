"""Placemark: a named leaf feature wrapping one geometry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_document.core.constants import PLACEMARK_VISIBILITY
from kml_document.core.exceptions import ValidationError
from kml_document.models.renderable import Renderable
from kml_document.utils.helpers import resolve_config, text

if TYPE_CHECKING:
    from kml_document.core.config import RenderConfig

logger = logging.getLogger("kml_document.models")


class Placemark(Renderable):
    """A named, described feature with exactly one geometry.

    The geometry may be any ``Renderable`` (currently only ``Point`` ships
    with the package). The style is a loose reference by id: the document
    must declare a ``Style`` with that id for viewers to apply it, which
    the model does not check.
    """

    def __init__(self, name: str, description: str, geometry: Renderable) -> None:
        if geometry is None:
            raise ValidationError(
                f"Placemark '{name}' requires a geometry",
                stage="placemark",
                code="GEOMETRY_REQUIRED",
            )
        self.name = name
        self.description = description
        self._geometry = geometry
        self._style = ""

    @classmethod
    def create(cls, name: str, description: str, geometry: Renderable) -> Placemark:
        """Return a new ``Placemark``; equivalent to calling the class."""
        return cls(name, description, geometry)

    @property
    def geometry(self) -> Renderable:
        return self._geometry

    @property
    def style(self) -> str:
        """Referenced style id, or ``""`` when none was set."""
        return self._style

    def set_style(self, name: str) -> None:
        """Reference the ``Style`` whose id is *name*. Blank input is ignored."""
        name = name.strip()
        if not name:
            logger.debug("Ignoring blank style reference for placemark '%s'", self.name)
            return
        self._style = name

    def render(self, config: RenderConfig | None = None) -> str:
        cfg = resolve_config(config)
        parts = [
            "<Placemark>\n",
            f"<name>{text(self.name, cfg)}</name>\n",
            f"<description>{text(self.description, cfg)}</description>\n",
            f"<visibility>{PLACEMARK_VISIBILITY}</visibility>\n",
        ]
        if self._style:
            parts.append(f"<styleUrl>#{text(self._style, cfg)}</styleUrl>\n")
        parts.append(self._geometry.render(cfg))
        parts.append("</Placemark>\n")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Placemark(name={self.name!r}, style={self._style!r})"
