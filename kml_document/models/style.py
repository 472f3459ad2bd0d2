"""Style: one colour applied to point icons, lines and polygons.

A style is declared once in the document (as a ``Folder`` feature) and
referenced by id from any number of placemarks via
``Placemark.set_style``. The reference is a plain name; see
``kml_document.utils.references`` for an optional integrity check.
"""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING

from kml_document.core.constants import (
    DEFAULT_ICON_SCALE,
    DEFAULT_ICON_URL,
    LINE_WIDTH,
    MAX_CHANNEL,
    MAX_ICON_SCALE,
    MIN_CHANNEL,
    MIN_ICON_SCALE,
    POLYGON_OUTLINE,
    STYLE_ID_PATTERN,
)
from kml_document.core.exceptions import ValidationError
from kml_document.models.renderable import Renderable
from kml_document.utils.helpers import abgr_hex, format_float, resolve_config, text

if TYPE_CHECKING:
    from kml_document.core.config import RenderConfig

logger = logging.getLogger("kml_document.models")


class InvalidColorError(ValidationError):
    """Raised when a colour channel is not an integer in [0, 255]."""

    default_stage = "style"
    default_code = "INVALID_COLOR_CHANNEL"

    def __init__(self, channel: str, value: object) -> None:
        self.channel = channel
        self.value = value
        super().__init__(
            f"Invalid {channel} channel {value!r}: must be an integer in "
            f"[{MIN_CHANNEL}, {MAX_CHANNEL}]"
        )


class InvalidStyleIdError(ValidationError):
    """Raised when a style id is not a plain identifier."""

    default_stage = "style"
    default_code = "INVALID_STYLE_ID"

    def __init__(self, style_id: str) -> None:
        self.style_id = style_id
        super().__init__(
            f"Invalid style id {style_id!r}: must start with a letter or underscore "
            "followed by letters, digits, '_', '.' or '-'"
        )


def _check_channel(channel: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidColorError(channel, value)
    if not MIN_CHANNEL <= value <= MAX_CHANNEL:
        raise InvalidColorError(channel, value)
    return value


def _check_style_id(style_id: str) -> str:
    if re.fullmatch(STYLE_ID_PATTERN, style_id) is None:
        raise InvalidStyleIdError(style_id)
    return style_id


class Style(Renderable):
    """Colour, icon and fill settings shared by point, line and polygon geometry.

    Example usage::

        style = Style("orchard", 255, 0, 170, 0)
        style.set_icon_scale(1.5)
        style.set_polygon_fill(True)
        folder.add_feature(style)

    The icon URL, icon scale and fill setters never raise: invalid input
    is ignored and the previous value kept.
    """

    def __init__(self, style_id: str, alpha: int, red: int, green: int, blue: int) -> None:
        self._id = _check_style_id(style_id)
        self._alpha = _check_channel("alpha", alpha)
        self._red = _check_channel("red", red)
        self._green = _check_channel("green", green)
        self._blue = _check_channel("blue", blue)
        self._icon_url = DEFAULT_ICON_URL
        self._icon_scale = DEFAULT_ICON_SCALE
        self._fill = 0

    @classmethod
    def create(cls, style_id: str, alpha: int, red: int, green: int, blue: int) -> Style:
        """Return a new ``Style``; equivalent to calling the class."""
        return cls(style_id, alpha, red, green, blue)

    # ------------------------------------------------------------------
    # Read-only properties
    # ------------------------------------------------------------------

    @property
    def id(self) -> str:
        """Identifier placemarks use to reference this style."""
        return self._id

    @property
    def color(self) -> str:
        """Colour as lowercase ``aabbggrr`` hex, the order KML requires."""
        return abgr_hex(self._alpha, self._red, self._green, self._blue)

    @property
    def icon_url(self) -> str:
        return self._icon_url

    @property
    def icon_scale(self) -> float:
        return self._icon_scale

    @property
    def fill(self) -> int:
        """``1`` when polygons are filled, ``0`` otherwise."""
        return self._fill

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_icon_url(self, url: str) -> None:
        """Change the point icon. Blank input is ignored.

        Built-in icon URLs can be found in Google Earth's placemark
        properties dialog.
        """
        url = url.strip()
        if not url:
            logger.debug("Ignoring blank icon URL for style '%s'", self._id)
            return
        self._icon_url = url

    def set_icon_scale(self, scale: float) -> None:
        """Change the icon scale. Values outside [0, 100] are ignored."""
        if not math.isfinite(scale) or not MIN_ICON_SCALE <= scale <= MAX_ICON_SCALE:
            logger.debug("Ignoring out-of-range icon scale %r for style '%s'", scale, self._id)
            return
        self._icon_scale = float(scale)

    def set_polygon_fill(self, fill: bool) -> None:
        """Fill polygons when *fill* is true; polygons are unfilled by default."""
        self._fill = 1 if fill else 0

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, config: RenderConfig | None = None) -> str:
        cfg = resolve_config(config)
        color = f"<color>{self.color}</color>\n"
        return (
            f'<Style id="{self._id}">\n'
            "<IconStyle>\n"
            f"{color}"
            f"<scale>{format_float(self._icon_scale, cfg)}</scale>\n"
            f"<Icon><href>{text(self._icon_url, cfg)}</href></Icon>\n"
            "</IconStyle>\n"
            "<LineStyle>\n"
            f"{color}"
            f"<width>{LINE_WIDTH}</width>\n"
            "</LineStyle>\n"
            "<PolyStyle>\n"
            f"{color}"
            "<colorMode>normal</colorMode>\n"
            f"<fill>{self._fill}</fill>\n"
            f"<outline>{POLYGON_OUTLINE}</outline>\n"
            "</PolyStyle>\n"
            "</Style>\n"
        )

    def __repr__(self) -> str:
        return f"Style(id={self._id!r}, color={self.color!r})"
