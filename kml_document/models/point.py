"""Point geometry: a validated WGS 84 coordinate triple."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kml_document.core.constants import (
    ALTITUDE_MODE,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from kml_document.core.exceptions import ValidationError
from kml_document.models.renderable import Renderable
from kml_document.utils.helpers import format_float, resolve_config

if TYPE_CHECKING:
    from kml_document.core.config import RenderConfig

logger = logging.getLogger("kml_document.models")


class InvalidLatitudeError(ValidationError):
    """Raised when a latitude is NaN, infinite, or outside [-90, 90].

    Attributes:
        value: The rejected latitude.
    """

    default_stage = "point"
    default_code = "INVALID_LATITUDE"

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(
            f"Invalid latitude {value!r}: must be finite and within "
            f"[{MIN_LATITUDE}, {MAX_LATITUDE}]"
        )


class InvalidLongitudeError(ValidationError):
    """Raised when a longitude is NaN, infinite, or outside [-180, 180].

    Attributes:
        value: The rejected longitude.
    """

    default_stage = "point"
    default_code = "INVALID_LONGITUDE"

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(
            f"Invalid longitude {value!r}: must be finite and within "
            f"[{MIN_LONGITUDE}, {MAX_LONGITUDE}]"
        )


@dataclass(frozen=True, slots=True)
class Point(Renderable):
    """A point on the Earth.

    Build instances with ``Point.create`` so latitude and longitude are
    validated; direct construction performs no checks.

    Attributes:
        lat: Latitude in decimal degrees.
        lon: Longitude in decimal degrees.
        alt: Altitude in metres. Rendered, but ignored by viewers because
            the altitude mode is ``clampToGround``.
    """

    lat: float
    lon: float
    alt: float = 0.0

    @classmethod
    def create(cls, lat: float, lon: float, alt: float = 0.0) -> Point:
        """Return a validated ``Point``.

        Latitude is checked before longitude. A non-finite altitude is
        replaced with ``0.0`` rather than rejected.

        Raises:
            InvalidLatitudeError: If *lat* is NaN, infinite, or out of range.
            InvalidLongitudeError: If *lon* is NaN, infinite, or out of range.
        """
        lat = float(lat)
        lon = float(lon)
        alt = float(alt)

        if not math.isfinite(lat) or not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
            raise InvalidLatitudeError(lat)

        if not math.isfinite(lon) or not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE):
            raise InvalidLongitudeError(lon)

        if not math.isfinite(alt):
            logger.debug("Non-finite altitude %r replaced with 0.0", alt)
            alt = 0.0

        return cls(lat=lat, lon=lon, alt=alt)

    def render(self, config: RenderConfig | None = None) -> str:
        cfg = resolve_config(config)
        # KML coordinate order is lon,lat,alt
        coords = ",".join(format_float(v, cfg) for v in (self.lon, self.lat, self.alt))
        return (
            "<Point>\n"
            "<extrude>0</extrude>\n"
            f"<altitudeMode>{ALTITUDE_MODE}</altitudeMode>\n"
            f"<coordinates>{coords}</coordinates>\n"
            "</Point>\n"
        )
