"""Shared KML constants: single source of truth.

Fixed markup fragments and model defaults used by the renderers.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Document envelope
# ---------------------------------------------------------------------------

KML_NAMESPACE: str = "http://www.opengis.net/kml/2.2"
"""KML 2.2 namespace carried by the root ``<kml>`` element."""

XML_DECLARATION: str = '<?xml version="1.0" encoding="UTF-8"?>'

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# ---------------------------------------------------------------------------
# Style defaults
# ---------------------------------------------------------------------------

DEFAULT_ICON_URL: str = "http://maps.google.com/mapfiles/kml/pushpin/ylw-pushpin.png"
DEFAULT_ICON_SCALE: float = 1.1
MIN_ICON_SCALE: float = 0.0
MAX_ICON_SCALE: float = 100.0

MIN_CHANNEL = 0
MAX_CHANNEL = 255

LINE_WIDTH: int = 3
"""Fixed ``<LineStyle><width>``; not configurable."""

POLYGON_OUTLINE: int = 1
"""Polygon outlines are always drawn."""

STYLE_ID_PATTERN: str = r"[A-Za-z_][A-Za-z0-9_.-]*"
"""Style ids must match this in full so they are safe in ``id="..."`` and ``#id``."""

# ---------------------------------------------------------------------------
# Placemark / Point
# ---------------------------------------------------------------------------

PLACEMARK_VISIBILITY: int = 1
ALTITUDE_MODE: str = "clampToGround"

# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

DEFAULT_FLOAT_PRECISION: int = 6
"""Digits after the decimal point; 6 matches C-style ``%f``."""

MAX_FLOAT_PRECISION: int = 15
