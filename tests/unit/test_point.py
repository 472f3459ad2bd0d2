"""Tests for Point construction and rendering.

Covers:
- Valid coordinates across the full WGS 84 range, including bounds
- Latitude rejection (out of range, NaN, infinity)
- Longitude rejection independent of latitude validity
- Non-finite altitude coerced to 0.0
- Rendered coordinate order (lon,lat,alt) and altitude mode
"""

from __future__ import annotations

import math

import pytest

from kml_document.core.config import RenderConfig
from kml_document.core.exceptions import ValidationError
from kml_document.models.point import InvalidLatitudeError, InvalidLongitudeError, Point


class TestValidPoint:
    """Construction succeeds for in-range coordinates."""

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(0.0, 0.0), (90.0, 180.0), (-90.0, -180.0), (45.5, -122.25), (-33.9, 18.4)],
    )
    def test_in_range_coordinates(self, lat: float, lon: float) -> None:
        p = Point.create(lat, lon, 5.0)
        assert p.lat == lat
        assert p.lon == lon
        assert p.alt == 5.0

    def test_altitude_defaults_to_zero(self) -> None:
        assert Point.create(1.0, 2.0).alt == 0.0

    def test_integers_accepted(self) -> None:
        p = Point.create(10, 20, 30)
        assert (p.lat, p.lon, p.alt) == (10.0, 20.0, 30.0)

    def test_point_is_immutable(self) -> None:
        p = Point.create(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.lat = 3.0  # type: ignore[misc]


class TestInvalidLatitude:
    """Latitude outside [-90, 90] or non-finite is rejected."""

    @pytest.mark.parametrize("lat", [91.0, -91.0, 90.0001, math.nan, math.inf, -math.inf])
    def test_rejected(self, lat: float) -> None:
        with pytest.raises(InvalidLatitudeError):
            Point.create(lat, 0.0)

    def test_error_carries_value(self) -> None:
        with pytest.raises(InvalidLatitudeError) as exc_info:
            Point.create(91.0, 0.0)
        assert exc_info.value.value == 91.0
        assert exc_info.value.code == "INVALID_LATITUDE"
        assert exc_info.value.stage == "point"

    def test_checked_before_longitude(self) -> None:
        """Both invalid: the latitude error wins."""
        with pytest.raises(InvalidLatitudeError):
            Point.create(100.0, 200.0)

    def test_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            Point.create(math.nan, 0.0)


class TestInvalidLongitude:
    """Longitude outside [-180, 180] or non-finite is rejected."""

    @pytest.mark.parametrize("lon", [181.0, -181.0, math.nan, math.inf, -math.inf])
    def test_rejected(self, lon: float) -> None:
        with pytest.raises(InvalidLongitudeError):
            Point.create(0.0, lon)

    @pytest.mark.parametrize("lat", [-90.0, 0.0, 45.0, 90.0])
    def test_rejected_for_any_valid_latitude(self, lat: float) -> None:
        with pytest.raises(InvalidLongitudeError) as exc_info:
            Point.create(lat, 181.0)
        assert exc_info.value.value == 181.0
        assert exc_info.value.code == "INVALID_LONGITUDE"


class TestAltitudeNormalisation:
    """Non-finite altitude becomes 0.0 instead of failing."""

    @pytest.mark.parametrize("alt", [math.nan, math.inf, -math.inf])
    def test_non_finite_altitude_is_zero(self, alt: float) -> None:
        assert Point.create(10.0, 20.0, alt).alt == 0.0

    def test_large_altitude_kept(self) -> None:
        assert Point.create(10.0, 20.0, -11_000.0).alt == -11_000.0


class TestPointRender:
    """Rendered fragment layout."""

    def test_fragment(self) -> None:
        assert Point.create(10.0, 20.0, 0.0).render() == (
            "<Point>\n"
            "<extrude>0</extrude>\n"
            "<altitudeMode>clampToGround</altitudeMode>\n"
            "<coordinates>20.000000,10.000000,0.000000</coordinates>\n"
            "</Point>\n"
        )

    def test_longitude_first(self) -> None:
        out = Point.create(-33.5, 151.25, 100.0).render()
        assert "<coordinates>151.250000,-33.500000,100.000000</coordinates>" in out

    def test_precision_from_config(self) -> None:
        out = Point.create(1.0, 2.0, 3.0).render(RenderConfig(float_precision=2))
        assert "<coordinates>2.00,1.00,3.00</coordinates>" in out

    def test_render_is_idempotent(self) -> None:
        p = Point.create(1.5, 2.5, 3.5)
        assert p.render() == p.render()
