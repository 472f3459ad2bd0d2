"""KML Document Builder.

Builds an in-memory KML document tree (folders, styled placemarks,
point geometry) and serialises it to KML 2.2 text for Google Earth and
other mapping tools. Rendering is one-way: callers write the returned
string to a file, HTTP response, or socket themselves.
"""

from kml_document.core.config import RenderConfig
from kml_document.core.exceptions import (
    ConfigError,
    KmlDocumentError,
    ReferenceIntegrityError,
    ValidationError,
)
from kml_document.models import (
    Document,
    Folder,
    InvalidColorError,
    InvalidLatitudeError,
    InvalidLongitudeError,
    InvalidStyleIdError,
    Placemark,
    Point,
    Renderable,
    Style,
)
from kml_document.utils.references import check_style_references, validate_style_references

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Document",
    "Folder",
    "InvalidColorError",
    "InvalidLatitudeError",
    "InvalidLongitudeError",
    "InvalidStyleIdError",
    "KmlDocumentError",
    "Placemark",
    "Point",
    "ReferenceIntegrityError",
    "RenderConfig",
    "Renderable",
    "Style",
    "ValidationError",
    "check_style_references",
    "validate_style_references",
]
