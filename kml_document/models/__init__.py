"""Document object model.

Defines the nodes of a KML tree, leaves first:
- Point: validated coordinate triple
- Style: colour/icon/fill descriptor referenced by id
- Placemark: named feature wrapping one geometry
- Folder: container of features, nestable
- Document: root container and serialisation entry point
"""

from kml_document.models.document import Document
from kml_document.models.folder import Folder
from kml_document.models.placemark import Placemark
from kml_document.models.point import InvalidLatitudeError, InvalidLongitudeError, Point
from kml_document.models.renderable import Renderable
from kml_document.models.style import InvalidColorError, InvalidStyleIdError, Style

__all__ = [
    "Document",
    "Folder",
    "InvalidColorError",
    "InvalidLatitudeError",
    "InvalidLongitudeError",
    "InvalidStyleIdError",
    "Placemark",
    "Point",
    "Renderable",
    "Style",
]
