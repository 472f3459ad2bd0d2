"""Shared pytest fixtures for the KML document test suite."""

from __future__ import annotations

import pytest

from kml_document import Document, Folder, Placemark, Point, Style

# ---------------------------------------------------------------------------
# Geometry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def point() -> Point:
    """Point at lat=10, lon=20, alt=0."""
    return Point.create(10.0, 20.0, 0.0)


# ---------------------------------------------------------------------------
# Tree fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def placemark(point: Point) -> Placemark:
    """Unstyled placemark wrapping the ``point`` fixture."""
    return Placemark("Tree 1", "Fuji apple", point)


@pytest.fixture()
def style() -> Style:
    """Style with alpha=255, red=1, green=2, blue=3."""
    return Style("orchard", 255, 1, 2, 3)


@pytest.fixture()
def simple_document(placemark: Placemark) -> Document:
    """Document -> Folder -> Placemark -> Point."""
    doc = Document()
    folder = Folder("Orchard", "Block A")
    folder.add_feature(placemark)
    doc.add_folder(folder)
    return doc


@pytest.fixture()
def styled_document(style: Style) -> Document:
    """Document with a declared style and a placemark referencing it."""
    doc = Document()
    folder = Folder("Styled", "With style")
    folder.add_feature(style)
    pm = Placemark("Tree 2", "Gala apple", Point.create(-33.9, 18.4, 12.0))
    pm.set_style("orchard")
    folder.add_feature(pm)
    doc.add_folder(folder)
    return doc
