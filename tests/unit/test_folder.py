"""Tests for Folder composition and rendering.

Covers:
- None children ignored
- Heterogeneous children rendered in insertion order
- Arbitrary nesting depth
"""

from __future__ import annotations

from kml_document.models.folder import Folder
from kml_document.models.placemark import Placemark
from kml_document.models.style import Style


class TestFolderFeatures:
    def test_starts_empty(self) -> None:
        folder = Folder.create("f", "d")
        assert len(folder) == 0
        assert folder.features == ()

    def test_none_ignored(self, placemark: Placemark) -> None:
        folder = Folder("f", "d")
        folder.add_feature(placemark)
        folder.add_feature(None)
        assert len(folder) == 1

    def test_empty_folder_is_truthy(self) -> None:
        folder = Folder("f", "d")
        assert len(folder) == 0
        assert folder

    def test_features_is_a_copy(self, placemark: Placemark) -> None:
        folder = Folder("f", "d")
        folder.add_feature(placemark)
        assert folder.features == (placemark,)
        assert isinstance(folder.features, tuple)


class TestFolderRender:
    def test_empty_folder(self) -> None:
        assert Folder("Orchard", "Block A").render() == (
            "<Folder>\n<name>Orchard</name>\n<description>Block A</description>\n</Folder>\n"
        )

    def test_children_in_insertion_order(self, style: Style, placemark: Placemark) -> None:
        folder = Folder("f", "d")
        folder.add_feature(style)
        folder.add_feature(placemark)
        out = folder.render()
        assert out.index("<Style") < out.index("<Placemark>")
        assert out == (
            "<Folder>\n<name>f</name>\n<description>d</description>\n"
            + style.render()
            + placemark.render()
            + "</Folder>\n"
        )

    def test_nested_folders(self, placemark: Placemark) -> None:
        inner = Folder("inner", "")
        inner.add_feature(placemark)
        middle = Folder("middle", "")
        middle.add_feature(inner)
        outer = Folder("outer", "")
        outer.add_feature(middle)

        out = outer.render()
        assert out.count("<Folder>") == 3
        assert out.count("</Folder>") == 3
        assert out.index("<name>outer</name>") < out.index("<name>middle</name>")
        assert out.index("<name>middle</name>") < out.index("<name>inner</name>")
        assert out.index("<name>inner</name>") < out.index("<Placemark>")
        assert out.endswith("</Placemark>\n</Folder>\n</Folder>\n</Folder>\n")
