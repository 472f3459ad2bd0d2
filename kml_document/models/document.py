"""Document: the root of a KML tree and entry point for serialisation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_document.core.constants import KML_NAMESPACE, XML_DECLARATION
from kml_document.utils.helpers import resolve_config

if TYPE_CHECKING:
    from kml_document.core.config import RenderConfig
    from kml_document.models.folder import Folder

logger = logging.getLogger("kml_document.models")


class Document:
    """Top-level KML document holding an ordered list of folders.

    Example usage::

        doc = Document()
        folder = Folder("Orchard", "Block A")
        style = Style("apple", 255, 0, 200, 0)
        folder.add_feature(style)
        placemark = Placemark("Tree 1", "Fuji", Point.create(-33.9, 18.4))
        placemark.set_style("apple")
        folder.add_feature(placemark)
        doc.add_folder(folder)
        kml_text = doc.render()

    The rendered string is complete KML; writing it anywhere is the
    caller's job.
    """

    def __init__(self) -> None:
        self._folders: list[Folder] = []

    @classmethod
    def create(cls) -> Document:
        """Return a new, empty ``Document``; equivalent to calling the class."""
        return cls()

    @property
    def folders(self) -> tuple[Folder, ...]:
        """Top-level folders in insertion order (read-only view)."""
        return tuple(self._folders)

    def add_folder(self, folder: Folder | None) -> None:
        """Append *folder*. ``None`` is ignored."""
        if folder is None:
            logger.debug("Ignoring None folder added to document")
            return
        self._folders.append(folder)

    def render(self, config: RenderConfig | None = None) -> str:
        """Render the entire KML document.

        Text fields are interpolated verbatim unless
        ``config.escape_text`` is set; a name containing ``<`` or ``&``
        then produces malformed KML.

        Args:
            config: Rendering options applied to every node in the tree.

        Returns:
            The XML declaration, the ``<kml>`` root and every folder's
            fragment in insertion order.
        """
        cfg = resolve_config(config)
        body = "".join(folder.render(cfg) for folder in self._folders)
        result = f'{XML_DECLARATION}\n<kml xmlns="{KML_NAMESPACE}">\n{body}</kml>\n'
        logger.debug(
            "Rendered KML document: %d folder(s), %d characters",
            len(self._folders),
            len(result),
        )
        return result

    def __len__(self) -> int:
        return len(self._folders)

    def __bool__(self) -> bool:
        return True
