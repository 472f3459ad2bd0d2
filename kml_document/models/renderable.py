"""Renderable abstract base class.

Every node of the document tree implements a single capability: produce
its own KML fragment as text. Containers (``Document``, ``Folder``) hold
``Renderable`` children and never need to know which concrete kind is
behind each one.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kml_document.core.config import RenderConfig


class Renderable(abc.ABC):
    """Abstract base class for anything that renders to a KML fragment.

    A fragment is a self-contained piece of markup ending in a newline.
    ``render`` must be a pure function of the node's current state, so
    repeated calls on an unmodified tree return identical text.
    """

    @abc.abstractmethod
    def render(self, config: RenderConfig | None = None) -> str:
        """Return this node's KML fragment.

        Args:
            config: Rendering options. ``None`` uses the defaults
                (verbatim text, six-decimal floats).
        """
