"""Folder: a named container of features, possibly nested."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kml_document.models.renderable import Renderable
from kml_document.utils.helpers import resolve_config, text

if TYPE_CHECKING:
    from kml_document.core.config import RenderConfig

logger = logging.getLogger("kml_document.models")


class Folder(Renderable):
    """A named, described container of heterogeneous features.

    Features are rendered in insertion order. A ``Folder`` is itself a
    feature, so folders nest to any depth.
    """

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self._features: list[Renderable] = []

    @classmethod
    def create(cls, name: str, description: str) -> Folder:
        """Return a new, empty ``Folder``; equivalent to calling the class."""
        return cls(name, description)

    @property
    def features(self) -> tuple[Renderable, ...]:
        """Child features in insertion order (read-only view)."""
        return tuple(self._features)

    def add_feature(self, feature: Renderable | None) -> None:
        """Append *feature* (a ``Placemark``, ``Style``, ``Folder``, ...).

        ``None`` is ignored.
        """
        if feature is None:
            logger.debug("Ignoring None feature added to folder '%s'", self.name)
            return
        self._features.append(feature)

    def render(self, config: RenderConfig | None = None) -> str:
        cfg = resolve_config(config)
        head = (
            "<Folder>\n"
            f"<name>{text(self.name, cfg)}</name>\n"
            f"<description>{text(self.description, cfg)}</description>\n"
        )
        body = "".join(feature.render(cfg) for feature in self._features)
        return f"{head}{body}</Folder>\n"

    def __len__(self) -> int:
        return len(self._features)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Folder(name={self.name!r}, features={len(self._features)})"
