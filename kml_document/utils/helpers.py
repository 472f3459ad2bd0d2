"""Shared formatting helpers used by every renderer.

Centralises text escaping, float formatting and colour encoding so the
model classes only decide *what* to emit.
"""

from __future__ import annotations

from kml_document.core.config import RenderConfig

DEFAULT_CONFIG = RenderConfig()

_TEXT_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"))


def resolve_config(config: RenderConfig | None) -> RenderConfig:
    """Return *config*, or the default configuration when ``None``."""
    return DEFAULT_CONFIG if config is None else config


def escape_text(value: str) -> str:
    """Escape reserved markup characters in *value*.

    ``&`` is replaced first so existing entities are escaped rather than
    preserved.
    """
    for char, entity in _TEXT_ESCAPES:
        value = value.replace(char, entity)
    return value


def text(value: str, config: RenderConfig) -> str:
    """Return *value* as it should appear in the output under *config*."""
    if config.escape_text:
        return escape_text(value)
    return value


def format_float(value: float, config: RenderConfig) -> str:
    """Format *value* with fixed-point precision from *config*."""
    return f"{value:.{config.float_precision}f}"


def abgr_hex(alpha: int, red: int, green: int, blue: int) -> str:
    """Encode a colour as KML expects it: lowercase ``aabbggrr``.

    KML orders channels alpha, blue, green, red, the reverse of the
    usual RGB order.
    """
    return f"{alpha:02x}{blue:02x}{green:02x}{red:02x}"
