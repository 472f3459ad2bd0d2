"""Render configuration loaded from environment variables.

All values default to the plain KML output the model has always
produced: text interpolated verbatim and floats rendered with six
decimal places.

Fail-fast validation:
    ``from_env()`` raises ``ConfigError`` if a value is out of its valid
    range, so bad configuration surfaces before any document is rendered.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from kml_document.core.constants import DEFAULT_FLOAT_PRECISION, MAX_FLOAT_PRECISION
from kml_document.core.exceptions import ConfigError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable rendering options.

    Attributes:
        escape_text: Escape reserved markup characters in names,
            descriptions, the icon URL and placemark style references.
            Style ids are validated at construction and never escaped.
            Off by default, in which case text is interpolated verbatim
            and a value containing ``<`` or ``&`` yields malformed KML.
        float_precision: Digits after the decimal point for icon scale
            and coordinates.
    """

    escape_text: bool = False
    float_precision: int = DEFAULT_FLOAT_PRECISION

    @classmethod
    def from_env(cls) -> RenderConfig:
        """Load and validate configuration from environment variables.

        Reads ``KML_ESCAPE_TEXT`` and ``KML_FLOAT_PRECISION``.

        Raises:
            ConfigError: If a value cannot be interpreted or is out of range.
        """
        config = cls(
            escape_text=_parse_bool("KML_ESCAPE_TEXT", os.getenv("KML_ESCAPE_TEXT", "")),
            float_precision=_parse_int(
                "KML_FLOAT_PRECISION",
                os.getenv("KML_FLOAT_PRECISION", str(DEFAULT_FLOAT_PRECISION)),
            ),
        )
        _validate(config)
        return config


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(key, raw, "must be a boolean (true/false, 1/0, yes/no, on/off)")


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(key, raw, "must be an integer") from exc


def _validate(config: RenderConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigError``."""
    if not 0 <= config.float_precision <= MAX_FLOAT_PRECISION:
        raise ConfigError(
            "KML_FLOAT_PRECISION",
            config.float_precision,
            f"must be between 0 and {MAX_FLOAT_PRECISION} (digits)",
        )
