"""Unified exception taxonomy for the KML document model.

Every domain exception inherits from ``KmlDocumentError`` and carries
structured context fields so callers can log or report failures
consistently.

Taxonomy categories
-------------------
- ``ValidationError`` : invalid constructor input, caller must fix.
- ``ConfigError`` : invalid render configuration (a validation error).
- ``ReferenceIntegrityError`` : a placemark refers to a style the document lacks.

Setter-level validation (icon URL, icon scale, style reference) never
raises; invalid input there is discarded and the prior value retained.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class KmlDocumentError(Exception):
    """Base exception for all KML document errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"point"``, ``"style"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"INVALID_LATITUDE"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ReferenceIntegrityError):
            return "reference"
        if isinstance(self, ConfigError):
            return "config"
        if isinstance(self, ValidationError):
            return "validation"
        return "error"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(KmlDocumentError):
    """Input or domain-model validation failure."""

    default_code = "VALIDATION_FAILED"


class ConfigError(ValidationError):
    """Raised when render configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


class ReferenceIntegrityError(KmlDocumentError):
    """Raised when placemarks reference styles that are not declared.

    Attributes:
        missing: Sorted style ids referenced but never declared.
    """

    default_stage = "references"
    default_code = "STYLE_REFERENCE_MISSING"

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Undeclared style reference(s): {', '.join(self.missing)}")
