"""Configuration error taxonomy."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schema_description import FieldDescription


class ConfigurationError(Exception):
    """Raised when a configuration file cannot be loaded."""


class SchemaNotFound(ConfigurationError):
    """Raised when no schema is registered for a configuration file."""

    def __init__(self, file_name: str) -> None:
        super().__init__(f"Config schema for '{file_name}' was not defined.")
        self.file_name = file_name


class FieldValidationError(ConfigurationError):
    """Base class for document fields violating their schema."""

    def __init__(self, message: str, *, field_name: str, description: str) -> None:
        super().__init__(message)
        self.field_name = field_name
        self.description = description


class FieldNotFound(FieldValidationError):
    """Raised when a required field is absent."""

    def __init__(self, parent_name: str, field_name: str, description: str) -> None:
        super().__init__(
            f"Field '{field_name}' is not found inside '{parent_name}'. "
            f"Field description:\n{description}",
            field_name=field_name,
            description=description,
        )
        self.parent_name = parent_name


class FieldTypeMismatch(FieldValidationError):
    """Raised when a present field has the wrong type."""

    def __init__(
        self, field_name: str, description: str, expected_type: str, observed_type: str
    ) -> None:
        super().__init__(
            f"Field '{field_name}' is expected to be of type <{expected_type}>, "
            f"but got <{observed_type}>. Field description:\n{description}",
            field_name=field_name,
            description=description,
        )
        self.expected_type = expected_type
        self.observed_type = observed_type


class FieldComplexChildless(FieldValidationError):
    """Raised when an array or object field is present but empty."""

    def __init__(self, field_name: str, description: str) -> None:
        super().__init__(
            f"Field '{field_name}' is complex and is expected to have children. "
            f"Field description: {description}",
            field_name=field_name,
            description=description,
        )


class ConfigDocumentError(ConfigurationError):
    """Raised when a configuration document fails schema validation.

    Carries the root schema so callers can print it next to the message.
    """

    def __init__(self, path: Path, error: FieldValidationError, schema: FieldDescription) -> None:
        super().__init__(str(error))
        self.path = path
        self.error = error
        self.schema = schema
