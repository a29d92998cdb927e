"""Configuration domain exports."""

from .config_scaffold_builder import (
    build_placeholder_credentials,
    build_placeholder_tunnels,
    write_placeholder_configuration,
)
from .errors import (
    ConfigDocumentError,
    ConfigurationError,
    FieldComplexChildless,
    FieldNotFound,
    FieldTypeMismatch,
    FieldValidationError,
    SchemaNotFound,
)
from .loader import load_credentials, load_tunnels, read_config_document
from .runtime_settings import (
    CloudflareSettings,
    ConfigPaths,
    Credentials,
    PacketriotAccount,
    PacketriotSettings,
    TunnelDefinition,
)
from .schema_description import FieldDescription, FieldType, SchemaDefinitionError, describe
from .schema_registry import (
    CREDENTIALS_CONFIG,
    TUNNELS_CONFIG,
    SchemaRegistry,
    build_default_registry,
)
from .schema_rendering import render_schema
from .schema_validation import validate_document

__all__ = [
    "CloudflareSettings",
    "ConfigPaths",
    "Credentials",
    "PacketriotAccount",
    "PacketriotSettings",
    "TunnelDefinition",
    "ConfigurationError",
    "ConfigDocumentError",
    "SchemaNotFound",
    "FieldValidationError",
    "FieldNotFound",
    "FieldTypeMismatch",
    "FieldComplexChildless",
    "FieldDescription",
    "FieldType",
    "SchemaDefinitionError",
    "describe",
    "validate_document",
    "render_schema",
    "SchemaRegistry",
    "CREDENTIALS_CONFIG",
    "TUNNELS_CONFIG",
    "build_default_registry",
    "read_config_document",
    "load_credentials",
    "load_tunnels",
    "build_placeholder_credentials",
    "build_placeholder_tunnels",
    "write_placeholder_configuration",
]
