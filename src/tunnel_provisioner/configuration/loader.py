"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigDocumentError, ConfigurationError, FieldValidationError
from .runtime_settings import (
    CloudflareSettings,
    Credentials,
    PacketriotAccount,
    PacketriotSettings,
    TunnelDefinition,
)
from .schema_registry import SchemaRegistry
from .schema_validation import validate_document


def read_config_document(config_path: Path | str, registry: SchemaRegistry) -> Any:
    """Read a YAML configuration file and validate it against its registered schema.

    The schema is selected by the file's base name without extension, so
    ``credentials.yml`` is validated against the ``credentials`` schema.

    Raises:
      ConfigurationError: If the file is missing, unreadable, not UTF-8 or not
        valid YAML.
      SchemaNotFound: If no schema is registered for the file.
      ConfigDocumentError: If the document violates its schema.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"File '{path}' was not found.")

    schema = registry.lookup(path.stem)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file {path}: {exc}") from exc

    try:
        return validate_document(schema, parsed)
    except FieldValidationError as exc:
        raise ConfigDocumentError(path, exc, schema) from exc


def load_credentials(config_path: Path | str, registry: SchemaRegistry) -> Credentials:
    """Load and validate the credentials file."""
    path = Path(config_path)
    document = read_config_document(path, registry)
    return Credentials(
        path=path,
        hostname=document["hostname"],
        cloudflare=CloudflareSettings(token=document["cloudflare"]["token"]),
        packetriot=PacketriotSettings(
            accounts=tuple(
                _build_account(entry) for entry in document["packetriot"]["accounts"]
            )
        ),
    )


def load_tunnels(config_path: Path | str, registry: SchemaRegistry) -> tuple[TunnelDefinition, ...]:
    """Load and validate the tunnel definitions file."""
    document = read_config_document(config_path, registry)
    tunnels = tuple(_build_tunnel(entry) for entry in document)
    seen: set[str] = set()
    for tunnel in tunnels:
        if tunnel.name in seen:
            raise ConfigurationError(f"Tunnel name '{tunnel.name}' is defined more than once.")
        seen.add(tunnel.name)
    return tunnels


def _build_account(entry: Mapping[str, Any]) -> PacketriotAccount:
    return PacketriotAccount(
        name=entry["name"],
        email=entry["email"],
        password=entry["password"],
        server=entry["server"],
    )


def _build_tunnel(entry: Mapping[str, Any]) -> TunnelDefinition:
    return TunnelDefinition(
        name=entry["name"],
        account=entry["account"],
        subdomain=entry["subdomain"],
        localhost=entry["localhost"],
        port=entry["port"],
        cert=entry["cert"],
    )
