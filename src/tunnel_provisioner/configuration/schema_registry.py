"""Registry of configuration schemas keyed by config file base name."""

from __future__ import annotations

from collections.abc import Iterator

from .errors import SchemaNotFound
from .schema_description import FieldDescription, SchemaDefinitionError, describe

CREDENTIALS_CONFIG = "credentials"
TUNNELS_CONFIG = "tunnels"


class SchemaRegistry:
    """Read-mostly mapping of config names to their root schema."""

    def __init__(self) -> None:
        self._schemas: dict[str, FieldDescription] = {}

    def register(self, name: str, schema: FieldDescription) -> None:
        if name in self._schemas:
            raise SchemaDefinitionError(f"Config schema for '{name}' is already registered.")
        self._schemas[name] = schema

    def lookup(self, name: str) -> FieldDescription:
        try:
            return self._schemas[name]
        except KeyError:
            raise SchemaNotFound(name) from None

    def names(self) -> tuple[str, ...]:
        return tuple(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)


def build_credentials_schema() -> FieldDescription:
    account = describe(
        {
            "name": describe("string", "Account name. Used in tunnel definitions."),
            "email": describe("string", "Account email."),
            "password": describe("string", "Account password."),
            "server": describe("number", "Server ID, refer to the server list in README."),
        },
        "Account object.",
    )
    return describe(
        {
            "hostname": describe(
                "string",
                "Remote host name or domain name registered in both Cloudflare "
                "and Packetriot accounts.",
            ),
            "cloudflare": describe(
                {"token": describe("string", "Cloudflare API token.")},
                "Cloudflare-related things.",
            ),
            "packetriot": describe(
                {"accounts": describe([account], "Accounts in array.")},
                "Packetriot-related things.",
            ),
        },
        f"Schema of '{CREDENTIALS_CONFIG}.yml'.",
    )


def build_tunnels_schema() -> FieldDescription:
    tunnel = describe(
        {
            "name": describe("string", "Tunnel name."),
            "account": describe("string", "Packetriot account name."),
            "subdomain": describe("string", "Subdomain of hostname."),
            "localhost": describe(
                "string", "Localhost address to replace default.", "127.0.0.1"
            ),
            "port": describe("number", "Port on localhost to be tunneled."),
            "cert": describe("boolean", "Whether to add Let's Encrypt certificates.", True),
        },
        "Tunnel definition.",
    )
    return describe([tunnel], f"Schema of '{TUNNELS_CONFIG}.yml'.")


def build_default_registry() -> SchemaRegistry:
    """Build the registry holding the credentials and tunnels schemas."""
    registry = SchemaRegistry()
    registry.register(CREDENTIALS_CONFIG, build_credentials_schema())
    registry.register(TUNNELS_CONFIG, build_tunnels_schema())
    return registry
