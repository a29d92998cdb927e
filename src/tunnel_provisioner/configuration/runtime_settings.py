"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CREDENTIALS_FILENAME = "credentials.yml"
TUNNELS_FILENAME = "tunnels.yml"
COOKIES_FILENAME = "cookies.json"


@dataclass(frozen=True)
class CloudflareSettings:
    """Cloudflare API access."""

    token: str


@dataclass(frozen=True)
class PacketriotAccount:
    """One Packetriot login."""

    name: str
    email: str
    password: str
    server: int | float


@dataclass(frozen=True)
class PacketriotSettings:
    """Packetriot accounts available to tunnel definitions."""

    accounts: tuple[PacketriotAccount, ...]


@dataclass(frozen=True)
class Credentials:
    """Top-level credentials aggregate."""

    path: Path
    hostname: str
    cloudflare: CloudflareSettings
    packetriot: PacketriotSettings


@dataclass(frozen=True)
class TunnelDefinition:  # pylint: disable=too-many-instance-attributes
    """One tunnel to authorize and expose under the hostname."""

    name: str
    account: str
    subdomain: str
    localhost: str
    port: int | float
    cert: bool


@dataclass(frozen=True)
class ConfigPaths:
    """Locations of the files the tool reads and writes."""

    config_dir: Path

    @property
    def credentials(self) -> Path:
        return self.config_dir / CREDENTIALS_FILENAME

    @property
    def tunnels(self) -> Path:
        return self.config_dir / TUNNELS_FILENAME

    @property
    def cookies(self) -> Path:
        return self.config_dir / COOKIES_FILENAME
