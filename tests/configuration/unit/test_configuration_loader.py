"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from tunnel_provisioner.configuration.errors import (
    ConfigDocumentError,
    ConfigurationError,
    FieldComplexChildless,
    FieldTypeMismatch,
    SchemaNotFound,
)
from tunnel_provisioner.configuration.loader import (
    load_credentials,
    load_tunnels,
    read_config_document,
)
from tunnel_provisioner.configuration.runtime_settings import ConfigPaths
from tunnel_provisioner.configuration.schema_registry import build_default_registry

_CREDENTIALS_YAML = """
hostname: example.com
cloudflare:
  token: cf-token
packetriot:
  accounts:
    - name: main
      email: me@example.com
      password: secret
      server: 3
      notes: ignored
"""

_TUNNELS_YAML = """
- name: web
  account: main
  subdomain: www
  port: 8080
- name: api
  account: main
  subdomain: api
  localhost: 10.0.0.2
  port: 9000
  cert: false
"""


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_credentials(tmp_path: Path) -> None:
    path = _write_file(tmp_path / "credentials.yml", _CREDENTIALS_YAML)

    credentials = load_credentials(path, build_default_registry())

    assert credentials.path == path
    assert credentials.hostname == "example.com"
    assert credentials.cloudflare.token == "cf-token"
    assert len(credentials.packetriot.accounts) == 1
    account = credentials.packetriot.accounts[0]
    assert account.name == "main"
    assert account.email == "me@example.com"
    assert account.server == 3


def test_loads_tunnels_with_defaults(tmp_path: Path) -> None:
    path = _write_file(tmp_path / "tunnels.yml", _TUNNELS_YAML)

    tunnels = load_tunnels(path, build_default_registry())

    assert [tunnel.name for tunnel in tunnels] == ["web", "api"]
    assert tunnels[0].localhost == "127.0.0.1"
    assert tunnels[0].cert is True
    assert tunnels[1].localhost == "10.0.0.2"
    assert tunnels[1].cert is False


def test_read_config_document_drops_unknown_keys(tmp_path: Path) -> None:
    path = _write_file(tmp_path / "credentials.yml", _CREDENTIALS_YAML)

    document = read_config_document(path, build_default_registry())

    assert "notes" not in document["packetriot"]["accounts"][0]


def test_missing_file_raises_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="was not found"):
        load_credentials(tmp_path / "credentials.yml", build_default_registry())


def test_unregistered_file_name_raises_schema_not_found(tmp_path: Path) -> None:
    path = _write_file(tmp_path / "settings.yml", "a: 1\n")

    with pytest.raises(SchemaNotFound) as exc_info:
        read_config_document(path, build_default_registry())

    assert exc_info.value.file_name == "settings"


def test_invalid_yaml_raises_configuration_error(tmp_path: Path) -> None:
    path = _write_file(tmp_path / "tunnels.yml", "- name: [unterminated\n")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_tunnels(path, build_default_registry())


def test_non_utf8_file_raises_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "credentials.yml"
    path.write_bytes(b"hostname: \xff\xfe\n")

    with pytest.raises(ConfigurationError, match="Failed to read") as exc_info:
        load_credentials(path, build_default_registry())

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_directory_in_place_of_file_raises_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "tunnels.yml"
    path.mkdir()

    with pytest.raises(ConfigurationError, match="Failed to read"):
        load_tunnels(path, build_default_registry())


def test_schema_violation_raises_config_document_error_with_schema(tmp_path: Path) -> None:
    path = _write_file(
        tmp_path / "tunnels.yml",
        "- name: web\n  account: main\n  subdomain: www\n  port: '8080'\n",
    )
    registry = build_default_registry()

    with pytest.raises(ConfigDocumentError) as exc_info:
        load_tunnels(path, registry)

    error = exc_info.value
    assert error.path == path
    assert isinstance(error.error, FieldTypeMismatch)
    assert error.schema is registry.lookup("tunnels")
    assert "Field 'port'" in str(error)


def test_empty_accounts_list_is_rejected(tmp_path: Path) -> None:
    path = _write_file(
        tmp_path / "credentials.yml",
        "hostname: example.com\ncloudflare:\n  token: t\npacketriot:\n  accounts: []\n",
    )

    with pytest.raises(ConfigDocumentError) as exc_info:
        load_credentials(path, build_default_registry())

    assert isinstance(exc_info.value.error, FieldComplexChildless)


def test_duplicate_tunnel_names_are_rejected(tmp_path: Path) -> None:
    path = _write_file(
        tmp_path / "tunnels.yml",
        "- {name: web, account: main, subdomain: www, port: 80}\n"
        "- {name: web, account: main, subdomain: api, port: 81}\n",
    )

    with pytest.raises(ConfigurationError, match="defined more than once"):
        load_tunnels(path, build_default_registry())


def test_config_paths_resolve_inside_directory(tmp_path: Path) -> None:
    paths = ConfigPaths(tmp_path)

    assert paths.credentials == tmp_path / "credentials.yml"
    assert paths.tunnels == tmp_path / "tunnels.yml"
    assert paths.cookies == tmp_path / "cookies.json"
