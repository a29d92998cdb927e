"""CLI orchestration integration tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner
from tunnel_provisioner import cli as cli_module
from tunnel_provisioner.cli import cli
from tunnel_provisioner.dns_provider.zone_client import Zone
from tunnel_provisioner.run_execution import execute_provisioning_run
from tunnel_provisioner.tunnel_provider.session_models import AccountCredentials, SessionCookie


def _write_config(tmp_path: Path) -> Path:
    (tmp_path / "credentials.yml").write_text(
        """
hostname: example.com
cloudflare:
  token: cf-token
packetriot:
  accounts:
    - name: main
      email: me@example.com
      password: secret
      server: 1
""",
        encoding="utf-8",
    )
    (tmp_path / "tunnels.yml").write_text(
        """
- name: web
  account: main
  subdomain: www
  port: 8080
- name: orphan
  account: ghost
  subdomain: api
  port: 9000
""",
        encoding="utf-8",
    )
    return tmp_path


class _FakeDnsClient:
    def __init__(self, token: str) -> None:
        self.token = token

    def find_zone(self, domain_name: str) -> Zone:
        return Zone(id="zone-1", name=domain_name)


class _FakeTunnelSession:
    def login(self, credentials: AccountCredentials) -> SessionCookie | None:
        return SessionCookie(
            key="SESSID",
            value="fresh-session",
            domain="packetriot.com",
            expires=datetime.now(UTC) + timedelta(days=7),
        )


def test_generate_config_then_check_config(tmp_path: Path) -> None:
    runner = CliRunner()

    generated = runner.invoke(cli, ["generate-config", "--output-dir", str(tmp_path)])
    checked = runner.invoke(cli, ["check-config", "--config-dir", str(tmp_path)])

    assert generated.exit_code == 0
    assert str((tmp_path / "credentials.yml").resolve()) in generated.output
    assert checked.exit_code == 0
    assert "hostname: <REQUIRED>" in checked.output
    assert "tunnels: 1" in checked.output


def test_check_config_reads_directory_from_environment(tmp_path: Path) -> None:
    runner = CliRunner()
    config_dir = _write_config(tmp_path)

    result = runner.invoke(
        cli, ["check-config"], env={"TUNNEL_PROVISIONER_CONFIG_DIR": str(config_dir)}
    )

    assert result.exit_code == 0
    assert "accounts: 1" in result.output
    assert "tunnels: 2" in result.output


def test_show_schema_prints_tree() -> None:
    result = CliRunner().invoke(cli, ["show-schema", "credentials"])

    assert result.exit_code == 0
    assert result.output.startswith("<object> - Schema of 'credentials.yml'.")
    assert "└─ packetriot: <object>" in result.output


def test_run_command_reports_each_tunnel(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_dir = _write_config(tmp_path)

    def _fake_run(request, **_kwargs):
        return execute_provisioning_run(
            request,
            dns_client_factory=_FakeDnsClient,
            tunnel_session_factory=_FakeTunnelSession,
        )

    monkeypatch.setattr(cli_module, "execute_provisioning_run", _fake_run)

    result = CliRunner().invoke(cli, ["run", "--config-dir", str(config_dir)])

    assert result.exit_code == 0
    assert "Zone ID: zone-1" in result.output
    assert "Available accounts: main" in result.output
    assert "web: main authorized (login)" in result.output
    assert "orphan: ghost skipped: In 'orphan' tunnel definition" in result.output
    assert (config_dir / "cookies.json").exists()
