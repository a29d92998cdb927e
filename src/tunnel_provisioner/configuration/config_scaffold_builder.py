"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from .runtime_settings import CREDENTIALS_FILENAME, TUNNELS_FILENAME

_CREDENTIALS_SCAFFOLD_TEMPLATE = """# Credentials template for tunnel-provisioner.
# Replace every <REQUIRED> placeholder before running.

# Domain registered in both the Cloudflare and the Packetriot accounts.
hostname: "<REQUIRED>"

cloudflare:
  # API token allowed to read zones and edit DNS records.
  token: "<REQUIRED>"

packetriot:
  # At least one account is required. Tunnel definitions refer to accounts by name.
  accounts:
    - name: "<REQUIRED>"
      email: "<REQUIRED>"
      password: "<REQUIRED>"
      # Numeric server ID, see the server list in the README.
      server: 0
"""

_TUNNELS_SCAFFOLD_TEMPLATE = """# Tunnel definitions template for tunnel-provisioner.
# Replace every <REQUIRED> placeholder before running.
# Fields marked <OPTIONAL> fall back to the documented default when removed.

- name: "<REQUIRED>"
  # Must match an account name from credentials.yml.
  account: "<REQUIRED>"
  subdomain: "<REQUIRED>"
  # <OPTIONAL> defaults to 127.0.0.1
  localhost: "127.0.0.1"
  port: 8080
  # <OPTIONAL> defaults to true
  cert: true
"""


def build_placeholder_credentials() -> str:
    """Build a YAML credentials template with placeholders and inline guidance."""
    return _CREDENTIALS_SCAFFOLD_TEMPLATE


def build_placeholder_tunnels() -> str:
    """Build a YAML tunnel definitions template with placeholders and inline guidance."""
    return _TUNNELS_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_dir: Path | str) -> tuple[Path, Path]:
    """Write both placeholder configuration files into the requested directory.

    Args:
      output_dir: Destination directory, created when missing.

    Returns:
      The resolved credentials and tunnels paths.

    Raises:
      FileExistsError: If either destination file already exists.
      OSError: If writing a scaffold fails.
    """
    directory = Path(output_dir)
    credentials_path = directory / CREDENTIALS_FILENAME
    tunnels_path = directory / TUNNELS_FILENAME
    for destination in (credentials_path, tunnels_path):
        if destination.exists():
            raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")

    directory.mkdir(parents=True, exist_ok=True)
    credentials_path.write_text(build_placeholder_credentials(), encoding="utf-8")
    tunnels_path.write_text(build_placeholder_tunnels(), encoding="utf-8")
    return credentials_path.resolve(), tunnels_path.resolve()
