"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from tunnel_provisioner.configuration import (
    ConfigDocumentError,
    ConfigPaths,
    ConfigurationError,
    build_default_registry,
    load_credentials,
    load_tunnels,
    render_schema,
    write_placeholder_configuration,
)
from tunnel_provisioner.run_execution import (
    AuthorizationStatus,
    RunExecutionError,
    RunRequest,
    execute_provisioning_run,
)

CONFIG_DIR_ENVVAR = "TUNNEL_PROVISIONER_CONFIG_DIR"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_config_dir_option = click.option(
    "--config-dir",
    "config_dir",
    required=False,
    default=".",
    show_default=True,
    envvar=CONFIG_DIR_ENVVAR,
    type=click.Path(path_type=str, file_okay=False),
    help="Directory holding credentials.yml, tunnels.yml and cookies.json",
)


class CliError(Exception):
    """Custom CLI error."""


class ConfigDocumentCliError(CliError):
    """CLI error for an invalid configuration document, echoed with its schema."""

    def __init__(self, error: ConfigDocumentError) -> None:
        super().__init__(f"CONFIG ERROR: {error}")
        self.schema_text = render_schema(error.schema)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="tunnel-provisioner")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable progress logging.")
def cli(verbose: bool) -> None:
    """Provision Cloudflare DNS records and Packetriot tunnel accounts."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format=LOG_FORMAT)


@cli.command(name="generate-config")
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    default=".",
    show_default=True,
    type=click.Path(path_type=str, file_okay=False),
    help="Directory to write credentials.yml and tunnels.yml templates into",
)
def generate_config(output_dir: str) -> None:
    """Generate placeholder YAML configuration files with guidance comments."""
    try:
        written = write_placeholder_configuration(output_dir)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    for path in written:
        click.echo(str(path))


@cli.command(name="show-schema")
@click.argument("name")
def show_schema(name: str) -> None:
    """Print the schema of a configuration file (credentials or tunnels)."""
    try:
        schema = build_default_registry().lookup(name)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    click.echo(render_schema(schema))


@cli.command(name="check-config")
@_config_dir_option
def check_config(config_dir: str) -> None:
    """Validate credentials.yml and tunnels.yml without contacting any provider."""
    registry = build_default_registry()
    paths = ConfigPaths(Path(config_dir))
    try:
        credentials = load_credentials(paths.credentials, registry)
        tunnels = load_tunnels(paths.tunnels, registry)
    except ConfigDocumentError as exc:
        raise ConfigDocumentCliError(exc) from exc
    except ConfigurationError as exc:
        raise CliError(f"CONFIG ERROR: {exc}") from exc
    click.echo(f"hostname: {credentials.hostname}")
    click.echo(f"accounts: {len(credentials.packetriot.accounts)}")
    click.echo(f"tunnels: {len(tunnels)}")


@cli.command(name="run")
@_config_dir_option
def run_provisioning(config_dir: str) -> None:
    """Look up the DNS zone and authorize every tunnel's Packetriot account."""
    try:
        outcome = execute_provisioning_run(RunRequest(config_dir=config_dir))
    except ConfigDocumentError as exc:
        raise ConfigDocumentCliError(exc) from exc
    except ConfigurationError as exc:
        raise CliError(f"CONFIG ERROR: {exc}") from exc
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    click.echo(f"Zone ID: {outcome.zone.id}")
    click.echo(f"Available accounts: {', '.join(outcome.available_accounts)}")
    for entry in outcome.authorizations:
        if entry.status is AuthorizationStatus.AUTHORIZED:
            source = "cached" if entry.reused_cookie else "login"
            click.echo(f"{entry.tunnel_name}: {entry.account} authorized ({source})")
        else:
            click.echo(f"{entry.tunnel_name}: {entry.account} {entry.status.value}: {entry.message}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except ConfigDocumentCliError as exc:
        click.echo(str(exc), err=True)
        click.echo("\nDefined schema:", err=True)
        click.echo(exc.schema_text, err=True)
        return 1
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
