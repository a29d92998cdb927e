"""Provisioning run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

import requests

from tunnel_provisioner.configuration import (
    ConfigPaths,
    SchemaRegistry,
    TunnelDefinition,
    build_default_registry,
    load_credentials,
    load_tunnels,
)
from tunnel_provisioner.configuration.runtime_settings import PacketriotAccount
from tunnel_provisioner.dns_provider.zone_client import CloudflareClient, CloudflareError, Zone
from tunnel_provisioner.tunnel_provider import (
    AccountCredentials,
    CookieCache,
    PacketriotError,
    PacketriotSession,
    SessionCookie,
    available_account_names,
    credentials_for,
)

from .run_contracts import AuthorizationStatus, RunOutcome, RunRequest, TunnelAuthorization

logger = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a provisioning run cannot be completed."""


class DnsClient(Protocol):  # pylint: disable=too-few-public-methods
    """Subset of the DNS provider client the run needs."""

    def find_zone(self, domain_name: str) -> Zone: ...


class TunnelSession(Protocol):  # pylint: disable=too-few-public-methods
    """Subset of the tunnel provider session the run needs."""

    def login(self, credentials: AccountCredentials) -> SessionCookie | None: ...


def execute_provisioning_run(
    request: RunRequest,
    *,
    dns_client_factory: Callable[[str], DnsClient] | None = None,
    tunnel_session_factory: Callable[[], TunnelSession] | None = None,
    registry: SchemaRegistry | None = None,
) -> RunOutcome:
    """Execute one provisioning run and return its outcome.

    Configuration errors propagate unchanged so callers can render the schema.
    Provider and network failures are raised as RunExecutionError.
    """
    resolved_dns_client_factory = dns_client_factory or CloudflareClient
    resolved_tunnel_session_factory = tunnel_session_factory or PacketriotSession
    resolved_registry = registry or build_default_registry()

    paths = ConfigPaths(Path(request.config_dir))
    credentials = load_credentials(paths.credentials, resolved_registry)
    tunnels = load_tunnels(paths.tunnels, resolved_registry)

    try:
        zone = resolved_dns_client_factory(credentials.cloudflare.token).find_zone(
            credentials.hostname
        )
        accounts = credentials.packetriot.accounts
        available = available_account_names(accounts, credentials_path=paths.credentials)
        logger.info("Available accounts: %s", sorted(available))

        cookie_cache = CookieCache(paths.cookies)
        authorizations = tuple(
            _authorize_tunnel(
                tunnel,
                accounts=accounts,
                available=available,
                cookie_cache=cookie_cache,
                tunnel_session_factory=resolved_tunnel_session_factory,
            )
            for tunnel in tunnels
        )
    except (CloudflareError, PacketriotError, requests.RequestException) as exc:
        raise RunExecutionError(str(exc)) from exc

    return RunOutcome(
        zone=zone,
        available_accounts=tuple(sorted(available)),
        authorizations=authorizations,
    )


def _authorize_tunnel(
    tunnel: TunnelDefinition,
    *,
    accounts: Sequence[PacketriotAccount],
    available: frozenset[str],
    cookie_cache: CookieCache,
    tunnel_session_factory: Callable[[], TunnelSession],
) -> TunnelAuthorization:
    account = tunnel.account
    logger.info("Account: %s", account)

    if account not in available:
        message = f"In '{tunnel.name}' tunnel definition: account '{account}' does not exist."
        logger.warning(message)
        return TunnelAuthorization(
            tunnel_name=tunnel.name,
            account=account,
            status=AuthorizationStatus.SKIPPED,
            message=message,
        )

    cookie = cookie_cache.load(account)
    if cookie is not None:
        return _authorized(tunnel, cookie, reused_cookie=True)

    cookie_cache.create(available)
    cookie = tunnel_session_factory().login(credentials_for(accounts, account))
    if cookie is None:
        return TunnelAuthorization(
            tunnel_name=tunnel.name,
            account=account,
            status=AuthorizationStatus.FAILED,
            message=f"Login for account '{account}' returned no session cookie.",
        )
    cookie_cache.store(account, cookie)
    return _authorized(tunnel, cookie, reused_cookie=False)


def _authorized(
    tunnel: TunnelDefinition, cookie: SessionCookie, *, reused_cookie: bool
) -> TunnelAuthorization:
    logger.info("Account: %s; Session ID: %s", tunnel.account, cookie.value)
    return TunnelAuthorization(
        tunnel_name=tunnel.name,
        account=tunnel.account,
        status=AuthorizationStatus.AUTHORIZED,
        session_id=cookie.value,
        reused_cookie=reused_cookie,
    )
