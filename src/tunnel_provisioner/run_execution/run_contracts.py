"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tunnel_provisioner.dns_provider.zone_client import Zone


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one provisioning run."""

    config_dir: str


class AuthorizationStatus(str, Enum):
    """Outcome of authorizing one tunnel's account."""

    AUTHORIZED = "authorized"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class TunnelAuthorization:
    """Account session state for one tunnel definition."""

    tunnel_name: str
    account: str
    status: AuthorizationStatus
    session_id: str | None = None
    reused_cookie: bool = False
    message: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    zone: Zone
    available_accounts: tuple[str, ...]
    authorizations: tuple[TunnelAuthorization, ...]

    @property
    def authorized(self) -> int:
        return sum(
            1 for entry in self.authorizations if entry.status is AuthorizationStatus.AUTHORIZED
        )
