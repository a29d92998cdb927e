"""Run execution domain exports."""

from .provisioning_run_use_case import RunExecutionError, execute_provisioning_run
from .run_contracts import AuthorizationStatus, RunOutcome, RunRequest, TunnelAuthorization

__all__ = [
    "RunRequest",
    "RunOutcome",
    "AuthorizationStatus",
    "TunnelAuthorization",
    "RunExecutionError",
    "execute_provisioning_run",
]
