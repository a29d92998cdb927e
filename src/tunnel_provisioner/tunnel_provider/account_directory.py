"""Packetriot account lookup helpers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from tunnel_provisioner.configuration.runtime_settings import PacketriotAccount

from .session_models import AccountCredentials


class PacketriotError(Exception):
    """Raised for Packetriot account and session failures."""


class AccountsNotFound(PacketriotError):
    """Raised when the credentials file declares no usable account."""

    def __init__(self, credentials_path: Path | str) -> None:
        super().__init__(f"No valid accounts found in '{credentials_path}'")


class AccountNotFound(PacketriotError):
    """Raised when an account name is not declared in the credentials."""

    def __init__(self, account: str) -> None:
        super().__init__(f"Account '{account}' does not exist.")
        self.account = account


def available_account_names(
    accounts: Sequence[PacketriotAccount], *, credentials_path: Path | str = "credentials.yml"
) -> frozenset[str]:
    """Return the set of account names tunnel definitions may refer to."""
    names = frozenset(account.name for account in accounts)
    if not names:
        raise AccountsNotFound(credentials_path)
    return names


def credentials_for(accounts: Sequence[PacketriotAccount], account: str) -> AccountCredentials:
    """Return the login credentials of the named account."""
    for candidate in accounts:
        if candidate.name == account:
            return AccountCredentials(email=candidate.email, password=candidate.password)
    raise AccountNotFound(account)
