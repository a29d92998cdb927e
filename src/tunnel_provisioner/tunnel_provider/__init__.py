"""Tunnel provider exports."""

from .account_directory import (
    AccountNotFound,
    AccountsNotFound,
    PacketriotError,
    available_account_names,
    credentials_for,
)
from .cookie_cache import CookieCache, CookieCacheError
from .session_login import PacketriotSession
from .session_models import SESSION_ID_COOKIE_KEY, AccountCredentials, SessionCookie

__all__ = [
    "PacketriotError",
    "AccountsNotFound",
    "AccountNotFound",
    "available_account_names",
    "credentials_for",
    "CookieCache",
    "CookieCacheError",
    "PacketriotSession",
    "SESSION_ID_COOKIE_KEY",
    "AccountCredentials",
    "SessionCookie",
]
