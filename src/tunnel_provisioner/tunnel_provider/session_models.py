"""Tunnel provider session entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from http.cookiejar import Cookie
from typing import Any

SESSION_ID_COOKIE_KEY = "SESSID"


@dataclass(frozen=True)
class SessionCookie:
    """Persisted Packetriot session cookie."""

    key: str
    value: str
    domain: str
    expires: datetime | None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Cookies without an expiry are session-scoped and never reused."""
        if self.expires is None:
            return True
        return (now or datetime.now(UTC)) >= self.expires

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "value": self.value,
            "domain": self.domain,
            "expires": self.expires.isoformat() if self.expires else None,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> SessionCookie:
        expires_raw = data.get("expires")
        expires = datetime.fromisoformat(expires_raw) if expires_raw else None
        if expires is not None and expires.tzinfo is None:
            expires = expires.replace(tzinfo=UTC)
        return SessionCookie(
            key=str(data["key"]),
            value=str(data.get("value", "")),
            domain=str(data.get("domain", "")),
            expires=expires,
        )

    @staticmethod
    def from_cookiejar(cookie: Cookie) -> SessionCookie:
        expires = (
            datetime.fromtimestamp(cookie.expires, tz=UTC) if cookie.expires is not None else None
        )
        return SessionCookie(
            key=cookie.name,
            value=cookie.value or "",
            domain=cookie.domain.lstrip("."),
            expires=expires,
        )


@dataclass(frozen=True)
class AccountCredentials:
    """Email and password used to log in to one account."""

    email: str
    password: str
