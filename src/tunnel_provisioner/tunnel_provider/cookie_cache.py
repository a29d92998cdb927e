"""Flat JSON file caching one session cookie per account."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from .account_directory import PacketriotError
from .session_models import SESSION_ID_COOKIE_KEY, SessionCookie

logger = logging.getLogger(__name__)


class CookieCacheError(PacketriotError):
    """Raised when the cookie cache file or one of its entries cannot be read."""


class CookieCache:
    """Cookie cache stored as ``{account: cookie}`` in a JSON file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def create(self, account_names: Iterable[str]) -> bool:
        """Create the cache with an empty entry per account unless it already exists."""
        if self._path.exists():
            return False
        self._write({name: {} for name in sorted(account_names)})
        return True

    def load(
        self,
        account: str,
        cookie_name: str = SESSION_ID_COOKIE_KEY,
        *,
        now: datetime | None = None,
    ) -> SessionCookie | None:
        """Return the cached, unexpired cookie of an account, or None."""
        entries = self._read()
        if entries is None:
            logger.warning("File '%s' was not found.", self._path)
            return None

        entry = entries.get(account)
        if not isinstance(entry, Mapping) or entry.get("key") != cookie_name:
            logger.warning(
                "Cookie '%s' was not found in file under account '%s'.", cookie_name, account
            )
            return None

        try:
            cookie = SessionCookie.from_dict(entry)
        except (KeyError, TypeError, ValueError) as exc:
            raise CookieCacheError(
                f"Cookie entry for account '{account}' in '{self._path}' is malformed: {exc}"
            ) from exc
        if cookie.is_expired(now):
            logger.warning("Cookie '%s' under account '%s' has expired.", cookie_name, account)
            return None
        return cookie

    def store(self, account: str, cookie: SessionCookie) -> None:
        entries = dict(self._read() or {})
        entries[account] = cookie.to_dict()
        self._write(entries)

    def _read(self) -> Mapping[str, Any] | None:
        if not self._path.exists():
            return None
        text = self._path.read_text(encoding="utf-8")
        if not text.strip():
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CookieCacheError(f"Cookie file '{self._path}' is not valid JSON: {exc}") from exc
        if not isinstance(data, Mapping):
            raise CookieCacheError(f"Cookie file '{self._path}' must hold a JSON object.")
        return data

    def _write(self, entries: Mapping[str, Any]) -> None:
        self._path.write_text(json.dumps(entries, indent=2, sort_keys=True), encoding="utf-8")
