"""Packetriot web login and page retrieval."""

from __future__ import annotations

import logging
from urllib.parse import urljoin, urlparse

import requests

from .session_models import SESSION_ID_COOKIE_KEY, AccountCredentials, SessionCookie

PACKETRIOT_HOME = "https://packetriot.com"
LOGIN_PATH = "/login"
DOMAINS_PATH = "/domains"
TUNNELS_PATH = "/tunnels"
REQUEST_TIMEOUT_SECONDS = 30.0

logger = logging.getLogger(__name__)


class PacketriotSession:
    """Cookie-carrying browser session against the Packetriot dashboard."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        base_url: str = PACKETRIOT_HOME,
    ) -> None:
        self._session = session or requests.Session()
        self._base_url = base_url
        self._domain = urlparse(base_url).hostname or ""

    def login(self, credentials: AccountCredentials) -> SessionCookie | None:
        """Log in and return the session cookie, or None when the site set none."""
        login_url = urljoin(self._base_url, LOGIN_PATH)
        self._session.get(login_url, timeout=REQUEST_TIMEOUT_SECONDS).raise_for_status()
        self._session.post(
            login_url,
            data={"email": credentials.email, "password": credentials.password, "google": ""},
            timeout=REQUEST_TIMEOUT_SECONDS,
        ).raise_for_status()

        cookie = self.find_cookie(SESSION_ID_COOKIE_KEY)
        if cookie is None:
            logger.warning(
                "Cookie '%s' was not found after logging in as '%s'.",
                SESSION_ID_COOKIE_KEY,
                credentials.email,
            )
        return cookie

    def find_cookie(self, name: str) -> SessionCookie | None:
        for cookie in self._session.cookies:
            if cookie.name == name and cookie.domain.lstrip(".") == self._domain:
                return SessionCookie.from_cookiejar(cookie)
        return None

    def fetch_domains_page(self) -> str:
        return self._get_page(DOMAINS_PATH)

    def fetch_tunnels_page(self) -> str:
        return self._get_page(TUNNELS_PATH)

    def _get_page(self, path: str) -> str:
        response = self._session.get(
            urljoin(self._base_url, path), timeout=REQUEST_TIMEOUT_SECONDS
        )
        response.raise_for_status()
        return response.text
