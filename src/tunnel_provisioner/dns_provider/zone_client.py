"""Cloudflare zone and DNS record client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import requests

CLOUDFLARE_API_BASE = "https://api.cloudflare.com/client/v4"
REQUEST_TIMEOUT_SECONDS = 30.0

_KEY_INVALID_MESSAGE = (
    "Provided Cloudflare API Key isn't correct or doesn't have permissions to view zones."
)

logger = logging.getLogger(__name__)


class CloudflareError(Exception):
    """Raised when the Cloudflare API rejects a request."""


class CloudflareAuthError(CloudflareError):
    """Raised when the API token is missing, invalid or lacks permissions."""

    def __init__(self, message: str = _KEY_INVALID_MESSAGE) -> None:
        super().__init__(message)


class ZoneNotFound(CloudflareError):
    """Raised when the hostname is not a zone of the Cloudflare account."""

    def __init__(self, domain_name: str) -> None:
        super().__init__(f"Domain name '{domain_name}' not found in Cloudflare account.")
        self.domain_name = domain_name


@dataclass(frozen=True)
class Zone:
    """Cloudflare DNS zone."""

    id: str
    name: str


@dataclass(frozen=True)
class DnsRecord:
    """DNS record created in a zone."""

    id: str
    type: str
    name: str
    content: str


class CloudflareClient:
    """Thin wrapper over the Cloudflare v4 REST API."""

    def __init__(
        self,
        token: str,
        *,
        session: requests.Session | None = None,
        base_url: str = CLOUDFLARE_API_BASE,
    ) -> None:
        if not token:
            raise CloudflareAuthError()
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update(
            {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}
        )

    def find_zone(self, domain_name: str) -> Zone:
        """Return the zone whose name equals the domain name."""
        payload = self._request("GET", "/zones", params={"name": domain_name})
        for entry in payload.get("result") or ():
            if entry.get("name") == domain_name:
                zone = Zone(id=str(entry["id"]), name=str(entry["name"]))
                logger.info("Zone ID: %s", zone.id)
                return zone
        raise ZoneNotFound(domain_name)

    def add_a_record(
        self, zone: Zone, name: str, address: str, *, proxied: bool = False
    ) -> DnsRecord:
        logger.info("Adding DNS A record %s -> %s.", name, address)
        return self._create_record(zone, "A", name, address, proxied=proxied)

    def add_cname_record(
        self, zone: Zone, name: str, target: str, *, proxied: bool = False
    ) -> DnsRecord:
        logger.info("Adding DNS CNAME record %s -> %s.", name, target)
        return self._create_record(zone, "CNAME", name, target, proxied=proxied)

    def _create_record(
        self, zone: Zone, record_type: str, name: str, content: str, *, proxied: bool
    ) -> DnsRecord:
        payload = self._request(
            "POST",
            f"/zones/{zone.id}/dns_records",
            json={"type": record_type, "name": name, "content": content, "proxied": proxied},
        )
        result = payload.get("result") or {}
        return DnsRecord(
            id=str(result.get("id", "")),
            type=str(result.get("type", record_type)),
            name=str(result.get("name", name)),
            content=str(result.get("content", content)),
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> Mapping[str, Any]:
        response = self._session.request(
            method, f"{self._base_url}{path}", timeout=REQUEST_TIMEOUT_SECONDS, **kwargs
        )
        if response.status_code in (401, 403):
            raise CloudflareAuthError()
        if response.status_code >= 400:
            raise CloudflareError(
                f"Cloudflare API {method} {path} failed with HTTP {response.status_code}: "
                f"{_error_summary(response)}"
            )
        payload = response.json()
        if not payload.get("success"):
            raise CloudflareAuthError()
        return payload


def _error_summary(response: requests.Response) -> str:
    try:
        errors = response.json().get("errors") or ()
    except ValueError:
        return response.text
    messages = [str(error.get("message")) for error in errors if isinstance(error, Mapping)]
    return "; ".join(messages) or response.text
