"""DNS provider exports."""

from .zone_client import (
    CloudflareAuthError,
    CloudflareClient,
    CloudflareError,
    DnsRecord,
    Zone,
    ZoneNotFound,
)

__all__ = [
    "CloudflareClient",
    "CloudflareError",
    "CloudflareAuthError",
    "ZoneNotFound",
    "Zone",
    "DnsRecord",
]
