"""DNS provider implementations."""

from dnsupdater.providers.dns.base import DNSProvider
from dnsupdater.providers.dns.route53 import Route53Provider

__all__ = ["DNSProvider", "Route53Provider"]
