"""
DNS provider implementations.

This package contains the AWS Route53 provider and an in-memory mock
provider, selected through DNSClient.
"""

from .dns_client import DNSClient, DNSProvider
from .route53_provider import Route53Provider
from .mock_provider import MockDNSProvider

__all__ = ["DNSClient", "DNSProvider", "Route53Provider", "MockDNSProvider"]
