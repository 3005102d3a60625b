"""
DNS Client - Unified interface for DNS provider APIs

This module selects the configured DNS provider, currently AWS Route53 or
the in-memory mock provider.
"""

import logging
from typing import Dict, List

from .base_provider import DNSProvider
from .mock_provider import MockDNSProvider
from .route53_provider import Route53Provider
from ..exceptions import ConfigurationError
from ..models import ChangeRequest

logger = logging.getLogger(__name__)


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "route53")
        provider_config = (self.config.get("dns_providers") or {}).get(provider_name) or {}

        if provider_name == "route53":
            return Route53Provider(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            raise ConfigurationError(f"Unknown DNS provider '{provider_name}'")

    def change_record_sets(
        self, zone_id: str, changes: List[ChangeRequest], comment: str
    ) -> Dict:
        """Submit a change batch to one hosted zone."""
        return self.provider.change_record_sets(zone_id, changes, comment)
