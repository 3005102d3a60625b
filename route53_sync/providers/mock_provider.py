"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores records in memory
for safe testing and demonstration purposes.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List

from .base_provider import DNSProvider
from ..exceptions import ProviderError, ProviderErrorKind
from ..models import ChangeRequest

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes.

    Config keys:
        zones: hosted zone ids that exist; any other zone fails with
            NoSuchHostedZone. When omitted every zone exists.
        failures: mapping of zone id to a provider error code to raise
            for that zone.
    """

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        config = config or {}
        self.zones = config.get("zones")
        self.failures = dict(config.get("failures") or {})
        self.records: Dict[str, Dict[str, Dict]] = {}
        self.calls: List[Dict] = []
        logger.info("Mock DNS provider initialized")

    def change_record_sets(
        self, zone_id: str, changes: List[ChangeRequest], comment: str
    ) -> Dict:
        """Apply a change batch to the in-memory zone."""
        self.calls.append(
            {"zone_id": zone_id, "changes": list(changes), "comment": comment}
        )

        if zone_id in self.failures:
            code = self.failures[zone_id]
            raise ProviderError(zone_id, f"Mock: {code} for {zone_id}", code=code)

        if self.zones is not None and zone_id not in self.zones:
            raise ProviderError(
                zone_id,
                f"No hosted zone found with ID: {zone_id}",
                kind=ProviderErrorKind.NO_SUCH_HOSTED_ZONE,
            )

        zone = self.records.setdefault(zone_id, {})
        for change in changes:
            zone[change.hostname] = {
                "type": change.record_type,
                "ttl": change.ttl,
                "value": change.ip,
            }
            logger.info(f"Mock: Upserted record {change.hostname} -> {change.ip}")

        return {
            "id": f"/change/MOCK{len(self.calls)}",
            "status": "INSYNC",
            "submitted_at": datetime.now(timezone.utc),
            "comment": comment,
        }
