"""
Record Manager - Core logic for A record updates

This module groups hostnames by hosted zone and turns each group into a
single batch of A record upserts for the DNS provider.
"""

import logging
from typing import Dict, Iterable, List

from ..models import DEFAULT_TTL, ChangeRequest, HostnameEntry, ZoneResult

logger = logging.getLogger(__name__)

DEFAULT_COMMENT = "Dynamic DNS update by route53-sync"


class RecordManager:
    """Builds and submits per-zone record change batches."""

    def __init__(self, dns_client, ttl: int = DEFAULT_TTL, comment: str = DEFAULT_COMMENT):
        """Initialize record manager with DNS client."""
        self.dns_client = dns_client
        self.ttl = ttl
        self.comment = comment

    @staticmethod
    def group_by_zone(entries: Iterable[HostnameEntry]) -> Dict[str, List[str]]:
        """
        Group hostnames by hosted zone.

        Hostnames keep their input order within a zone and duplicates are
        kept, so a repeated hostname is upserted more than once.

        Args:
            entries: Parsed hostname entries

        Returns:
            Mapping of zone id to its hostnames
        """
        zones: Dict[str, List[str]] = {}
        for zone_id, hostname in entries:
            zones.setdefault(zone_id, []).append(hostname)
        return zones

    def build_changes(self, hostnames: List[str], ip: str) -> List[ChangeRequest]:
        """Build one A record upsert per hostname."""
        return [ChangeRequest(hostname=name, ip=ip, ttl=self.ttl) for name in hostnames]

    def update_zone(
        self, zone_id: str, hostnames: List[str], ip: str, dry_run: bool = False
    ) -> ZoneResult:
        """
        Upsert A records for every hostname of a zone in one batch.

        Raises:
            ProviderError: the provider rejected the batch
        """
        changes = self.build_changes(hostnames, ip)
        if dry_run:
            logger.info(f"Dry run: would upsert {hostnames} -> {ip} in zone {zone_id}")
            return ZoneResult(zone_id, list(hostnames), changes, dry_run=True)

        change_info = self.dns_client.change_record_sets(zone_id, changes, self.comment)
        logger.info(
            f"Zone {zone_id} updated ({change_info.get('status')}, "
            f"{change_info.get('id')}): {', '.join(hostnames)} -> {ip}"
        )
        return ZoneResult(zone_id, list(hostnames), changes, change_info=change_info)
