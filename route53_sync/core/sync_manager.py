#!/usr/bin/env python3
"""
Sync Manager - Keeps Route53 A records pointed at the current public IP

The sync is one linear pass: resolve the public IP, load the hostnames file,
group hostnames by hosted zone and submit one change batch per zone. A zone
whose batch fails is reported and the remaining zones are still updated.
"""

import logging
from typing import Dict, Optional

from rich.console import Console
from rich.table import Table

from ..exceptions import ProviderError
from ..models import DEFAULT_TTL, SyncReport, ZoneResult
from ..parsers.hostnames import HostnamesParser
from ..providers.dns_client import DNSClient
from .ip_resolver import (
    DEFAULT_IP_FIELD,
    DEFAULT_IP_SERVICE_URL,
    DEFAULT_TIMEOUT,
    IPResolver,
)
from .record_manager import DEFAULT_COMMENT, RecordManager

# Initialize rich console and logger
console = Console()
logger = logging.getLogger(__name__)

DEFAULT_HOSTNAMES_FILE = "hostnames.csv"


class SyncManager:
    """Main sync class that orchestrates the entire update."""

    def __init__(
        self,
        config: Dict,
        dns_client: Optional[DNSClient] = None,
        ip_resolver: Optional[IPResolver] = None,
    ):
        """Initialize the sync manager from a configuration dict."""
        self.config = config
        self.hostnames_file = config.get("hostnames_file", DEFAULT_HOSTNAMES_FILE)

        ip_config = config.get("ip_service") or {}
        self.ip_resolver = ip_resolver or IPResolver(
            url=ip_config.get("url", DEFAULT_IP_SERVICE_URL),
            timeout=ip_config.get("timeout", DEFAULT_TIMEOUT),
            field=ip_config.get("field", DEFAULT_IP_FIELD),
        )

        self.dns_client = dns_client or DNSClient(config)

        record_config = config.get("record") or {}
        self.record_manager = RecordManager(
            self.dns_client,
            ttl=record_config.get("ttl", DEFAULT_TTL),
            comment=record_config.get("comment", DEFAULT_COMMENT),
        )

    def run(self, dry_run: bool = False) -> SyncReport:
        """
        Run one sync.

        Args:
            dry_run: Build the change batches without submitting them

        Returns:
            SyncReport with one result per zone

        Raises:
            NetworkError, ProtocolError: the public IP could not be resolved
            HostnamesFileError, FormatError: the hostnames file is unusable
        """
        ip = self.ip_resolver.resolve()
        entries = HostnamesParser(self.hostnames_file).parse()
        zones = self.record_manager.group_by_zone(entries)

        report = SyncReport(ip=ip)
        if not zones:
            logger.warning(f"No hostnames found in {self.hostnames_file}")
            return report

        for zone_id, hostnames in zones.items():
            report.results.append(self._update_zone(zone_id, hostnames, ip, dry_run))

        self._display_summary(report)
        return report

    def _update_zone(self, zone_id, hostnames, ip, dry_run) -> ZoneResult:
        """Update one zone, recording a provider failure instead of raising it."""
        try:
            return self.record_manager.update_zone(zone_id, hostnames, ip, dry_run=dry_run)
        except ProviderError as e:
            logger.error(f"Failed to update zone {zone_id}: {e}")
            changes = self.record_manager.build_changes(hostnames, ip)
            return ZoneResult(zone_id, list(hostnames), changes, error=e)

    def _display_summary(self, report: SyncReport):
        """Display a summary of the submitted change batches."""
        table = Table(title=f"Route53 Sync -> {report.ip}")
        table.add_column("Zone", style="cyan")
        table.add_column("Hostnames", style="white")
        table.add_column("Status", style="magenta")

        for result in report.results:
            status = result.status
            if not result.ok:
                status = f"[red]{status}[/red]"
            table.add_row(result.zone_id, ", ".join(result.hostnames), status)

        console.print(table)
        if report.failed:
            console.print(
                f"[red]{len(report.failed)}/{len(report.results)} zones failed to update[/red]"
            )
        else:
            console.print(f"[green]{len(report.results)} zones processed[/green]")
