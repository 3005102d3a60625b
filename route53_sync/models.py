"""
Data types passed between the resolver, parser, record manager and providers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional

from .exceptions import ProviderError

DEFAULT_TTL = 600


class HostnameEntry(NamedTuple):
    """One `zone,hostname` line of the hostnames file."""

    zone_id: str
    hostname: str


@dataclass(frozen=True)
class ChangeRequest:
    """A single A record upsert."""

    hostname: str
    ip: str
    ttl: int = DEFAULT_TTL
    record_type: str = "A"
    action: str = "UPSERT"

    def to_change(self) -> Dict:
        """Return the record change in Route53 `Change` form."""
        return {
            "Action": self.action,
            "ResourceRecordSet": {
                "Name": self.hostname,
                "Type": self.record_type,
                "TTL": self.ttl,
                "ResourceRecords": [{"Value": self.ip}],
            },
        }


@dataclass
class ZoneResult:
    """Outcome of submitting one zone's change batch."""

    zone_id: str
    hostnames: List[str]
    changes: List[ChangeRequest]
    change_info: Optional[Dict] = None
    error: Optional[ProviderError] = None
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> str:
        if self.dry_run:
            return "DRY RUN"
        if self.error is not None:
            return self.error.kind.value
        return (self.change_info or {}).get("status", "SUBMITTED")


@dataclass
class SyncReport:
    """Everything a sync run did, in the order zones were processed."""

    ip: str
    results: List[ZoneResult] = field(default_factory=list)

    @property
    def succeeded(self) -> List[ZoneResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[ZoneResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed
