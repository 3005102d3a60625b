"""
Route53 Sync - Dynamic DNS for AWS Route53

Keeps a set of Route53 A records pointed at the public IP address of the
host it runs on.
"""

__version__ = "1.0.0"
__author__ = "Route53 Sync Team"
__description__ = "Dynamic DNS updater for AWS Route53 hosted zones"

from .core.ip_resolver import IPResolver
from .core.record_manager import RecordManager
from .core.sync_manager import SyncManager
from .providers.dns_client import DNSClient

__all__ = [
    "IPResolver",
    "RecordManager",
    "SyncManager",
    "DNSClient",
]
