"""
Core sync functionality.

This package contains IP discovery, zone grouping and the sync sequence.
"""

from .ip_resolver import IPResolver
from .record_manager import RecordManager
from .sync_manager import SyncManager

__all__ = ["IPResolver", "RecordManager", "SyncManager"]
