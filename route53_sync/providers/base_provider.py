"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from ..models import ChangeRequest


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def change_record_sets(
        self, zone_id: str, changes: List[ChangeRequest], comment: str
    ) -> Dict:
        """Submit a batch of record changes to one hosted zone atomically.

        Returns a change info dict with `id`, `status` and `submitted_at`.
        Raises ProviderError when the provider rejects the batch.
        """
        pass
