"""
AWS Route53 DNS provider implementation.

This module submits record change batches to Route53 using boto3.
"""

import logging
from typing import Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .base_provider import DNSProvider
from ..exceptions import ConfigurationError, ProviderError, ProviderErrorKind
from ..models import ChangeRequest

logger = logging.getLogger(__name__)


class Route53Provider(DNSProvider):
    """Route53 provider backed by a boto3 client."""

    def __init__(self, config: Optional[Dict] = None, client=None):
        """Initialize Route53 provider."""
        self.config = config or {}
        self.client = client or self._create_client()
        logger.info("Route53 provider initialized")

    def _create_client(self):
        """Create a Route53 client from the configured profile and credentials."""
        try:
            session = boto3.Session(
                profile_name=self.config.get("profile") or None,
                aws_access_key_id=self.config.get("access_key_id") or None,
                aws_secret_access_key=self.config.get("secret_access_key") or None,
                region_name=self.config.get("region") or None,
            )
            return session.client("route53")
        except BotoCoreError as e:
            raise ConfigurationError(f"Cannot create Route53 client: {e}") from e

    def change_record_sets(
        self, zone_id: str, changes: List[ChangeRequest], comment: str
    ) -> Dict:
        """Submit all changes for a hosted zone as one change batch."""
        batch = {"Changes": [change.to_change() for change in changes]}
        if comment:
            batch["Comment"] = comment

        logger.debug(f"Submitting {len(changes)} changes to zone {zone_id}")
        try:
            response = self.client.change_resource_record_sets(
                HostedZoneId=zone_id, ChangeBatch=batch
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            raise ProviderError(
                zone_id, error.get("Message", str(e)), code=error.get("Code")
            ) from e
        except BotoCoreError as e:
            raise ProviderError(
                zone_id,
                f"Failed to change record sets: {e}",
                kind=ProviderErrorKind.UNKNOWN,
            ) from e

        change_info = response.get("ChangeInfo", {})
        return {
            "id": change_info.get("Id"),
            "status": change_info.get("Status"),
            "submitted_at": change_info.get("SubmittedAt"),
            "comment": change_info.get("Comment"),
        }
