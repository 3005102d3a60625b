"""
Exceptions raised by Route53 Sync.

Every error the tool raises deliberately derives from SyncError so the CLI
can report it as a failed sync without catching unrelated bugs.
"""

from enum import Enum
from typing import Optional


class SyncError(Exception):
    """Base class for all Route53 Sync errors."""


class ConfigurationError(SyncError):
    """Invalid settings or an unknown DNS provider."""


class NetworkError(SyncError):
    """The IP discovery service could not be reached or timed out."""


class ProtocolError(SyncError):
    """The IP discovery service answered with an unexpected status or body."""


class HostnamesFileError(SyncError):
    """The hostnames file could not be read."""


class FormatError(SyncError):
    """A line of the hostnames file is not a `zone,hostname` pair."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Invalid hostnames line {line_number}: {line!r}")


class ProviderErrorKind(Enum):
    """Known DNS provider failure codes."""

    NO_SUCH_HOSTED_ZONE = "NoSuchHostedZone"
    NO_SUCH_HEALTH_CHECK = "NoSuchHealthCheck"
    INVALID_CHANGE_BATCH = "InvalidChangeBatch"
    INVALID_INPUT = "InvalidInput"
    PRIOR_REQUEST_NOT_COMPLETE = "PriorRequestNotComplete"
    UNKNOWN = "Unknown"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "ProviderErrorKind":
        """Map a provider error code to a kind, falling back to UNKNOWN."""
        for kind in cls:
            if kind.value == code:
                return kind
        return cls.UNKNOWN


class ProviderError(SyncError):
    """A DNS provider rejected or failed a zone's change batch."""

    def __init__(
        self,
        zone_id: str,
        message: str,
        code: Optional[str] = None,
        kind: Optional[ProviderErrorKind] = None,
    ):
        self.zone_id = zone_id
        self.message = message
        self.code = code
        self.kind = kind or ProviderErrorKind.from_code(code)
        super().__init__(f"{self.kind.value} ({zone_id}): {message}")
