"""
IP Resolver - Public IP discovery

This module asks a remote HTTP service for the caller's public IPv4 address.
The service must answer 200 with a JSON object holding the address in a
known field, e.g. {"IP": "203.0.113.5"}.
"""

import logging

import requests

from ..exceptions import NetworkError, ProtocolError
from ..utils.validators import validate_ipv4

logger = logging.getLogger(__name__)

DEFAULT_IP_SERVICE_URL = "http://abandonedfactory.net/tools/myip.php"
DEFAULT_TIMEOUT = 1.0
DEFAULT_IP_FIELD = "IP"


class IPResolver:
    """Resolves the public IP address with a single HTTP request."""

    def __init__(
        self,
        url: str = DEFAULT_IP_SERVICE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        field: str = DEFAULT_IP_FIELD,
    ):
        self.url = url
        self.timeout = timeout
        self.field = field

    def resolve(self) -> str:
        """
        Fetch the current public IP address.

        Returns:
            The IP address as returned by the service

        Raises:
            NetworkError: the service could not be reached or timed out
            ProtocolError: non-200 status or a body without the IP field
        """
        logger.debug(f"Fetching public IP from {self.url} (timeout {self.timeout}s)")
        try:
            response = requests.get(self.url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"Timed out contacting IP service {self.url}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Could not reach IP service {self.url}: {e}") from e

        if response.status_code != 200:
            raise ProtocolError(
                f"Error response from IP service {self.url}: "
                f"{response.status_code} {response.reason}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError(f"IP service returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ProtocolError("IP service response is not a JSON object")

        ip = data.get(self.field)
        if not isinstance(ip, str) or not ip.strip():
            raise ProtocolError(f"IP service response has no '{self.field}' field")

        ip = ip.strip()
        if not validate_ipv4(ip):
            logger.warning(f"IP service returned a non-IPv4 address: {ip}")

        logger.info(f"Current public IP: {ip}")
        return ip
