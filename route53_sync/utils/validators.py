"""
Validators - Sanity checks for values read from external sources

These checks never reject a value on their own; callers decide whether a
failed check is a warning or an error.
"""

import ipaddress
import logging

logger = logging.getLogger(__name__)


def validate_ipv4(ipv4: str) -> bool:
    """
    Validate IPv4 address.

    Args:
        ipv4: The IPv4 address to validate

    Returns:
        True if valid, False otherwise
    """
    if not ipv4 or not isinstance(ipv4, str):
        return False

    try:
        ipaddress.IPv4Address(ipv4.strip())
        return True
    except ipaddress.AddressValueError:
        logger.debug(f"Invalid IPv4 address: {ipv4}")
        return False


def validate_ttl(ttl) -> bool:
    """
    Validate a record TTL.

    Args:
        ttl: TTL in seconds

    Returns:
        True if ttl is a positive integer, False otherwise
    """
    if isinstance(ttl, bool) or not isinstance(ttl, int):
        return False
    return ttl > 0
