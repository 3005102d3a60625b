"""
Utility functions and helpers.

This package contains validation helpers shared by the resolver and the CLI.
"""

from .validators import validate_ipv4, validate_ttl

__all__ = ["validate_ipv4", "validate_ttl"]
