"""
Input file parsers.

This package reads the hostnames file that maps hostnames to hosted zones.
"""

from .hostnames import HostnamesParser

__all__ = ["HostnamesParser"]
