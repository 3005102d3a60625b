"""
Command-line interface components.

This package contains CLI tools and entry points for route53-sync.
"""

from .main import main

__all__ = ["main"]
