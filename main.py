#!/usr/bin/env python3
"""
Route53 Sync - Main Entry Point

This is the main entry point for route53-sync.
It can be run directly or imported as a module.
"""

from route53_sync.cli.main import main

if __name__ == "__main__":
    main()
