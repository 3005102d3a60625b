#!/usr/bin/env python3
"""
Route53 Sync - Command Line Interface

Main entry point for the route53-sync CLI. Exits 1 when the sync cannot run
(IP lookup, hostnames file or configuration failed). Zones whose change
batch was rejected are reported but do not change the exit status.
"""

import argparse
import copy
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import yaml

from ..core.ip_resolver import DEFAULT_IP_FIELD, DEFAULT_IP_SERVICE_URL, DEFAULT_TIMEOUT
from ..core.record_manager import DEFAULT_COMMENT
from ..core.sync_manager import DEFAULT_HOSTNAMES_FILE, SyncManager
from ..exceptions import ConfigurationError, SyncError
from ..models import DEFAULT_TTL
from ..utils.validators import validate_ttl

logger = logging.getLogger(__name__)

CONFIG_SECTIONS = ("ip_service", "record", "dns_providers", "logging")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Route53 Sync - Point Route53 A records at this host's public IP"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--hostnames",
        "-f",
        help=f"File of zoneId,hostname lines (default: {DEFAULT_HOSTNAMES_FILE})",
    )

    parser.add_argument("--ip-url", help="IP discovery service URL")

    parser.add_argument(
        "--timeout", type=float, help="IP discovery timeout in seconds"
    )

    parser.add_argument("--ttl", type=int, help="TTL for the A records")

    parser.add_argument("--comment", help="Comment attached to each change batch")

    parser.add_argument(
        "--provider", choices=["route53", "mock"], help="DNS provider to use"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be changed without making changes",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        apply_overrides(config, args)
        validate_config(config)
    except ConfigurationError as e:
        config_logger(get_default_config(), verbose=args.verbose)
        logger.error(f"Sync failed: {e}")
        sys.exit(1)

    config_logger(config, verbose=args.verbose)

    try:
        SyncManager(config).run(dry_run=args.dry_run)
    except SyncError as e:
        logger.error(f"Sync failed: {e}", exc_info=args.verbose)
        sys.exit(1)

    sys.exit(0)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file, merged over the defaults."""
    config = get_default_config()
    if not Path(config_path).exists():
        logger.warning(f"Config file {config_path} not found, using defaults")
        return config

    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    for section in CONFIG_SECTIONS:
        if section in loaded and loaded[section] is None:
            del loaded[section]
        elif section in loaded and not isinstance(loaded[section], dict):
            raise ConfigurationError(
                f"Config section '{section}' in {config_path} must be a mapping"
            )

    logger.info(f"Configuration loaded from {config_path}")
    return merge_config(config, loaded)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "ip_service": {
            "url": DEFAULT_IP_SERVICE_URL,
            "timeout": DEFAULT_TIMEOUT,
            "field": DEFAULT_IP_FIELD,
        },
        "hostnames_file": DEFAULT_HOSTNAMES_FILE,
        "record": {"ttl": DEFAULT_TTL, "comment": DEFAULT_COMMENT},
        "dns_providers": {"route53": {}},
        "default_provider": "route53",
        "logging": {"level": "INFO", "file": None},
    }


def merge_config(base: Dict, override: Dict) -> Dict:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def apply_overrides(config: Dict, args: argparse.Namespace) -> Dict:
    """Apply command line options on top of the loaded configuration."""
    if args.hostnames:
        config["hostnames_file"] = args.hostnames
    if args.ip_url:
        config.setdefault("ip_service", {})["url"] = args.ip_url
    if args.timeout is not None:
        config.setdefault("ip_service", {})["timeout"] = args.timeout
    if args.ttl is not None:
        config.setdefault("record", {})["ttl"] = args.ttl
    if args.comment is not None:
        config.setdefault("record", {})["comment"] = args.comment
    if args.provider:
        config["default_provider"] = args.provider
    return config


def validate_config(config: Dict):
    """Reject settings the sync cannot run with."""
    ttl = config.get("record", {}).get("ttl")
    if not validate_ttl(ttl):
        raise ConfigurationError(f"TTL must be a positive integer, got {ttl!r}")

    timeout = config.get("ip_service", {}).get("timeout")
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigurationError(f"Timeout must be a positive number, got {timeout!r}")

    if not config.get("ip_service", {}).get("url"):
        raise ConfigurationError("IP service URL is not set")

    level = (config.get("logging") or {}).get("level", "INFO")
    if not isinstance(logging.getLevelName(str(level).upper()), int):
        raise ConfigurationError(f"Unknown logging level {level!r}")


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = "DEBUG" if verbose else str(logging_config.get("level", "INFO")).upper()
    log_file: Optional[str] = logging_config.get("file")

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


if __name__ == "__main__":
    main()
