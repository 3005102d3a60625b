"""
Behave environment configuration for route53-sync feature tests.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.test_data_dir = Path(tempfile.mkdtemp())
    context.hostnames_file = context.test_data_dir / "hostnames.csv"
    context.report = None
    context.error = None

    context.requests_patcher = patch("route53_sync.core.ip_resolver.requests.get")
    context.requests_get = context.requests_patcher.start()

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    context.requests_patcher.stop()
    shutil.rmtree(context.test_data_dir, ignore_errors=True)
    logger.info(f"Completed scenario: {scenario.name}")
