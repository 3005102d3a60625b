"""
Step definitions for route53-sync feature tests.
"""

from unittest.mock import Mock

from behave import given, when, then

from route53_sync.cli.main import get_default_config, merge_config
from route53_sync.core.sync_manager import SyncManager
from route53_sync.exceptions import SyncError


def _ip_response(status_code, body=None):
    response = Mock()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Error"
    response.json.return_value = body
    return response


@given('the IP service reports "{ip}"')
def step_impl(context, ip):
    """Make the IP service answer with the given address."""
    context.requests_get.return_value = _ip_response(200, {"IP": ip})


@given("the IP service answers with status {status:d}")
def step_impl(context, status):
    """Make the IP service answer with an error status."""
    context.requests_get.return_value = _ip_response(status)


@given("route53-sync is configured with the mock provider")
def step_impl(context):
    """Configure the sync against the in-memory provider."""
    context.sync_config = merge_config(
        get_default_config(),
        {
            "hostnames_file": str(context.hostnames_file),
            "default_provider": "mock",
            "dns_providers": {"mock": {"failures": {}}},
        },
    )


@given("a hostnames file with")
def step_impl(context):
    """Write the table rows as zone,hostname lines."""
    with open(context.hostnames_file, "w") as f:
        for row in context.table:
            f.write(f"{row['zone']},{row['hostname']}\n")


@given('a hostnames file containing "{line}"')
def step_impl(context, line):
    """Write a single line hostnames file."""
    with open(context.hostnames_file, "w") as f:
        f.write(line + "\n")


@given('the provider rejects zone "{zone_id}" with "{code}"')
def step_impl(context, zone_id, code):
    """Make the mock provider fail one zone."""
    context.sync_config["dns_providers"]["mock"]["failures"][zone_id] = code


def _run(context, dry_run):
    context.sync_manager = SyncManager(context.sync_config)
    try:
        context.report = context.sync_manager.run(dry_run=dry_run)
    except SyncError as e:
        context.error = e


@when("I run the sync")
def step_impl(context):
    """Run the sync."""
    _run(context, dry_run=False)


@when("I run the sync in dry run mode")
def step_impl(context):
    """Run the sync without submitting changes."""
    _run(context, dry_run=True)


@then("the sync succeeds")
def step_impl(context):
    """Verify the sync ran to completion."""
    assert context.error is None, f"Sync failed: {context.error}"
    assert context.report is not None


@then('the sync fails with "{error_name}"')
def step_impl(context, error_name):
    """Verify the sync aborted with the expected error."""
    assert context.error is not None, "Sync did not fail"
    assert type(context.error).__name__ == error_name, repr(context.error)


@then("{count:d} change batches are submitted")
def step_impl(context, count):
    """Verify the number of provider calls."""
    calls = context.sync_manager.dns_client.provider.calls
    assert len(calls) == count, f"Expected {count} batches, got {len(calls)}"


@then("no change batches are submitted")
def step_impl(context):
    """Verify the provider was never called."""
    assert context.sync_manager.dns_client.provider.calls == []


@then('zone "{zone_id}" receives {count:d} upserts to "{ip}" with TTL {ttl:d}')
def step_impl(context, zone_id, count, ip, ttl):
    """Verify the batch submitted for a zone."""
    calls = [
        call
        for call in context.sync_manager.dns_client.provider.calls
        if call["zone_id"] == zone_id
    ]
    assert len(calls) == 1, f"Expected one batch for {zone_id}, got {len(calls)}"

    changes = calls[0]["changes"]
    assert len(changes) == count, f"Expected {count} changes, got {len(changes)}"
    for change in changes:
        assert change.ip == ip
        assert change.ttl == ttl
        assert change.record_type == "A"
        assert change.action == "UPSERT"


@then('zone "{zone_id}" is reported as failed with "{code}"')
def step_impl(context, zone_id, code):
    """Verify a zone failure was recorded in the report."""
    failed = {result.zone_id: result for result in context.report.failed}
    assert zone_id in failed, f"Zone {zone_id} not reported as failed"
    assert failed[zone_id].error.kind.value == code
