"""Tests for the Lambda entry point."""

from unittest.mock import patch

import pytest

from dnsupdater import handler
from dnsupdater.errors import ResourceLookupError
from dnsupdater.reconciler import Reconciler
from tests.conftest import INSTANCE_ID, FakeInventory


@pytest.fixture
def installed_reconciler(reconciler):
    """Install a reconciler with fake collaborators as the process-wide one."""
    with patch.object(handler, "_reconciler", reconciler):
        yield reconciler


def test_running_event(installed_reconciler, dns, make_event):
    """Test the handler reconciles and returns a summary."""
    result = handler.lambda_handler(make_event("running"), None)

    assert result == {
        "instance_id": INSTANCE_ID,
        "state": "running",
        "submitted": 2,
        "dry_run": 0,
        "ignored": 0,
        "skipped": 0,
        "failed": 0,
    }
    assert len(dns.changes) == 2


def test_failed_tag_still_succeeds(installed_reconciler, dns, make_event):
    """Test per-tag failures do not fail the invocation."""
    dns.failing_zones.add("example.com")

    result = handler.lambda_handler(make_event("terminated"), None)

    assert result["failed"] == 1
    assert result["submitted"] == 1


def test_inventory_failure_fails_invocation(dns, settings, make_event):
    """Test a failed instance lookup is raised to the platform."""
    reconciler = Reconciler(
        inventory=FakeInventory(error=ResourceLookupError("boom")), dns=dns, settings=settings
    )
    with patch.object(handler, "_reconciler", reconciler):
        with pytest.raises(ResourceLookupError):
            handler.lambda_handler(make_event("running"), None)


def test_reconciler_is_reused():
    """Test the reconciler is built once per process."""
    with patch.object(handler, "_reconciler", None):
        first = handler.get_reconciler()
        second = handler.get_reconciler()

    assert first is second
