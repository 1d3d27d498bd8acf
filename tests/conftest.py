"""Shared test fixtures for DNS updater tests."""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from dnsupdater.config import UpdaterSettings
from dnsupdater.errors import ChangeError, ResourceLookupError
from dnsupdater.events import sample_event
from dnsupdater.models import (
    ChangeRequest,
    ChangeResult,
    HostedZone,
    InstanceSnapshot,
    RecordSet,
    Tag,
)
from dnsupdater.providers.dns.base import DNSProvider
from dnsupdater.providers.inventory.base import InventoryProvider
from dnsupdater.reconciler import Reconciler

INSTANCE_ID = "i-abcd1111"
PUBLIC_NAME = "server.example.com"
PRIVATE_NAME = "server.internal.corp"
PUBLIC_ZONE = "example.com"
PRIVATE_ZONE = "internal.corp"
PUBLIC_ZONE_ID = "I15AFAKE1DOKHM"
PRIVATE_ZONE_ID = "Z2PRIVATEFAKE7"
PUBLIC_IP = "50.1.1.1"
PRIVATE_IP = "10.0.0.123"


# ============================================================================
# Fake collaborators
# ============================================================================


class FakeInventory(InventoryProvider):
    """In-memory inventory returning a fixed snapshot."""

    def __init__(self, snapshot: InstanceSnapshot | None = None, error: Exception | None = None):
        self.snapshot = snapshot
        self.error = error
        self.calls: list[str] = []

    async def describe_instance(self, instance_id: str) -> InstanceSnapshot:
        self.calls.append(instance_id)
        if self.error is not None:
            raise self.error
        if self.snapshot is None or self.snapshot.instance_id != instance_id:
            raise ResourceLookupError(f"Instance {instance_id} not found")
        return self.snapshot


class FakeDNS(DNSProvider):
    """In-memory DNS store with one zone per test domain."""

    def __init__(self):
        self.zones = {
            PUBLIC_ZONE: HostedZone(id=f"/hostedzone/{PUBLIC_ZONE_ID}", name=f"{PUBLIC_ZONE}."),
            PRIVATE_ZONE: HostedZone(id=f"/hostedzone/{PRIVATE_ZONE_ID}", name=f"{PRIVATE_ZONE}."),
        }
        self.records: dict[tuple[str, str], list[str]] = {
            (PUBLIC_ZONE_ID, PUBLIC_NAME): [PUBLIC_IP],
            (PRIVATE_ZONE_ID, PRIVATE_NAME): [PRIVATE_IP],
        }
        self.failing_zones: set[str] = set()
        self.failing_listings: set[str] = set()
        self.change_errors: dict[str, ChangeError] = {}
        self.zone_queries: list[str] = []
        self.record_queries: list[tuple[str, str]] = []
        self.changes: list[ChangeRequest] = []

    async def find_zone(self, suffix: str) -> HostedZone:
        self.zone_queries.append(suffix)
        if suffix in self.failing_zones or suffix not in self.zones:
            raise ResourceLookupError(f"No hosted zone found for {suffix}")
        return self.zones[suffix]

    async def list_records(self, zone_id: str, start_name: str) -> list[RecordSet]:
        self.record_queries.append((zone_id, start_name))
        if start_name in self.failing_listings:
            raise ResourceLookupError(f"Record set lookup for {start_name} failed")
        values = self.records.get((zone_id, start_name))
        if values is None:
            return []
        return [RecordSet(name=f"{start_name}.", type="A", values=values)]

    async def submit_change(self, request: ChangeRequest) -> ChangeResult:
        self.changes.append(request)
        if request.name in self.change_errors:
            raise self.change_errors[request.name]
        return ChangeResult(change_id=f"/change/C{len(self.changes)}", status="PENDING")


# ============================================================================
# CLI Fixtures
# ============================================================================


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def settings() -> UpdaterSettings:
    """Settings with defaults, unaffected by the environment."""
    return UpdaterSettings(_env_file=None)


@pytest.fixture
def snapshot() -> InstanceSnapshot:
    """An instance carrying both DNS tags and both addresses."""
    return InstanceSnapshot(
        instance_id=INSTANCE_ID,
        tags=[
            Tag(key="Name", value="web"),
            Tag(key="PublicDNS", value=PUBLIC_NAME),
            Tag(key="PrivateDNS", value=PRIVATE_NAME),
        ],
        public_address=PUBLIC_IP,
        private_address=PRIVATE_IP,
    )


@pytest.fixture
def snapshot_without_addresses(snapshot: InstanceSnapshot) -> InstanceSnapshot:
    """The same instance after termination, with no addresses reported."""
    return snapshot.model_copy(update={"public_address": "", "private_address": None})


@pytest.fixture
def inventory(snapshot: InstanceSnapshot) -> FakeInventory:
    return FakeInventory(snapshot)


@pytest.fixture
def dns() -> FakeDNS:
    return FakeDNS()


@pytest.fixture
def reconciler(inventory: FakeInventory, dns: FakeDNS, settings: UpdaterSettings) -> Reconciler:
    return Reconciler(inventory=inventory, dns=dns, settings=settings)


@pytest.fixture
def make_event():
    """Build an EventBridge state-change payload for the test instance."""

    def _make(state: str, instance_id: str = INSTANCE_ID) -> dict:
        return sample_event(instance_id, state)

    return _make


# ============================================================================
# Mock Fixtures - boto3
# ============================================================================


@pytest.fixture
def mock_boto3():
    """Mock boto3.client for AWS calls."""
    with patch("boto3.client") as mock_client_func:
        mock_client = MagicMock()
        mock_client_func.return_value = mock_client
        yield mock_client
