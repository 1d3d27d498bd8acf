"""Reconcile DNS records with an instance lifecycle event."""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from dnsupdater.changes import build_change_request
from dnsupdater.config import UpdaterSettings
from dnsupdater.decision import decide
from dnsupdater.errors import ChangeError, InvalidEventError, ResourceLookupError
from dnsupdater.models import (
    ChangeRequest,
    Decision,
    DNSRole,
    InstanceSnapshot,
    LifecycleEvent,
)
from dnsupdater.providers.dns.base import DNSProvider
from dnsupdater.providers.inventory.base import InventoryProvider

logger = logging.getLogger(__name__)


class TagOutcome(str, Enum):
    SUBMITTED = "submitted"
    DRY_RUN = "dry_run"
    IGNORED = "ignored"
    SKIPPED = "skipped"
    FAILED = "failed"


class TagResult(BaseModel):
    """What happened to one DNS tag."""

    key: str
    dns_name: str
    role: DNSRole
    decision: Decision
    outcome: TagOutcome
    zone_id: str | None = None
    change: ChangeRequest | None = None
    status: str | None = None
    errors: list[str] = Field(default_factory=list)


class ReconciliationReport(BaseModel):
    instance_id: str
    state: str
    results: list[TagResult] = Field(default_factory=list)

    def count(self, outcome: TagOutcome) -> int:
        return sum(1 for r in self.results if r.outcome is outcome)

    def summary(self) -> dict[str, Any]:
        return {
            "instance_id": self.instance_id,
            "state": self.state,
            **{outcome.value: self.count(outcome) for outcome in TagOutcome},
        }


def zone_suffix(dns_name: str) -> str:
    """Drop the leftmost label: ``server.example.com`` -> ``example.com``."""
    _, _, suffix = dns_name.partition(".")
    return suffix


def bare_zone_id(raw_id: str) -> str:
    """Strip the store's path prefix: ``/hostedzone/Z123`` -> ``Z123``."""
    return raw_id.rstrip("/").split("/")[-1]


class Reconciler:
    """Applies lifecycle events to the DNS records named by instance tags.

    Collaborators can be injected; the AWS-backed ones are created on first
    use otherwise, and reused for the lifetime of the reconciler.
    """

    def __init__(
        self,
        inventory: InventoryProvider | None = None,
        dns: DNSProvider | None = None,
        settings: UpdaterSettings | None = None,
    ):
        self.settings = settings or UpdaterSettings()
        self._inventory = inventory
        self._dns = dns

    @property
    def inventory(self) -> InventoryProvider:
        if self._inventory is None:
            from dnsupdater.providers.inventory import EC2InventoryProvider

            self._inventory = EC2InventoryProvider(region=self.settings.aws_region)
        return self._inventory

    @property
    def dns(self) -> DNSProvider:
        if self._dns is None:
            from dnsupdater.providers.dns import Route53Provider

            self._dns = Route53Provider(region=self.settings.aws_region)
        return self._dns

    def role_for(self, tag_key: str) -> DNSRole | None:
        if tag_key == self.settings.public_tag_key:
            return DNSRole.PUBLIC
        if tag_key == self.settings.private_tag_key:
            return DNSRole.PRIVATE
        return None

    async def locate_zone(self, dns_name: str) -> str:
        """Return the bare id of the hosted zone that owns ``dns_name``."""
        logger.info("Getting hosted zone id for %s", dns_name)
        suffix = zone_suffix(dns_name)
        if not suffix:
            raise ResourceLookupError(f"{dns_name} has no parent zone")

        zone = await self.dns.find_zone(suffix)
        zone_id = bare_zone_id(zone.id)
        logger.info("Hosted zone for %s is %s", dns_name, zone_id)
        return zone_id

    async def resolve_address(
        self, role: DNSRole, snapshot: InstanceSnapshot, zone_id: str, dns_name: str
    ) -> str | None:
        """Return the address to publish or match for ``dns_name``.

        Falls back to the currently published record when the instance no
        longer reports an address, which happens after termination.
        """
        address = snapshot.address_for(role)
        if address:
            return address

        logger.info(
            "No %s address reported for %s. Looking up %s in %s",
            role.value,
            snapshot.instance_id,
            dns_name,
            zone_id,
        )
        records = await self.dns.list_records(zone_id, dns_name)
        if not records or not records[0].values:
            return None
        return records[0].values[0]

    async def handle(self, event: LifecycleEvent | dict[str, Any]) -> ReconciliationReport:
        """Process one lifecycle event.

        Only a malformed event or a failed instance lookup fails the call.
        Per-tag failures are logged and recorded in the report.
        """
        if not isinstance(event, LifecycleEvent):
            try:
                event = LifecycleEvent.model_validate(event)
            except ValidationError as e:
                raise InvalidEventError(f"Invalid lifecycle event: {e}") from e

        logger.info("Received event: %s", event.model_dump_json(by_alias=True))

        logger.info("Getting tags for %s", event.instance_id)
        snapshot = await self.inventory.describe_instance(event.instance_id)
        logger.info("Got tag keys: %s", ";".join(tag.key for tag in snapshot.tags))

        report = ReconciliationReport(instance_id=event.instance_id, state=event.state)
        for tag in snapshot.tags:
            role = self.role_for(tag.key)
            if role is None:
                continue
            result = await self._reconcile_tag(event, snapshot, tag.key, tag.value, role)
            report.results.append(result)

        return report

    async def _reconcile_tag(
        self,
        event: LifecycleEvent,
        snapshot: InstanceSnapshot,
        key: str,
        dns_name: str,
        role: DNSRole,
    ) -> TagResult:
        decision = decide(event.state, role)
        result = TagResult(
            key=key,
            dns_name=dns_name,
            role=role,
            decision=decision,
            outcome=TagOutcome.IGNORED,
        )
        if decision is Decision.IGNORE:
            logger.info("Ignoring %s for %s", event.state, event.instance_id)
            return result

        verb = "Creating / updating" if decision is Decision.UPDATE else "Deleting"
        logger.info("%s record set for %s - %s", verb, event.instance_id, dns_name)

        try:
            result.zone_id = await self.locate_zone(dns_name)
            address = await self.resolve_address(role, snapshot, result.zone_id, dns_name)
        except ResourceLookupError as e:
            logger.error("Lookup for %s failed: %s", dns_name, e)
            result.outcome = TagOutcome.FAILED
            result.errors.append(str(e))
            return result

        change = build_change_request(result.zone_id, dns_name, address, decision)
        if change is None:
            logger.info(
                "No record set found for %s - %s. Looks like it's been deleted already.",
                result.zone_id,
                dns_name,
            )
            result.outcome = TagOutcome.SKIPPED
            return result

        result.change = change
        logger.info(
            "Created %s change request for %s - %s - %s",
            change.action.value,
            dns_name,
            change.values[0],
            change.zone_id,
        )

        if self.settings.dry_run:
            logger.info("Dry run, not submitting: %s", change.model_dump_json())
            result.outcome = TagOutcome.DRY_RUN
            return result

        try:
            submitted = await self.dns.submit_change(change)
        except ChangeError as e:
            logger.error("Change for %s failed: %s", dns_name, e)
            for cause in e.causes:
                logger.error("  cause: %s", cause)
            result.outcome = TagOutcome.FAILED
            result.errors.extend(str(cause) for cause in e.causes or [e])
            return result

        logger.info("Result: %s", submitted.status)
        result.outcome = TagOutcome.SUBMITTED
        result.status = submitted.status
        return result
