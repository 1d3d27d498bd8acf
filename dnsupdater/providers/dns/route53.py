"""AWS Route53 DNS provider implementation."""

import asyncio

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from dnsupdater.errors import ChangeError, ResourceLookupError
from dnsupdater.models import ChangeRequest, ChangeResult, HostedZone, RecordSet
from dnsupdater.providers.dns.base import DNSProvider


def _error_messages(error: ClientError) -> list[str]:
    """Split a Route53 error into its individual messages.

    InvalidChangeBatch errors list every violated rule under ``Messages``.
    """
    response = error.response or {}
    messages = response.get("Messages") or response.get("Error", {}).get("Messages")
    if isinstance(messages, dict):
        messages = messages.get("Message")
    if isinstance(messages, str):
        messages = [messages]
    return [str(m) for m in messages or []]


class Route53Provider(DNSProvider):
    """DNS provider backed by AWS Route53."""

    def __init__(self, region: str | None = None, client=None):
        """Initialize the Route53 provider.

        Args:
            region: AWS region for the client (default: SDK resolution chain)
            client: A pre-built route53 client; created on first use if omitted
        """
        self.region = region
        self._client = client

    @property
    def client(self):
        if self._client is None:
            config = Config(retries={"max_attempts": 3, "mode": "standard"})
            self._client = boto3.client("route53", region_name=self.region, config=config)
        return self._client

    async def find_zone(self, suffix: str) -> HostedZone:
        """Find the hosted zone named ``suffix``; the first match wins."""
        try:
            response = await asyncio.to_thread(
                self.client.list_hosted_zones_by_name, DNSName=suffix
            )
        except (ClientError, BotoCoreError) as e:
            raise ResourceLookupError(f"Hosted zone lookup for {suffix} failed: {e}") from e

        wanted = suffix.rstrip(".").lower()
        for zone in response.get("HostedZones", []):
            if zone["Name"].rstrip(".").lower() == wanted:
                return HostedZone(id=zone["Id"], name=zone["Name"])

        raise ResourceLookupError(f"No hosted zone found for {suffix}")

    async def list_records(self, zone_id: str, start_name: str) -> list[RecordSet]:
        """List record sets of a zone starting at ``start_name``."""
        try:
            response = await asyncio.to_thread(
                self.client.list_resource_record_sets,
                HostedZoneId=zone_id,
                StartRecordName=start_name,
            )
        except (ClientError, BotoCoreError) as e:
            raise ResourceLookupError(
                f"Record set lookup for {start_name} in {zone_id} failed: {e}"
            ) from e

        records = []
        for record_set in response.get("ResourceRecordSets", []):
            records.append(
                RecordSet(
                    name=record_set["Name"],
                    type=record_set["Type"],
                    # Alias records carry no ResourceRecords
                    values=[r["Value"] for r in record_set.get("ResourceRecords", [])],
                )
            )
        return records

    async def submit_change(self, request: ChangeRequest) -> ChangeResult:
        """Submit a change batch holding exactly one change."""
        try:
            response = await asyncio.to_thread(
                self.client.change_resource_record_sets,
                HostedZoneId=request.zone_id,
                ChangeBatch=request.to_change_batch(),
            )
        except ClientError as e:
            messages = _error_messages(e)
            causes: list[BaseException] = [ChangeError(m) for m in messages] or [e]
            raise ChangeError(
                f"{request.action.value} of {request.name} in {request.zone_id} failed", causes
            ) from e
        except BotoCoreError as e:
            raise ChangeError(
                f"{request.action.value} of {request.name} in {request.zone_id} failed", [e]
            ) from e

        info = response.get("ChangeInfo", {})
        return ChangeResult(change_id=info.get("Id"), status=info.get("Status", "UNKNOWN"))
