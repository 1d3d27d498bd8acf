"""AWS EC2 inventory provider implementation."""

import asyncio

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from dnsupdater.errors import ResourceLookupError
from dnsupdater.models import InstanceSnapshot, Tag
from dnsupdater.providers.inventory.base import InventoryProvider


class EC2InventoryProvider(InventoryProvider):
    """Inventory provider backed by the EC2 DescribeInstances API."""

    def __init__(self, region: str | None = None, client=None):
        """Initialize the EC2 provider.

        Args:
            region: AWS region for the client (default: SDK resolution chain)
            client: A pre-built ec2 client; created on first use if omitted
        """
        self.region = region
        self._client = client

    @property
    def client(self):
        if self._client is None:
            config = Config(retries={"max_attempts": 3, "mode": "standard"})
            self._client = boto3.client("ec2", region_name=self.region, config=config)
        return self._client

    async def describe_instance(self, instance_id: str) -> InstanceSnapshot:
        """Describe a single instance."""
        try:
            response = await asyncio.to_thread(
                self.client.describe_instances, InstanceIds=[instance_id]
            )
        except (ClientError, BotoCoreError) as e:
            raise ResourceLookupError(f"Describing instance {instance_id} failed: {e}") from e

        instances = [
            instance
            for reservation in response.get("Reservations", [])
            for instance in reservation.get("Instances", [])
        ]
        if not instances:
            raise ResourceLookupError(f"Instance {instance_id} not found")

        instance = instances[0]
        return InstanceSnapshot(
            instance_id=instance.get("InstanceId", instance_id),
            tags=[Tag(key=t["Key"], value=t["Value"]) for t in instance.get("Tags", [])],
            public_address=instance.get("PublicIpAddress") or None,
            private_address=instance.get("PrivateIpAddress") or None,
        )
