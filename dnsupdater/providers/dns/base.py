"""Abstract base class for DNS providers."""

from abc import ABC, abstractmethod

from dnsupdater.models import ChangeRequest, ChangeResult, HostedZone, RecordSet


class DNSProvider(ABC):
    """Abstract DNS provider interface."""

    @abstractmethod
    async def find_zone(self, suffix: str) -> HostedZone:
        """Find the hosted zone whose name is exactly ``suffix``.

        Args:
            suffix: The zone name (e.g., "example.com")

        Returns:
            The first matching hosted zone

        Raises:
            ResourceLookupError: No zone matches or the lookup failed
        """
        pass

    @abstractmethod
    async def list_records(self, zone_id: str, start_name: str) -> list[RecordSet]:
        """List record sets of a zone, starting at a record name.

        Args:
            zone_id: The bare hosted zone id
            start_name: The record name to start listing from

        Returns:
            Record sets in store order, possibly empty

        Raises:
            ResourceLookupError: The listing failed
        """
        pass

    @abstractmethod
    async def submit_change(self, request: ChangeRequest) -> ChangeResult:
        """Submit a single record set change.

        Args:
            request: The change to apply

        Returns:
            The status reported by the store

        Raises:
            ChangeError: The store rejected the change or the call failed
        """
        pass
