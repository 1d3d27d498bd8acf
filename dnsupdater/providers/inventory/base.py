"""Abstract base class for instance inventory providers."""

from abc import ABC, abstractmethod

from dnsupdater.models import InstanceSnapshot


class InventoryProvider(ABC):
    """Abstract instance inventory interface."""

    @abstractmethod
    async def describe_instance(self, instance_id: str) -> InstanceSnapshot:
        """Fetch tags and addresses for an instance.

        Args:
            instance_id: The instance identifier (e.g., "i-0123456789abcdef0")

        Returns:
            The instance's tags in inventory order and its current addresses

        Raises:
            ResourceLookupError: The instance is unknown or the call failed
        """
        pass
