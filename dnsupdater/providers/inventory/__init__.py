"""Instance inventory provider implementations."""

from dnsupdater.providers.inventory.base import InventoryProvider
from dnsupdater.providers.inventory.ec2 import EC2InventoryProvider

__all__ = ["InventoryProvider", "EC2InventoryProvider"]
