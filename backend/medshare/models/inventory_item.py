"""Inventory item model

One batch of a medicine held by a clinic. ``status`` is derived when the
item is recorded (see ``inventory.status.derive_inventory_status``).
"""

from dataclasses import dataclass
from datetime import datetime
import enum


class Unit(str, enum.Enum):
    """Dispensing unit shared by inventory items and requests."""
    TABLETS = "tablets"
    CAPSULES = "capsules"
    ML = "ml"
    VIALS = "vials"
    STRIPS = "strips"
    BOTTLES = "bottles"


class InventoryStatus(str, enum.Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    EXPIRING_SOON = "Expiring Soon"
    EXPIRED = "Expired"


@dataclass(frozen=True)
class InventoryItem:
    """Stock of one medicine batch at one clinic."""
    id: str
    clinic_id: str
    medicine_id: str
    batch_number: str
    quantity: int
    unit: Unit
    expiry_date: datetime
    status: InventoryStatus
    added_date: datetime
