"""Inventory item status derivation.

Status is recorded when an item is added:
    Expired        expiry date already passed
    Expiring Soon  expires within EXPIRING_SOON_DAYS
    Low Stock      fewer than LOW_STOCK_THRESHOLD units
    In Stock       otherwise
"""

from datetime import datetime
from typing import Optional

from ..config import settings
from ..dates import days_until
from ..models import InventoryStatus


def derive_inventory_status(
    quantity: int,
    expiry_date: datetime,
    now: Optional[datetime] = None,
    expiring_soon_days: Optional[int] = None,
    low_stock_threshold: Optional[int] = None,
) -> InventoryStatus:
    """Derive the status of an inventory item.

    Args:
        quantity: Units on hand
        expiry_date: Batch expiry timestamp
        now: Reference time (defaults to current UTC time)
        expiring_soon_days: Override for settings.EXPIRING_SOON_DAYS
        low_stock_threshold: Override for settings.LOW_STOCK_THRESHOLD

    Returns:
        InventoryStatus, with expiry taking precedence over stock level
    """
    if expiring_soon_days is None:
        expiring_soon_days = settings.EXPIRING_SOON_DAYS
    if low_stock_threshold is None:
        low_stock_threshold = settings.LOW_STOCK_THRESHOLD

    remaining = days_until(expiry_date, now)
    if remaining < 0:
        return InventoryStatus.EXPIRED
    if remaining < expiring_soon_days:
        return InventoryStatus.EXPIRING_SOON
    if quantity < low_stock_threshold:
        return InventoryStatus.LOW_STOCK
    return InventoryStatus.IN_STOCK
