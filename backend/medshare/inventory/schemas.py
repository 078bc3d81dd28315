"""Pydantic schemas for clinic inventory"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..dates import days_until
from ..models import InventoryItem, InventoryStatus, Unit


class InventoryItemCreate(BaseModel):
    """Schema for recording a batch of stock"""
    clinic_id: str = Field(..., min_length=1)
    medicine_id: str = Field(..., min_length=1)
    batch_number: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., gt=0)
    unit: Unit
    expiry_date: datetime


class InventoryItemResponse(BaseModel):
    """Schema for InventoryItem response"""
    id: str
    clinic_id: str
    medicine_id: str
    batch_number: str
    quantity: int
    unit: Unit
    expiry_date: datetime
    status: InventoryStatus
    added_date: datetime
    days_until_expiry: int

    @classmethod
    def from_item(
        cls,
        item: InventoryItem,
        now: Optional[datetime] = None,
        days_until_expiry: Optional[int] = None,
    ) -> "InventoryItemResponse":
        if days_until_expiry is None:
            days_until_expiry = days_until(item.expiry_date, now)
        return cls(
            id=item.id,
            clinic_id=item.clinic_id,
            medicine_id=item.medicine_id,
            batch_number=item.batch_number,
            quantity=item.quantity,
            unit=item.unit,
            expiry_date=item.expiry_date,
            status=item.status,
            added_date=item.added_date,
            days_until_expiry=days_until_expiry,
        )
