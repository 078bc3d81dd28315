"""Pydantic schemas for surplus postings"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..models import SurplusReason, SurplusStatus


class SurplusCreate(BaseModel):
    """Schema for posting surplus stock"""
    clinic_id: str = Field(..., min_length=1)
    inventory_item_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    reason: SurplusReason
    notes: Optional[str] = Field(None, max_length=1000)


class SurplusResponse(BaseModel):
    """Schema for SurplusPosting response"""
    id: str
    clinic_id: str
    inventory_item_id: str
    quantity: int
    reason: SurplusReason
    status: SurplusStatus
    posted_date: datetime
    notes: Optional[str] = None

    class Config:
        from_attributes = True
