"""Pydantic schemas for medicine requests"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..models import RequestStatus, Unit, Urgency


class RequestCreate(BaseModel):
    """Schema for filing a medicine request

    Quantity must be positive: the matcher divides by it.
    """
    clinic_id: str = Field(..., min_length=1)
    medicine_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    unit: Unit
    urgency: Urgency
    reason: str = Field(..., min_length=1, max_length=1000)


class RequestResponse(BaseModel):
    """Schema for MedicineRequest response"""
    id: str
    clinic_id: str
    medicine_id: str
    quantity: int
    unit: Unit
    urgency: Urgency
    reason: str
    status: RequestStatus
    requested_date: datetime

    class Config:
        from_attributes = True
