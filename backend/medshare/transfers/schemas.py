"""Pydantic schemas for transfers and impact stats"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from ..models import Transfer, TransferStatus
from .status import get_allowed_transitions


class TransferResponse(BaseModel):
    """Schema for Transfer response"""
    id: str
    surplus_posting_id: str
    request_id: Optional[str] = None
    from_clinic_id: str
    to_clinic_id: str
    inventory_item_id: str
    quantity: int
    status: TransferStatus
    requested_date: datetime
    approved_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    notes: Optional[str] = None
    allowed_transitions: List[TransferStatus] = []

    class Config:
        from_attributes = True

    @classmethod
    def from_transfer(cls, transfer: Transfer) -> "TransferResponse":
        response = cls.model_validate(transfer)
        response.allowed_transitions = get_allowed_transitions(transfer.status)
        return response


class TransferSummaryResponse(BaseModel):
    """Transfer counts for one clinic"""
    clinic_id: str
    pending_outgoing: int
    active: int
    completed: int


class ImpactStatsResponse(BaseModel):
    """Network-wide impact of completed transfers"""
    transfers_completed: int
    medicines_saved: int
    clinics_helped: int

    class Config:
        from_attributes = True
