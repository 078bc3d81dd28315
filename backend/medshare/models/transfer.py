"""Transfer model

Record of stock moving from a surplus clinic to a requesting clinic.
Status transitions are enforced by ``transfers.status``.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import enum


class TransferStatus(str, enum.Enum):
    """Transfer status values.

    State flow: PENDING → APPROVED → IN_TRANSIT → COMPLETED,
    PENDING → REJECTED
    """
    PENDING = "Pending"
    APPROVED = "Approved"
    IN_TRANSIT = "In Transit"
    COMPLETED = "Completed"
    REJECTED = "Rejected"


@dataclass(frozen=True)
class Transfer:
    """Transfer of surplus stock between two clinics."""
    id: str
    surplus_posting_id: str
    from_clinic_id: str
    to_clinic_id: str
    inventory_item_id: str
    quantity: int
    status: TransferStatus
    requested_date: datetime
    request_id: Optional[str] = None
    approved_date: Optional[datetime] = None
    completed_date: Optional[datetime] = None
    notes: Optional[str] = None
