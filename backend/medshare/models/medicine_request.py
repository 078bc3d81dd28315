"""Medicine request model

A clinic's declared need for a quantity of one medicine.
Only OPEN requests take part in matching.
"""

from dataclasses import dataclass
from datetime import datetime
import enum

from .inventory_item import Unit


class Urgency(str, enum.Enum):
    """Requester-declared priority; drives 40% of the match score."""
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class RequestStatus(str, enum.Enum):
    OPEN = "Open"            # Waiting for a match
    MATCHED = "Matched"      # Transfer requested against a surplus posting
    FULFILLED = "Fulfilled"  # Transfer completed (terminal)
    CANCELLED = "Cancelled"  # Withdrawn by requester (terminal)


@dataclass(frozen=True)
class MedicineRequest:
    """Request for a medicine."""
    id: str
    clinic_id: str
    medicine_id: str
    quantity: int
    unit: Unit
    urgency: Urgency
    reason: str
    status: RequestStatus
    requested_date: datetime
