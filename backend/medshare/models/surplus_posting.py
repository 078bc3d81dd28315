"""Surplus posting model

A clinic's offer of excess stock from one of its inventory items.
Only AVAILABLE postings take part in matching.

State flow: AVAILABLE → RESERVED → TRANSFERRED, AVAILABLE → CANCELLED,
RESERVED → AVAILABLE when the transfer is rejected.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import enum


class SurplusStatus(str, enum.Enum):
    AVAILABLE = "Available"      # Open for matching
    RESERVED = "Reserved"        # Transfer requested
    TRANSFERRED = "Transferred"  # Transfer completed (terminal)
    CANCELLED = "Cancelled"      # Withdrawn by owner (terminal)


class SurplusReason(str, enum.Enum):
    NEAR_EXPIRY = "Near Expiry"
    OVERSTOCKED = "Overstocked"
    PROGRAM_ENDED = "Program Ended"
    OTHER = "Other"


@dataclass(frozen=True)
class SurplusPosting:
    """Offer of surplus stock."""
    id: str
    clinic_id: str
    inventory_item_id: str
    quantity: int
    reason: SurplusReason
    status: SurplusStatus
    posted_date: datetime
    notes: Optional[str] = None
