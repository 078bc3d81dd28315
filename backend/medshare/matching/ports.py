"""Matching ports and value types.

A Match is derived, never stored: it is recomputed from the current
collections on every matcher call and identified by (surplus id, request id).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from ..models import (
    Clinic,
    InventoryItem,
    Medicine,
    MedicineRequest,
    SurplusPosting,
)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-scores behind a match score.

    Attributes:
        urgency_score: 100/75/50/25 for Critical/High/Medium/Low
        expiry_score: 0 or more; exceeds 100 for already expired stock
        quantity_score: Share of the request the surplus covers (0-100)
        weighted_total: Unrounded weighted sum
    """
    urgency_score: float
    expiry_score: float
    quantity_score: float
    weighted_total: float


@dataclass(frozen=True)
class Match:
    """Scored pairing of one available surplus posting and one open request.

    Attributes:
        surplus: Surplus posting offering the stock
        request: Open request for the same medicine
        inventory_item: Inventory item behind the surplus posting
        medicine: Medicine shared by both sides
        from_clinic: Clinic that posted the surplus
        to_clinic: Clinic that filed the request
        match_score: Rounded weighted score (may exceed 100 for expired stock)
        days_until_expiry: Whole days until the batch expires (may be negative)
        scores: Sub-scores the match score was computed from
    """
    surplus: SurplusPosting
    request: MedicineRequest
    inventory_item: InventoryItem
    medicine: Medicine
    from_clinic: Clinic
    to_clinic: Clinic
    match_score: int
    days_until_expiry: int
    scores: ScoreBreakdown

    @property
    def key(self) -> Tuple[str, str]:
        return (self.surplus.id, self.request.id)


class MatcherPort(ABC):
    """Port interface for surplus/request matching strategies."""

    @abstractmethod
    def find_matches(
        self,
        surplus_postings: Iterable[SurplusPosting],
        requests: Iterable[MedicineRequest],
        inventory_items: Iterable[InventoryItem],
        medicines: Iterable[Medicine],
        clinics: Iterable[Clinic],
        now: Optional[datetime] = None,
    ) -> List[Match]:
        """Enumerate, score and rank candidate pairs.

        Args:
            surplus_postings: All surplus postings (any status)
            requests: All medicine requests (any status)
            inventory_items: Inventory items the postings refer to
            medicines: Medicine catalog
            clinics: Clinics referenced by postings and requests
            now: Reference time for expiry (defaults to current UTC time)

        Returns:
            Matches sorted by match_score, highest first
        """
        pass
