"""Match scoring.

    urgency_score  = Critical 100 | High 75 | Medium 50 | Low 25
    expiry_score   = max(0, 100 - days_until_expiry / 90 * 100)
    quantity_score = min(surplus_qty / request_qty, 1) * 100
    match_score    = round_half_up(0.4 * urgency + 0.3 * expiry + 0.3 * quantity)

expiry_score is only clamped from below. Stock that has already expired
scores above 100 and that value flows into match_score unchanged, so a
match score can exceed 100.
"""

import math

from ..models import Urgency
from .ports import ScoreBreakdown

URGENCY_SCORES = {
    Urgency.CRITICAL: 100,
    Urgency.HIGH: 75,
    Urgency.MEDIUM: 50,
    Urgency.LOW: 25,
}

URGENCY_WEIGHT = 0.4
EXPIRY_WEIGHT = 0.3
QUANTITY_WEIGHT = 0.3

# Stock expiring this many days out or later gets no expiry bonus
EXPIRY_HORIZON_DAYS = 90


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


class MatchScorer:
    """Calculate weighted compatibility scores for surplus/request pairs."""

    def urgency_score(self, urgency: Urgency) -> float:
        return URGENCY_SCORES[Urgency(urgency)]

    def expiry_score(self, days_until_expiry: int) -> float:
        return max(0, 100 - (days_until_expiry / EXPIRY_HORIZON_DAYS) * 100)

    def quantity_score(self, surplus_quantity: int, request_quantity: int) -> float:
        """Share of the requested quantity covered by the surplus, capped at 100.

        Raises:
            ValueError: If request_quantity is not positive
        """
        if request_quantity <= 0:
            raise ValueError(
                f"Request quantity must be positive to score a match (got {request_quantity})"
            )
        return min(surplus_quantity / request_quantity, 1) * 100

    def score(
        self,
        urgency: Urgency,
        days_until_expiry: int,
        surplus_quantity: int,
        request_quantity: int,
    ) -> ScoreBreakdown:
        """Compute all sub-scores and the unrounded weighted total."""
        urgency_score = self.urgency_score(urgency)
        expiry_score = self.expiry_score(days_until_expiry)
        quantity_score = self.quantity_score(surplus_quantity, request_quantity)

        weighted_total = (
            urgency_score * URGENCY_WEIGHT
            + expiry_score * EXPIRY_WEIGHT
            + quantity_score * QUANTITY_WEIGHT
        )
        return ScoreBreakdown(
            urgency_score=urgency_score,
            expiry_score=expiry_score,
            quantity_score=quantity_score,
            weighted_total=weighted_total,
        )

    def match_score(self, breakdown: ScoreBreakdown) -> int:
        return round_half_up(breakdown.weighted_total)
