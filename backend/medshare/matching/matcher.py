"""Rule-based surplus/request matcher.

Pairs every Available surplus posting with every Open request for the same
medicine, scores each pair with MatchScorer and ranks the pairs.

Dangling references are skipped rather than reported: a posting whose
inventory item, medicine or clinic cannot be resolved yields no matches, and
a request whose clinic cannot be resolved is left out for that posting only.
The result is a best-effort suggestion list, not a system of record.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, TypeVar

from ..dates import days_until, ensure_utc, utcnow
from ..models import (
    Clinic,
    InventoryItem,
    Medicine,
    MedicineRequest,
    RequestStatus,
    SurplusPosting,
    SurplusStatus,
)
from ..observability import metrics
from .ports import Match, MatcherPort
from .scorer import MatchScorer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _index_by_id(records: Iterable[T]) -> Dict[str, T]:
    """Index records by id; the first record wins when ids repeat."""
    index: Dict[str, T] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


class RuleBasedMatcher(MatcherPort):
    """Weighted urgency/expiry/quantity matcher.

    Pure over its inputs: collections are only read, and every call
    recomputes the full ranking from scratch.
    """

    def __init__(self, scorer: Optional[MatchScorer] = None):
        self.scorer = scorer or MatchScorer()

    def find_matches(
        self,
        surplus_postings: Iterable[SurplusPosting],
        requests: Iterable[MedicineRequest],
        inventory_items: Iterable[InventoryItem],
        medicines: Iterable[Medicine],
        clinics: Iterable[Clinic],
        now: Optional[datetime] = None,
    ) -> List[Match]:
        now = ensure_utc(now or utcnow())
        metrics.match_runs_total.inc()

        with metrics.match_duration_seconds.time():
            matches = self._enumerate(
                surplus_postings, requests, inventory_items, medicines, clinics, now
            )
            # Stable sort: equal scores keep surplus-then-request enumeration order
            matches.sort(key=lambda m: m.match_score, reverse=True)

        metrics.matches_found_total.inc(len(matches))
        for match in matches:
            metrics.match_score_histogram.observe(match.match_score)

        logger.debug(
            f"Matcher produced {len(matches)} matches",
            extra={"match_count": len(matches)},
        )
        return matches

    def _enumerate(
        self,
        surplus_postings: Iterable[SurplusPosting],
        requests: Iterable[MedicineRequest],
        inventory_items: Iterable[InventoryItem],
        medicines: Iterable[Medicine],
        clinics: Iterable[Clinic],
        now: datetime,
    ) -> List[Match]:
        available_surplus = [s for s in surplus_postings if s.status == SurplusStatus.AVAILABLE]
        open_requests = [r for r in requests if r.status == RequestStatus.OPEN]

        items_by_id = _index_by_id(inventory_items)
        medicines_by_id = _index_by_id(medicines)
        clinics_by_id = _index_by_id(clinics)

        matches: List[Match] = []
        for surplus in available_surplus:
            inventory_item = items_by_id.get(surplus.inventory_item_id)
            if inventory_item is None:
                self._skip("missing_inventory_item", surplus_id=surplus.id)
                continue

            medicine = medicines_by_id.get(inventory_item.medicine_id)
            if medicine is None:
                self._skip("missing_medicine", surplus_id=surplus.id)
                continue

            from_clinic = clinics_by_id.get(surplus.clinic_id)
            if from_clinic is None:
                self._skip("missing_clinic", surplus_id=surplus.id)
                continue

            remaining_days = days_until(inventory_item.expiry_date, now)

            for request in open_requests:
                if request.medicine_id != medicine.id:
                    continue

                to_clinic = clinics_by_id.get(request.clinic_id)
                if to_clinic is None:
                    self._skip("missing_clinic", surplus_id=surplus.id, request_id=request.id)
                    continue

                if request.quantity <= 0:
                    # Rejected at creation; never score it if one slips through
                    logger.warning(
                        f"Skipping request {request.id} with non-positive quantity {request.quantity}",
                        extra={"request_id_ref": request.id},
                    )
                    metrics.match_skips_total.labels(reason="invalid_quantity").inc()
                    continue

                breakdown = self.scorer.score(
                    urgency=request.urgency,
                    days_until_expiry=remaining_days,
                    surplus_quantity=surplus.quantity,
                    request_quantity=request.quantity,
                )
                matches.append(Match(
                    surplus=surplus,
                    request=request,
                    inventory_item=inventory_item,
                    medicine=medicine,
                    from_clinic=from_clinic,
                    to_clinic=to_clinic,
                    match_score=self.scorer.match_score(breakdown),
                    days_until_expiry=remaining_days,
                    scores=breakdown,
                ))

        return matches

    def _skip(self, reason: str, surplus_id: str, request_id: Optional[str] = None) -> None:
        metrics.match_skips_total.labels(reason=reason).inc()
        extra = {"surplus_id": surplus_id}
        if request_id is not None:
            extra["request_id_ref"] = request_id
        logger.debug(f"Skipping unresolved reference: {reason}", extra=extra)


def find_matches(
    surplus_postings: Iterable[SurplusPosting],
    requests: Iterable[MedicineRequest],
    inventory_items: Iterable[InventoryItem],
    medicines: Iterable[Medicine],
    clinics: Iterable[Clinic],
    now: Optional[datetime] = None,
) -> List[Match]:
    """Rank all candidate matches with the default scorer.

    See RuleBasedMatcher.find_matches.
    """
    return RuleBasedMatcher().find_matches(
        surplus_postings, requests, inventory_items, medicines, clinics, now=now
    )


def filter_for_clinic(matches: Iterable[Match], clinic_id: str) -> List[Match]:
    """Keep matches where the clinic is either the giver or the receiver."""
    return [
        m for m in matches
        if m.from_clinic.id == clinic_id or m.to_clinic.id == clinic_id
    ]
