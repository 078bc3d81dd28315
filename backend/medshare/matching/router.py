"""Matching API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_matcher, get_store
from ..store import InventoryStore
from ..transfers.schemas import TransferResponse
from .matcher import filter_for_clinic
from .ports import MatcherPort
from .schemas import MatchListResponse, MatchSchema, TransferRequest

router = APIRouter(prefix="/matches", tags=["matching"])


@router.get("", response_model=MatchListResponse)
def list_matches(
    clinic_id: Optional[str] = Query(
        None, description="Only matches where this clinic gives or receives"
    ),
    min_score: Optional[int] = Query(None, description="Drop matches scoring below this"),
    store: InventoryStore = Depends(get_store),
    matcher: MatcherPort = Depends(get_matcher),
):
    """Rank Available surplus against Open requests for the same medicine.

    Matches are recomputed from the current store contents on every call.
    """
    snapshot = store.snapshot()
    matches = matcher.find_matches(
        snapshot.surplus_postings,
        snapshot.requests,
        snapshot.inventory,
        snapshot.medicines,
        snapshot.clinics,
    )

    if clinic_id is not None:
        matches = filter_for_clinic(matches, clinic_id)
    if min_score is not None:
        matches = [m for m in matches if m.match_score >= min_score]

    return MatchListResponse(
        items=[MatchSchema.from_match(m) for m in matches],
        total=len(matches),
    )


@router.post("/transfer", response_model=TransferResponse, status_code=status.HTTP_201_CREATED)
def request_transfer(
    transfer_request: TransferRequest,
    store: InventoryStore = Depends(get_store),
):
    """Create a Pending transfer for a matched pair.

    Reserves the surplus posting and marks the request Matched, which
    removes the pair from subsequent match results.

    Raises:
        NotFoundError (404): If the posting or request does not exist
        ConflictError (409): If either side is no longer matchable
    """
    transfer = store.request_transfer(
        surplus_id=transfer_request.surplus_id,
        request_id=transfer_request.request_id,
        notes=transfer_request.notes,
    )
    return TransferResponse.from_transfer(transfer)
