"""Transfer workflow API endpoints.

Transfers are created from a match (see ``matching.router``); these
endpoints move them through Pending → Approved → In Transit → Completed
or Pending → Rejected. Every action names the sending clinic taking it.
"""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_store
from ..store import InventoryStore
from .schemas import ImpactStatsResponse, TransferResponse, TransferSummaryResponse

router = APIRouter(prefix="/transfers", tags=["transfers"])
impact_router = APIRouter(prefix="/impact", tags=["impact"])


@router.get("", response_model=List[TransferResponse])
def list_transfers(
    clinic_id: Optional[str] = Query(None, description="Transfers this clinic sends or receives"),
    direction: Optional[Literal["outgoing", "incoming"]] = Query(
        None, description="outgoing (clinic sends) or incoming (clinic receives)"
    ),
    store: InventoryStore = Depends(get_store),
):
    transfers = store.list_transfers(clinic_id=clinic_id, direction=direction)
    return [TransferResponse.from_transfer(t) for t in transfers]


@router.get("/summary", response_model=TransferSummaryResponse)
def transfer_summary(
    clinic_id: str = Query(..., description="Clinic to summarise"),
    store: InventoryStore = Depends(get_store),
):
    """Pending outgoing, active (Approved or In Transit) and completed counts."""
    store.get_clinic(clinic_id)
    summary = store.transfer_summary(clinic_id)
    return TransferSummaryResponse(
        clinic_id=clinic_id,
        pending_outgoing=summary.pending_outgoing,
        active=summary.active,
        completed=summary.completed,
    )


@router.get("/{transfer_id}", response_model=TransferResponse)
def get_transfer(transfer_id: str, store: InventoryStore = Depends(get_store)):
    return TransferResponse.from_transfer(store.get_transfer(transfer_id))


@router.post("/{transfer_id}/approve", response_model=TransferResponse)
def approve_transfer(
    transfer_id: str,
    clinic_id: str = Query(..., min_length=1, description="Sending clinic taking the action"),
    store: InventoryStore = Depends(get_store),
):
    """Pending → Approved.

    Raises:
        ConflictError (409): If clinic_id is not the sending clinic
        StateTransitionError (409): If the transfer is not Pending
    """
    return TransferResponse.from_transfer(store.approve_transfer(transfer_id, clinic_id))


@router.post("/{transfer_id}/reject", response_model=TransferResponse)
def reject_transfer(
    transfer_id: str,
    clinic_id: str = Query(..., min_length=1, description="Sending clinic taking the action"),
    store: InventoryStore = Depends(get_store),
):
    """Pending → Rejected; the surplus posting and request reopen."""
    return TransferResponse.from_transfer(store.reject_transfer(transfer_id, clinic_id))


@router.post("/{transfer_id}/dispatch", response_model=TransferResponse)
def dispatch_transfer(
    transfer_id: str,
    clinic_id: str = Query(..., min_length=1, description="Sending clinic taking the action"),
    store: InventoryStore = Depends(get_store),
):
    """Approved → In Transit."""
    return TransferResponse.from_transfer(store.dispatch_transfer(transfer_id, clinic_id))


@router.post("/{transfer_id}/complete", response_model=TransferResponse)
def complete_transfer(
    transfer_id: str,
    clinic_id: str = Query(..., min_length=1, description="Sending clinic taking the action"),
    store: InventoryStore = Depends(get_store),
):
    """Approved or In Transit → Completed; posting Transferred, request Fulfilled."""
    return TransferResponse.from_transfer(store.complete_transfer(transfer_id, clinic_id))


@impact_router.get("", response_model=ImpactStatsResponse)
def impact_stats(store: InventoryStore = Depends(get_store)):
    return ImpactStatsResponse.model_validate(store.impact_stats())
