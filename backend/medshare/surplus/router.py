"""Surplus posting API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_store
from ..models import SurplusStatus
from ..store import InventoryStore
from .schemas import SurplusCreate, SurplusResponse

router = APIRouter(prefix="/surplus", tags=["surplus"])


@router.post("", response_model=SurplusResponse, status_code=status.HTTP_201_CREATED)
def post_surplus(
    surplus_data: SurplusCreate,
    store: InventoryStore = Depends(get_store),
):
    """Offer stock from one of the clinic's inventory items.

    Raises:
        NotFoundError (404): If the clinic or inventory item does not exist
        ConflictError (409): If the item belongs to another clinic, is
            expired, or holds fewer units than posted
    """
    posting = store.post_surplus(
        clinic_id=surplus_data.clinic_id,
        inventory_item_id=surplus_data.inventory_item_id,
        quantity=surplus_data.quantity,
        reason=surplus_data.reason,
        notes=surplus_data.notes,
    )
    return SurplusResponse.model_validate(posting)


@router.get("", response_model=List[SurplusResponse])
def list_surplus(
    clinic_id: Optional[str] = Query(None, description="Only postings by this clinic"),
    surplus_status: Optional[SurplusStatus] = Query(None, alias="status", description="Filter by status"),
    store: InventoryStore = Depends(get_store),
):
    postings = store.list_surplus(clinic_id=clinic_id)
    if surplus_status is not None:
        postings = [p for p in postings if p.status == surplus_status]
    return [SurplusResponse.model_validate(p) for p in postings]


@router.post("/{surplus_id}/cancel", response_model=SurplusResponse)
def cancel_surplus(surplus_id: str, store: InventoryStore = Depends(get_store)):
    """Withdraw an Available surplus posting.

    Raises:
        ConflictError (409): If the posting is no longer Available
    """
    return SurplusResponse.model_validate(store.cancel_surplus(surplus_id))
