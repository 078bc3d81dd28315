"""Inventory API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_store
from ..models import InventoryStatus
from ..store import InventoryStore
from .schemas import InventoryItemCreate, InventoryItemResponse

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
def add_inventory_item(
    item_data: InventoryItemCreate,
    store: InventoryStore = Depends(get_store),
):
    """Record a batch of stock at a clinic.

    The status (In Stock, Low Stock, Expiring Soon, Expired) is derived
    from the expiry date and quantity.

    Raises:
        NotFoundError (404): If the clinic or medicine does not exist
    """
    item = store.add_inventory_item(
        clinic_id=item_data.clinic_id,
        medicine_id=item_data.medicine_id,
        batch_number=item_data.batch_number,
        quantity=item_data.quantity,
        unit=item_data.unit,
        expiry_date=item_data.expiry_date,
    )
    return InventoryItemResponse.from_item(item)


@router.get("", response_model=List[InventoryItemResponse])
def list_inventory(
    clinic_id: Optional[str] = Query(None, description="Only stock held by this clinic"),
    item_status: Optional[InventoryStatus] = Query(None, alias="status", description="Filter by status"),
    store: InventoryStore = Depends(get_store),
):
    items = store.list_inventory(clinic_id=clinic_id)
    if item_status is not None:
        items = [i for i in items if i.status == item_status]
    return [InventoryItemResponse.from_item(i) for i in items]


@router.get("/{item_id}", response_model=InventoryItemResponse)
def get_inventory_item(item_id: str, store: InventoryStore = Depends(get_store)):
    return InventoryItemResponse.from_item(store.get_inventory_item(item_id))
