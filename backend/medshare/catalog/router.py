"""Medicine catalog API endpoints"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_store
from ..models import Medicine, MedicineCategory
from ..store import InventoryStore
from .schemas import MedicineCreate, MedicineResponse

router = APIRouter(prefix="/medicines", tags=["medicines"])


@router.post("", response_model=MedicineResponse, status_code=status.HTTP_201_CREATED)
def create_medicine(
    medicine_data: MedicineCreate,
    store: InventoryStore = Depends(get_store),
):
    """Add a medicine to the shared catalog."""
    medicine = Medicine(
        id=medicine_data.id or str(uuid.uuid4()),
        name=medicine_data.name,
        generic_name=medicine_data.generic_name,
        category=medicine_data.category,
        strength=medicine_data.strength,
        manufacturer=medicine_data.manufacturer,
        priority=medicine_data.priority,
    )
    return MedicineResponse.model_validate(store.add_medicine(medicine))


@router.get("", response_model=List[MedicineResponse])
def list_medicines(
    search: Optional[str] = Query(None, description="Search term for name or generic name"),
    category: Optional[MedicineCategory] = Query(None, description="Filter by category"),
    store: InventoryStore = Depends(get_store),
):
    medicines = store.list_medicines()

    if category is not None:
        medicines = [m for m in medicines if m.category == category]

    if search:
        term = search.lower()
        medicines = [
            m for m in medicines
            if term in m.name.lower() or term in m.generic_name.lower()
        ]

    return [MedicineResponse.model_validate(m) for m in medicines]
