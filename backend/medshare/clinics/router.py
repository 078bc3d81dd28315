"""Clinic API endpoints"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from ..dependencies import get_store
from ..models import Clinic
from ..store import InventoryStore
from .schemas import ClinicCreate, ClinicResponse

router = APIRouter(prefix="/clinics", tags=["clinics"])


@router.post("", response_model=ClinicResponse, status_code=status.HTTP_201_CREATED)
def create_clinic(
    clinic_data: ClinicCreate,
    store: InventoryStore = Depends(get_store),
):
    """Register a clinic.

    Raises:
        ConflictError (409): If a clinic with the same id exists
    """
    clinic = Clinic(
        id=clinic_data.id or str(uuid.uuid4()),
        name=clinic_data.name,
        type=clinic_data.type,
        location=clinic_data.location,
        district=clinic_data.district,
        state=clinic_data.state,
        contact_person=clinic_data.contact_person,
        phone=clinic_data.phone,
        email=clinic_data.email,
    )
    return ClinicResponse.model_validate(store.add_clinic(clinic))


@router.get("", response_model=List[ClinicResponse])
def list_clinics(store: InventoryStore = Depends(get_store)):
    return [ClinicResponse.model_validate(c) for c in store.list_clinics()]


@router.get("/{clinic_id}", response_model=ClinicResponse)
def get_clinic(clinic_id: str, store: InventoryStore = Depends(get_store)):
    return ClinicResponse.model_validate(store.get_clinic(clinic_id))
