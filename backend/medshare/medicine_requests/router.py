"""Medicine request API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_store
from ..models import RequestStatus, Urgency
from ..store import InventoryStore
from .schemas import RequestCreate, RequestResponse

router = APIRouter(prefix="/requests", tags=["requests"])


@router.post("", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
def create_request(
    request_data: RequestCreate,
    store: InventoryStore = Depends(get_store),
):
    """File an Open request for a medicine.

    Raises:
        NotFoundError (404): If the clinic or medicine does not exist
    """
    request = store.create_request(
        clinic_id=request_data.clinic_id,
        medicine_id=request_data.medicine_id,
        quantity=request_data.quantity,
        unit=request_data.unit,
        urgency=request_data.urgency,
        reason=request_data.reason,
    )
    return RequestResponse.model_validate(request)


@router.get("", response_model=List[RequestResponse])
def list_requests(
    clinic_id: Optional[str] = Query(None, description="Only requests filed by this clinic"),
    request_status: Optional[RequestStatus] = Query(None, alias="status", description="Filter by status"),
    urgency: Optional[Urgency] = Query(None, description="Filter by urgency"),
    store: InventoryStore = Depends(get_store),
):
    requests = store.list_requests(clinic_id=clinic_id)
    if request_status is not None:
        requests = [r for r in requests if r.status == request_status]
    if urgency is not None:
        requests = [r for r in requests if r.urgency == urgency]
    return [RequestResponse.model_validate(r) for r in requests]


@router.post("/{request_id}/cancel", response_model=RequestResponse)
def cancel_request(request_id: str, store: InventoryStore = Depends(get_store)):
    """Withdraw an Open request.

    Raises:
        ConflictError (409): If the request is no longer Open
    """
    return RequestResponse.model_validate(store.cancel_request(request_id))
