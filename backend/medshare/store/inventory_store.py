"""In-memory store for clinics, stock, surplus, requests and transfers.

The store is the only owner of the collections. Records are immutable
dataclasses; every update replaces the stored record with a modified copy
(``dataclasses.replace``), so snapshots handed to the matcher never change
underneath it.

Mutations are serialised by a single lock because FastAPI runs sync
endpoints in a thread pool.
"""

import logging
import threading
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..dates import ensure_utc, utcnow
from ..inventory.status import derive_inventory_status
from ..models import (
    Clinic,
    InventoryItem,
    InventoryStatus,
    Medicine,
    MedicineRequest,
    RequestStatus,
    SurplusPosting,
    SurplusReason,
    SurplusStatus,
    Transfer,
    TransferStatus,
    Unit,
    Urgency,
)
from ..observability import metrics
from ..transfers.status import is_terminal, validate_transition
from .errors import (
    ConflictError,
    InsufficientStockError,
    InvalidQuantityError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreSnapshot:
    """Point-in-time copy of the collections the matcher reads."""
    clinics: Tuple[Clinic, ...]
    medicines: Tuple[Medicine, ...]
    inventory: Tuple[InventoryItem, ...]
    surplus_postings: Tuple[SurplusPosting, ...]
    requests: Tuple[MedicineRequest, ...]


@dataclass(frozen=True)
class TransferSummary:
    """Transfer counts shown on a clinic's transfer dashboard."""
    pending_outgoing: int
    active: int
    completed: int


@dataclass(frozen=True)
class ImpactStats:
    """Network-wide impact of completed transfers."""
    transfers_completed: int
    medicines_saved: int
    clinics_helped: int


def _new_id() -> str:
    return str(uuid.uuid4())


def _require_positive(quantity: int) -> None:
    if quantity <= 0:
        raise InvalidQuantityError(f"Quantity must be positive (got {quantity})")


class InventoryStore:
    """Repository owning every MedShare collection."""

    def __init__(self):
        self._lock = threading.RLock()
        self._clinics: Dict[str, Clinic] = {}
        self._medicines: Dict[str, Medicine] = {}
        self._inventory: Dict[str, InventoryItem] = {}
        self._surplus: Dict[str, SurplusPosting] = {}
        self._requests: Dict[str, MedicineRequest] = {}
        self._transfers: Dict[str, Transfer] = {}

    # ------------------------------------------------------------------
    # Clinics and medicines
    # ------------------------------------------------------------------

    def add_clinic(self, clinic: Clinic) -> Clinic:
        with self._lock:
            if clinic.id in self._clinics:
                raise ConflictError(f"Clinic {clinic.id} already exists")
            self._clinics[clinic.id] = clinic
        logger.info(f"Clinic added: {clinic.name}", extra={"clinic_id": clinic.id})
        return clinic

    def add_medicine(self, medicine: Medicine) -> Medicine:
        with self._lock:
            if medicine.id in self._medicines:
                raise ConflictError(f"Medicine {medicine.id} already exists")
            self._medicines[medicine.id] = medicine
        logger.info(f"Medicine added: {medicine.name} {medicine.strength}")
        return medicine

    def get_clinic(self, clinic_id: str) -> Clinic:
        return self._get(self._clinics, "Clinic", clinic_id)

    def get_medicine(self, medicine_id: str) -> Medicine:
        return self._get(self._medicines, "Medicine", medicine_id)

    def list_clinics(self) -> List[Clinic]:
        with self._lock:
            return list(self._clinics.values())

    def list_medicines(self) -> List[Medicine]:
        with self._lock:
            return list(self._medicines.values())

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    def add_inventory_item(
        self,
        clinic_id: str,
        medicine_id: str,
        batch_number: str,
        quantity: int,
        unit: Unit,
        expiry_date: datetime,
        now: Optional[datetime] = None,
        item_id: Optional[str] = None,
    ) -> InventoryItem:
        """Record a batch of stock at a clinic.

        The item's status is derived from its expiry date and quantity at
        the time it is added.

        Raises:
            NotFoundError: If the clinic or medicine does not exist
            InvalidQuantityError: If quantity is not positive
        """
        _require_positive(quantity)
        now = ensure_utc(now or utcnow())
        expiry_date = ensure_utc(expiry_date)

        with self._lock:
            self.get_clinic(clinic_id)
            self.get_medicine(medicine_id)

            item = InventoryItem(
                id=item_id or _new_id(),
                clinic_id=clinic_id,
                medicine_id=medicine_id,
                batch_number=batch_number,
                quantity=quantity,
                unit=Unit(unit),
                expiry_date=expiry_date,
                status=derive_inventory_status(quantity, expiry_date, now),
                added_date=now,
            )
            self._inventory[item.id] = item

        logger.info(
            f"Inventory item added: batch {batch_number} ({item.status.value})",
            extra={"clinic_id": clinic_id},
        )
        return item

    def get_inventory_item(self, item_id: str) -> InventoryItem:
        return self._get(self._inventory, "Inventory item", item_id)

    def list_inventory(self, clinic_id: Optional[str] = None) -> List[InventoryItem]:
        with self._lock:
            items = list(self._inventory.values())
        if clinic_id is not None:
            items = [i for i in items if i.clinic_id == clinic_id]
        return items

    # ------------------------------------------------------------------
    # Surplus postings
    # ------------------------------------------------------------------

    def post_surplus(
        self,
        clinic_id: str,
        inventory_item_id: str,
        quantity: int,
        reason: SurplusReason,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
        surplus_id: Optional[str] = None,
    ) -> SurplusPosting:
        """Offer part or all of an inventory item to other clinics.

        Raises:
            NotFoundError: If the clinic or inventory item does not exist
            ConflictError: If the item belongs to another clinic, is expired
                or has no stock
            InsufficientStockError: If quantity exceeds the item's stock
            InvalidQuantityError: If quantity is not positive
        """
        _require_positive(quantity)

        with self._lock:
            self.get_clinic(clinic_id)
            item = self.get_inventory_item(inventory_item_id)

            if item.clinic_id != clinic_id:
                raise ConflictError(
                    f"Inventory item {item.id} belongs to clinic {item.clinic_id}, not {clinic_id}"
                )
            if item.status == InventoryStatus.EXPIRED or item.quantity <= 0:
                raise ConflictError(
                    f"Inventory item {item.id} cannot be posted as surplus ({item.status.value})"
                )
            if quantity > item.quantity:
                raise InsufficientStockError(
                    f"Quantity exceeds available stock ({quantity} > {item.quantity})"
                )

            posting = SurplusPosting(
                id=surplus_id or _new_id(),
                clinic_id=clinic_id,
                inventory_item_id=item.id,
                quantity=quantity,
                reason=SurplusReason(reason),
                status=SurplusStatus.AVAILABLE,
                posted_date=ensure_utc(now or utcnow()),
                notes=notes,
            )
            self._surplus[posting.id] = posting

        logger.info(
            f"Surplus posted: {quantity} units of item {item.id}",
            extra={"clinic_id": clinic_id, "surplus_id": posting.id},
        )
        return posting

    def cancel_surplus(self, surplus_id: str) -> SurplusPosting:
        """Withdraw an Available surplus posting.

        Raises:
            NotFoundError: If the posting does not exist
            ConflictError: If the posting is not Available
        """
        with self._lock:
            posting = self.get_surplus(surplus_id)
            if posting.status != SurplusStatus.AVAILABLE:
                raise ConflictError(
                    f"Only Available surplus can be cancelled (current: {posting.status.value})"
                )
            posting = self._set_surplus_status(posting, SurplusStatus.CANCELLED)

        logger.info("Surplus posting cancelled", extra={"surplus_id": surplus_id})
        return posting

    def get_surplus(self, surplus_id: str) -> SurplusPosting:
        return self._get(self._surplus, "Surplus posting", surplus_id)

    def list_surplus(self, clinic_id: Optional[str] = None) -> List[SurplusPosting]:
        with self._lock:
            postings = list(self._surplus.values())
        if clinic_id is not None:
            postings = [p for p in postings if p.clinic_id == clinic_id]
        return postings

    # ------------------------------------------------------------------
    # Medicine requests
    # ------------------------------------------------------------------

    def create_request(
        self,
        clinic_id: str,
        medicine_id: str,
        quantity: int,
        unit: Unit,
        urgency: Urgency,
        reason: str,
        now: Optional[datetime] = None,
        request_id: Optional[str] = None,
    ) -> MedicineRequest:
        """File an Open request for a medicine.

        Raises:
            NotFoundError: If the clinic or medicine does not exist
            InvalidQuantityError: If quantity is not positive
        """
        _require_positive(quantity)

        with self._lock:
            self.get_clinic(clinic_id)
            self.get_medicine(medicine_id)

            request = MedicineRequest(
                id=request_id or _new_id(),
                clinic_id=clinic_id,
                medicine_id=medicine_id,
                quantity=quantity,
                unit=Unit(unit),
                urgency=Urgency(urgency),
                reason=reason,
                status=RequestStatus.OPEN,
                requested_date=ensure_utc(now or utcnow()),
            )
            self._requests[request.id] = request

        logger.info(
            f"Request created: {quantity} {request.unit.value} ({request.urgency.value})",
            extra={"clinic_id": clinic_id, "request_id_ref": request.id},
        )
        return request

    def cancel_request(self, request_id: str) -> MedicineRequest:
        """Withdraw an Open request.

        Raises:
            NotFoundError: If the request does not exist
            ConflictError: If the request is not Open
        """
        with self._lock:
            request = self.get_request(request_id)
            if request.status != RequestStatus.OPEN:
                raise ConflictError(
                    f"Only Open requests can be cancelled (current: {request.status.value})"
                )
            request = self._set_request_status(request, RequestStatus.CANCELLED)

        logger.info("Request cancelled", extra={"request_id_ref": request_id})
        return request

    def get_request(self, request_id: str) -> MedicineRequest:
        return self._get(self._requests, "Request", request_id)

    def list_requests(self, clinic_id: Optional[str] = None) -> List[MedicineRequest]:
        with self._lock:
            requests = list(self._requests.values())
        if clinic_id is not None:
            requests = [r for r in requests if r.clinic_id == clinic_id]
        return requests

    # ------------------------------------------------------------------
    # Transfers
    # ------------------------------------------------------------------

    def request_transfer(
        self,
        surplus_id: str,
        request_id: str,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Transfer:
        """Create a Pending transfer for a matched surplus/request pair.

        Reserves the surplus posting and marks the request Matched.

        Raises:
            NotFoundError: If the posting, request or inventory item does not exist
            ConflictError: If the posting is not Available, the request is
                not Open, or they concern different medicines
        """
        with self._lock:
            posting = self.get_surplus(surplus_id)
            request = self.get_request(request_id)
            item = self.get_inventory_item(posting.inventory_item_id)

            if posting.status != SurplusStatus.AVAILABLE:
                raise ConflictError(
                    f"Surplus posting {surplus_id} is not Available (current: {posting.status.value})"
                )
            if request.status != RequestStatus.OPEN:
                raise ConflictError(
                    f"Request {request_id} is not Open (current: {request.status.value})"
                )
            if item.medicine_id != request.medicine_id:
                raise ConflictError(
                    f"Surplus posting {surplus_id} and request {request_id} are for different medicines"
                )

            transfer = Transfer(
                id=_new_id(),
                surplus_posting_id=posting.id,
                request_id=request.id,
                from_clinic_id=posting.clinic_id,
                to_clinic_id=request.clinic_id,
                inventory_item_id=item.id,
                quantity=posting.quantity,
                status=TransferStatus.PENDING,
                requested_date=ensure_utc(now or utcnow()),
                notes=notes,
            )
            self._transfers[transfer.id] = transfer
            self._set_surplus_status(posting, SurplusStatus.RESERVED)
            self._set_request_status(request, RequestStatus.MATCHED)

        metrics.transfers_total.labels(status=TransferStatus.PENDING.value).inc()
        logger.info(
            "Transfer requested",
            extra={
                "transfer_id": transfer.id,
                "surplus_id": surplus_id,
                "request_id_ref": request_id,
            },
        )
        return transfer

    def approve_transfer(
        self,
        transfer_id: str,
        clinic_id: str,
        now: Optional[datetime] = None,
    ) -> Transfer:
        """Pending → Approved; records the approval date.

        Raises:
            ConflictError: If clinic_id is not the sending clinic
            StateTransitionError: If the transfer is not Pending
        """
        with self._lock:
            transfer = self._transition(transfer_id, TransferStatus.APPROVED, clinic_id)
            transfer = self._put_transfer(
                replace(transfer, approved_date=ensure_utc(now or utcnow()))
            )
        return transfer

    def reject_transfer(self, transfer_id: str, clinic_id: str) -> Transfer:
        """Pending → Rejected; the posting and request become matchable again."""
        with self._lock:
            transfer = self._transition(transfer_id, TransferStatus.REJECTED, clinic_id)
            self._release(transfer)
        return transfer

    def dispatch_transfer(self, transfer_id: str, clinic_id: str) -> Transfer:
        """Approved → In Transit."""
        with self._lock:
            return self._transition(transfer_id, TransferStatus.IN_TRANSIT, clinic_id)

    def complete_transfer(
        self,
        transfer_id: str,
        clinic_id: str,
        now: Optional[datetime] = None,
    ) -> Transfer:
        """Approved | In Transit → Completed.

        Marks the surplus posting Transferred and the request Fulfilled.
        """
        with self._lock:
            transfer = self._transition(transfer_id, TransferStatus.COMPLETED, clinic_id)
            transfer = self._put_transfer(
                replace(transfer, completed_date=ensure_utc(now or utcnow()))
            )

            posting = self._surplus.get(transfer.surplus_posting_id)
            if posting is not None:
                self._set_surplus_status(posting, SurplusStatus.TRANSFERRED)
            request = self._requests.get(transfer.request_id) if transfer.request_id else None
            if request is not None:
                self._set_request_status(request, RequestStatus.FULFILLED)
        return transfer

    def get_transfer(self, transfer_id: str) -> Transfer:
        return self._get(self._transfers, "Transfer", transfer_id)

    def list_transfers(
        self,
        clinic_id: Optional[str] = None,
        direction: Optional[str] = None,
    ) -> List[Transfer]:
        """List transfers, optionally for one clinic.

        Args:
            clinic_id: Only transfers this clinic sends or receives
            direction: "outgoing" (clinic sends) or "incoming" (clinic
                receives); ignored without clinic_id
        """
        with self._lock:
            transfers = list(self._transfers.values())
        if clinic_id is None:
            return transfers
        if direction == "outgoing":
            return [t for t in transfers if t.from_clinic_id == clinic_id]
        if direction == "incoming":
            return [t for t in transfers if t.to_clinic_id == clinic_id]
        return [
            t for t in transfers
            if t.from_clinic_id == clinic_id or t.to_clinic_id == clinic_id
        ]

    def transfer_summary(self, clinic_id: str) -> TransferSummary:
        transfers = self.list_transfers(clinic_id=clinic_id)
        return TransferSummary(
            pending_outgoing=sum(
                1 for t in transfers
                if t.from_clinic_id == clinic_id and t.status == TransferStatus.PENDING
            ),
            active=sum(
                1 for t in transfers
                if t.status in (TransferStatus.APPROVED, TransferStatus.IN_TRANSIT)
            ),
            completed=sum(1 for t in transfers if t.status == TransferStatus.COMPLETED),
        )

    def impact_stats(self) -> ImpactStats:
        completed = [
            t for t in self.list_transfers() if t.status == TransferStatus.COMPLETED
        ]
        return ImpactStats(
            transfers_completed=len(completed),
            medicines_saved=sum(t.quantity for t in completed),
            clinics_helped=len({t.to_clinic_id for t in completed}),
        )

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return StoreSnapshot(
                clinics=tuple(self._clinics.values()),
                medicines=tuple(self._medicines.values()),
                inventory=tuple(self._inventory.values()),
                surplus_postings=tuple(self._surplus.values()),
                requests=tuple(self._requests.values()),
            )

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {
                "clinics": len(self._clinics),
                "medicines": len(self._medicines),
                "inventory": len(self._inventory),
                "surplus_postings": len(self._surplus),
                "requests": len(self._requests),
                "transfers": len(self._transfers),
            }

    # ------------------------------------------------------------------
    # Internals (callers hold the lock)
    # ------------------------------------------------------------------

    def _get(self, collection: Dict, entity: str, record_id: str):
        with self._lock:
            record = collection.get(record_id)
        if record is None:
            raise NotFoundError(entity, record_id)
        return record

    def _transition(
        self,
        transfer_id: str,
        new_status: TransferStatus,
        clinic_id: str,
    ) -> Transfer:
        transfer = self.get_transfer(transfer_id)
        # Only the sending clinic acts on a transfer
        if transfer.from_clinic_id != clinic_id:
            raise ConflictError(
                f"Transfer {transfer_id} is sent by clinic {transfer.from_clinic_id}, not {clinic_id}"
            )
        validate_transition(transfer.status, new_status)
        transfer = self._put_transfer(replace(transfer, status=new_status))

        metrics.transfers_total.labels(status=new_status.value).inc()
        message = f"Transfer {new_status.value}"
        if is_terminal(new_status):
            message += " (closed)"
        logger.info(
            message,
            extra={
                "transfer_id": transfer_id,
                "clinic_id": clinic_id,
                "status": new_status.value,
            },
        )
        return transfer

    def _release(self, transfer: Transfer) -> None:
        posting = self._surplus.get(transfer.surplus_posting_id)
        if posting is not None and posting.status == SurplusStatus.RESERVED:
            self._set_surplus_status(posting, SurplusStatus.AVAILABLE)
        request = self._requests.get(transfer.request_id) if transfer.request_id else None
        if request is not None and request.status == RequestStatus.MATCHED:
            self._set_request_status(request, RequestStatus.OPEN)

    def _put_transfer(self, transfer: Transfer) -> Transfer:
        self._transfers[transfer.id] = transfer
        return transfer

    def _set_surplus_status(self, posting: SurplusPosting, status: SurplusStatus) -> SurplusPosting:
        posting = replace(posting, status=status)
        self._surplus[posting.id] = posting
        return posting

    def _set_request_status(self, request: MedicineRequest, status: RequestStatus) -> MedicineRequest:
        request = replace(request, status=status)
        self._requests[request.id] = request
        return request
