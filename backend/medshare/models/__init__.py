"""Domain models for MedShare

Records are frozen dataclasses. The store replaces a record with an updated
copy instead of mutating it.
"""

from .clinic import Clinic, ClinicType
from .medicine import Medicine, MedicineCategory, MedicinePriority
from .inventory_item import InventoryItem, InventoryStatus, Unit
from .surplus_posting import SurplusPosting, SurplusStatus, SurplusReason
from .medicine_request import MedicineRequest, RequestStatus, Urgency
from .transfer import Transfer, TransferStatus

__all__ = [
    "Clinic",
    "ClinicType",
    "Medicine",
    "MedicineCategory",
    "MedicinePriority",
    "InventoryItem",
    "InventoryStatus",
    "Unit",
    "SurplusPosting",
    "SurplusStatus",
    "SurplusReason",
    "MedicineRequest",
    "RequestStatus",
    "Urgency",
    "Transfer",
    "TransferStatus",
]
