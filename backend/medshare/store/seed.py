"""Demo data for a fresh store.

Loaded at startup when settings.SEED_DEMO_DATA is true. Expiry dates are
relative to the seeding time so the demo always shows a mix of statuses.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from ..dates import ensure_utc, utcnow
from ..models import (
    Clinic,
    ClinicType,
    Medicine,
    MedicineCategory,
    MedicinePriority,
    SurplusReason,
    Unit,
    Urgency,
)
from .inventory_store import InventoryStore

logger = logging.getLogger(__name__)

DEMO_CLINICS = [
    Clinic(
        id="clinic-1",
        name="Asha Community Health Centre",
        type=ClinicType.NGO,
        location="Kothrud",
        district="Pune",
        state="Maharashtra",
        contact_person="Dr. Meera Kulkarni",
        phone="+91 98220 11111",
        email="contact@ashachc.org",
    ),
    Clinic(
        id="clinic-2",
        name="Primary Health Center Wagholi",
        type=ClinicType.PRIMARY_HEALTH_CENTER,
        location="Wagholi",
        district="Pune",
        state="Maharashtra",
        contact_person="Dr. Rajesh Patil",
        phone="+91 98220 22222",
        email="phc.wagholi@health.mh.gov.in",
    ),
    Clinic(
        id="clinic-3",
        name="Seva Charitable Hospital",
        type=ClinicType.CHARITABLE_HOSPITAL,
        location="Hadapsar",
        district="Pune",
        state="Maharashtra",
        contact_person="Sister Anita D'Souza",
        phone="+91 98220 33333",
        email="info@sevahospital.org",
    ),
    Clinic(
        id="clinic-4",
        name="Jeevan Mobile Medical Unit",
        type=ClinicType.MOBILE_MEDICAL_UNIT,
        location="Mulshi",
        district="Pune",
        state="Maharashtra",
        contact_person="Dr. Farhan Shaikh",
        phone="+91 98220 44444",
        email="mmu@jeevanfoundation.org",
    ),
]

DEMO_MEDICINES = [
    Medicine(
        id="med-1",
        name="Amoxicillin",
        generic_name="Amoxicillin Trihydrate",
        category=MedicineCategory.ANTIBIOTIC,
        strength="500mg",
        manufacturer="Cipla",
        priority=MedicinePriority.ESSENTIAL,
    ),
    Medicine(
        id="med-2",
        name="Paracetamol",
        generic_name="Acetaminophen",
        category=MedicineCategory.PAINKILLER,
        strength="650mg",
        manufacturer="GSK",
        priority=MedicinePriority.ESSENTIAL,
    ),
    Medicine(
        id="med-3",
        name="Metformin",
        generic_name="Metformin Hydrochloride",
        category=MedicineCategory.ANTIDIABETIC,
        strength="500mg",
        manufacturer="Sun Pharma",
        priority=MedicinePriority.CRITICAL,
    ),
    Medicine(
        id="med-4",
        name="Amlodipine",
        generic_name="Amlodipine Besylate",
        category=MedicineCategory.ANTIHYPERTENSIVE,
        strength="5mg",
        manufacturer="Lupin",
    ),
    Medicine(
        id="med-5",
        name="ORS",
        generic_name="Oral Rehydration Salts",
        category=MedicineCategory.OTHER,
        strength="21g",
        manufacturer="FDC",
        priority=MedicinePriority.CRITICAL,
    ),
]


def seed_demo_data(store: InventoryStore, now: Optional[datetime] = None) -> InventoryStore:
    """Populate ``store`` with demo clinics, stock, surplus and requests."""
    now = ensure_utc(now or utcnow())

    for clinic in DEMO_CLINICS:
        store.add_clinic(clinic)
    for medicine in DEMO_MEDICINES:
        store.add_medicine(medicine)

    stock = [
        # (item id, clinic, medicine, batch, quantity, unit, days to expiry)
        ("inv-1", "clinic-1", "med-1", "AMX-2301", 1200, Unit.CAPSULES, 45),
        ("inv-2", "clinic-1", "med-2", "PCM-2305", 3000, Unit.TABLETS, 200),
        ("inv-3", "clinic-2", "med-3", "MET-2210", 800, Unit.TABLETS, 20),
        ("inv-4", "clinic-3", "med-4", "AML-2302", 300, Unit.TABLETS, 365),
        ("inv-5", "clinic-4", "med-5", "ORS-2304", 150, Unit.BOTTLES, 60),
        ("inv-6", "clinic-2", "med-2", "PCM-2211", 900, Unit.TABLETS, 75),
    ]
    for item_id, clinic_id, medicine_id, batch, quantity, unit, days in stock:
        store.add_inventory_item(
            clinic_id=clinic_id,
            medicine_id=medicine_id,
            batch_number=batch,
            quantity=quantity,
            unit=unit,
            expiry_date=now + timedelta(days=days),
            now=now,
            item_id=item_id,
        )

    store.post_surplus("clinic-1", "inv-1", 1000, SurplusReason.NEAR_EXPIRY,
                       notes="Outreach camp cancelled", now=now, surplus_id="surplus-1")
    store.post_surplus("clinic-2", "inv-3", 500, SurplusReason.OVERSTOCKED,
                       now=now, surplus_id="surplus-2")
    store.post_surplus("clinic-2", "inv-6", 400, SurplusReason.PROGRAM_ENDED,
                       now=now, surplus_id="surplus-3")

    store.create_request("clinic-3", "med-1", 500, Unit.CAPSULES, Urgency.CRITICAL,
                         "Respiratory infection outbreak", now=now, request_id="request-1")
    store.create_request("clinic-4", "med-3", 600, Unit.TABLETS, Urgency.HIGH,
                         "Diabetes screening drive", now=now, request_id="request-2")
    store.create_request("clinic-4", "med-2", 1000, Unit.TABLETS, Urgency.MEDIUM,
                         "Fever cases in villages", now=now, request_id="request-3")
    store.create_request("clinic-3", "med-1", 200, Unit.CAPSULES, Urgency.LOW,
                         "Buffer stock", now=now, request_id="request-4")

    logger.info("Demo data loaded")
    return store
