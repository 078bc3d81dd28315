"""Medicine model

Medicines form the shared catalog. Inventory items and requests point at a
medicine by id; matching only pairs stock and need for the same medicine.
"""

from dataclasses import dataclass
from typing import Optional
import enum


class MedicineCategory(str, enum.Enum):
    ANTIBIOTIC = "Antibiotic"
    PAINKILLER = "Painkiller"
    ANTISEPTIC = "Antiseptic"
    ANTIDIABETIC = "Antidiabetic"
    ANTIHYPERTENSIVE = "Antihypertensive"
    VITAMIN = "Vitamin"
    VACCINE = "Vaccine"
    OTHER = "Other"


class MedicinePriority(str, enum.Enum):
    ESSENTIAL = "Essential"
    CRITICAL = "Critical"
    STANDARD = "Standard"


@dataclass(frozen=True)
class Medicine:
    """Catalog entry for a medicine."""
    id: str
    name: str
    generic_name: str
    category: MedicineCategory
    strength: str
    manufacturer: str = ""
    priority: Optional[MedicinePriority] = None
