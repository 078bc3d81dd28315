"""Clinic model

A clinic is a participant in the sharing network. Surplus postings,
requests and transfers reference clinics by id.
"""

from dataclasses import dataclass
import enum


class ClinicType(str, enum.Enum):
    """Kind of organisation operating the clinic."""
    NGO = "NGO"
    PRIMARY_HEALTH_CENTER = "Primary Health Center"
    CHARITABLE_HOSPITAL = "Charitable Hospital"
    MOBILE_MEDICAL_UNIT = "Mobile Medical Unit"


@dataclass(frozen=True)
class Clinic:
    """Clinic participating in inventory sharing."""
    id: str
    name: str
    type: ClinicType
    location: str
    district: str
    state: str
    contact_person: str = ""
    phone: str = ""
    email: str = ""
