"""Pydantic schemas for clinics"""

from typing import Optional

from pydantic import BaseModel, Field

from ..models import ClinicType


class ClinicBase(BaseModel):
    """Base schema for Clinic"""
    name: str = Field(..., min_length=1, max_length=200)
    type: ClinicType
    location: str = Field(..., min_length=1, max_length=200)
    district: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    contact_person: str = ""
    phone: str = ""
    email: str = ""


class ClinicCreate(ClinicBase):
    """Schema for registering a clinic; id is generated when omitted"""
    id: Optional[str] = Field(None, min_length=1, max_length=64)


class ClinicResponse(ClinicBase):
    """Schema for Clinic response"""
    id: str

    class Config:
        from_attributes = True
