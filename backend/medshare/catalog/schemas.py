"""Pydantic schemas for the medicine catalog"""

from typing import Optional

from pydantic import BaseModel, Field

from ..models import MedicineCategory, MedicinePriority


class MedicineBase(BaseModel):
    """Base schema for Medicine"""
    name: str = Field(..., min_length=1, max_length=200)
    generic_name: str = Field(..., min_length=1, max_length=200)
    category: MedicineCategory
    strength: str = Field(..., min_length=1, max_length=50)
    manufacturer: str = ""
    priority: Optional[MedicinePriority] = None


class MedicineCreate(MedicineBase):
    """Schema for adding a medicine; id is generated when omitted"""
    id: Optional[str] = Field(None, min_length=1, max_length=64)


class MedicineResponse(MedicineBase):
    """Schema for Medicine response"""
    id: str

    class Config:
        from_attributes = True
