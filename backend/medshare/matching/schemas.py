"""Pydantic schemas for matching endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..catalog.schemas import MedicineResponse
from ..clinics.schemas import ClinicResponse
from ..inventory.schemas import InventoryItemResponse
from ..medicine_requests.schemas import RequestResponse
from ..surplus.schemas import SurplusResponse
from .ports import Match


class ScoreBreakdownSchema(BaseModel):
    """Sub-scores behind a match score."""
    urgency_score: float
    expiry_score: float
    quantity_score: float
    weighted_total: float

    class Config:
        from_attributes = True


class MatchSchema(BaseModel):
    """Scored surplus/request pairing.

    match_score is not capped at 100: stock that has already expired gets an
    expiry score above 100.
    """
    key: str
    surplus: SurplusResponse
    request: RequestResponse
    inventory_item: InventoryItemResponse
    medicine: MedicineResponse
    from_clinic: ClinicResponse
    to_clinic: ClinicResponse
    match_score: int
    days_until_expiry: int
    scores: ScoreBreakdownSchema

    @classmethod
    def from_match(cls, match: Match) -> "MatchSchema":
        surplus_id, request_id = match.key
        return cls(
            key=f"{surplus_id}-{request_id}",
            surplus=SurplusResponse.model_validate(match.surplus),
            request=RequestResponse.model_validate(match.request),
            inventory_item=InventoryItemResponse.from_item(
                match.inventory_item, days_until_expiry=match.days_until_expiry
            ),
            medicine=MedicineResponse.model_validate(match.medicine),
            from_clinic=ClinicResponse.model_validate(match.from_clinic),
            to_clinic=ClinicResponse.model_validate(match.to_clinic),
            match_score=match.match_score,
            days_until_expiry=match.days_until_expiry,
            scores=ScoreBreakdownSchema.model_validate(match.scores),
        )


class MatchListResponse(BaseModel):
    """Ranked matches, highest score first."""
    items: List[MatchSchema]
    total: int


class TransferRequest(BaseModel):
    """Request a transfer for a matched surplus/request pair."""
    surplus_id: str = Field(..., min_length=1)
    request_id: str = Field(..., min_length=1)
    notes: Optional[str] = Field(None, max_length=1000)
