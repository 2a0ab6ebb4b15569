"""Farmer and investor profile schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

from src.models.enums import InvestorType

# Input text is trimmed before length checks, so blank strings fail min_length
Text20 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)]
Text30 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=30)]
Text50 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
Text255 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
OptionalText50 = Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)]


class FarmerProfileUpdate(BaseModel):
    """Writable farmer profile fields."""

    farmer_fname: Text30
    farmer_lname: Text30
    farmer_contact: Text50


class InvestorProfileUpdate(BaseModel):
    """Writable investor profile fields."""

    investor_name: Text255
    investor_contact_no: Text50
    investor_budget_range: OptionalText50 | None = None
    investor_type: InvestorType | None = None


class FarmerResponse(BaseModel):
    """Farmer profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    farmer_fname: str
    farmer_lname: str
    farmer_contact: str
    created_at: datetime
    updated_at: datetime


class InvestorResponse(BaseModel):
    """Investor profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    investor_name: str
    investor_contact_no: str
    investor_budget_range: str
    investor_type: str
    created_at: datetime
    updated_at: datetime
