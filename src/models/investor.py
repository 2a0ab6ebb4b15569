"""Investor profile model."""

from sqlalchemy import Column, String

from src.database import Base
from src.models.enums import InvestorType, ProfileType
from src.models.mixins import ProfileMixin


class Investor(Base, ProfileMixin):
    """Profile attached to users with the investor role."""

    __tablename__ = "investors"

    profile_type = ProfileType.INVESTOR

    investor_name = Column(String(255), nullable=False)
    investor_contact_no = Column(String(50), nullable=False, default="")
    investor_budget_range = Column(String(50), nullable=False, default="0-0")  # "1000-5000"
    investor_type = Column(String(50), nullable=False, default=InvestorType.INDIVIDUAL.value)
