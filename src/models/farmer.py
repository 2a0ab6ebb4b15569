"""Farmer profile model."""

from sqlalchemy import Column, String

from src.database import Base
from src.models.enums import ProfileType
from src.models.mixins import ProfileMixin


class Farmer(Base, ProfileMixin):
    """Profile attached to users with the farmer role."""

    __tablename__ = "farmers"

    profile_type = ProfileType.FARMER

    farmer_fname = Column(String(255), nullable=False)
    farmer_lname = Column(String(255), nullable=False, default="")
    farmer_contact = Column(String(50), nullable=False, default="")
