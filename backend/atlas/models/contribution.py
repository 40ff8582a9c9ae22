"""Contribution ORM model (the pending-change queue)."""
import uuid
import enum
from sqlalchemy import Column, String, Text, DateTime, JSON, Enum as SAEnum
from sqlalchemy.sql import func
from atlas.database import Base


class ContributionType(str, enum.Enum):
    new_region = "new_region"
    update_region = "update_region"
    new_country = "new_country"
    update_country = "update_country"
    new_ethnicity = "new_ethnicity"
    update_ethnicity = "update_ethnicity"
    new_presence = "new_presence"
    update_presence = "update_presence"


class ContributionStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class Contribution(Base):
    __tablename__ = "contributions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    type = Column(String(32), nullable=False)  # ContributionType value, kept as text
    status = Column(SAEnum(ContributionStatus, native_enum=False, length=20), nullable=False, default=ContributionStatus.pending, index=True)
    proposed_payload = Column(JSON, nullable=False)
    contributor_email = Column(String(255), nullable=True)
    contributor_name = Column(String(200), nullable=True)
    notes = Column(Text, nullable=True)
    moderator_notes = Column(Text, nullable=True)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
