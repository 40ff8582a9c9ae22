"""EthnicGroup and EthnicGroupPresence ORM models."""
import uuid
from sqlalchemy import Column, String, BigInteger, Float, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from atlas.database import Base


class EthnicGroup(Base):
    __tablename__ = "ethnic_groups"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    slug = Column(String(150), nullable=False, unique=True)
    name_fr = Column(String(200), nullable=False)
    name_en = Column(String(200), nullable=True)
    name_es = Column(String(200), nullable=True)
    name_pt = Column(String(200), nullable=True)
    parent_id = Column(String(36), ForeignKey("ethnic_groups.id"), nullable=True)  # sub-group of
    total_population = Column(BigInteger, nullable=True)
    percentage_in_africa = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class EthnicGroupPresence(Base):
    """An ethnic group's demographic footprint within one country."""

    __tablename__ = "ethnic_group_presence"
    __table_args__ = (UniqueConstraint("ethnic_group_id", "country_id", name="uq_presence_group_country"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    ethnic_group_id = Column(String(36), ForeignKey("ethnic_groups.id"), nullable=False)
    country_id = Column(String(36), ForeignKey("countries.id"), nullable=False)
    population = Column(BigInteger, nullable=True)
    percentage_in_country = Column(Float, nullable=True)
    percentage_in_region = Column(Float, nullable=True)
    percentage_in_africa = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
