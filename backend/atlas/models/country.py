"""Country ORM model."""
import uuid
from sqlalchemy import Column, String, BigInteger, Float, DateTime, ForeignKey
from sqlalchemy.sql import func
from atlas.database import Base


class Country(Base):
    __tablename__ = "countries"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    slug = Column(String(150), nullable=False, unique=True)
    name_fr = Column(String(200), nullable=False)
    name_en = Column(String(200), nullable=True)
    name_es = Column(String(200), nullable=True)
    name_pt = Column(String(200), nullable=True)
    iso_code_2 = Column(String(2), nullable=True)
    iso_code_3 = Column(String(3), nullable=True)
    region_id = Column(String(36), ForeignKey("african_regions.id"), nullable=True)
    population_2025 = Column(BigInteger, nullable=True)
    percentage_in_region = Column(Float, nullable=True)
    percentage_in_africa = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
