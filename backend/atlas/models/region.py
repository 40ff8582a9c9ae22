"""African region ORM model."""
import uuid
from sqlalchemy import Column, String, BigInteger, DateTime
from sqlalchemy.sql import func
from atlas.database import Base


class Region(Base):
    __tablename__ = "african_regions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    code = Column(String(100), nullable=False, unique=True)
    name_fr = Column(String(200), nullable=False)
    name_en = Column(String(200), nullable=True)
    name_es = Column(String(200), nullable=True)
    name_pt = Column(String(200), nullable=True)
    total_population = Column(BigInteger, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
