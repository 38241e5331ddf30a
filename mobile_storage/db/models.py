"""SQLAlchemy models for stored mobiles."""
from __future__ import annotations

from sqlalchemy import Column, String

from .session import Base


class MobileRecord(Base):
    __tablename__ = "mobiles"

    # Composite key: rows are unique on the whole record, not on imei alone.
    imei = Column(String(64), primary_key=True)
    model = Column(String(255), primary_key=True)
