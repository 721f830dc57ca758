"""Restaurant table model"""

from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.database import Base


class Table(Base):
    """Dining tables that a seated reservation occupies"""
    __tablename__ = "tables"

    table_id = Column(Integer, primary_key=True, autoincrement=True)
    table_name = Column(String(255), nullable=False)
    capacity = Column(Integer, nullable=False)

    # Occupancy: set while a reservation is seated here
    reservation_id = Column(Integer, ForeignKey("reservations.reservation_id"), nullable=True)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    reservation = relationship("Reservation", back_populates="table")

    @property
    def is_occupied(self) -> bool:
        return self.reservation_id is not None
