"""Trip model."""

from decimal import Decimal

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text

from app.database import Base, utcnow


class Trip(Base):
    """A single business trip and its expenses."""

    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    route_id = Column(Integer, ForeignKey("routes.id", ondelete="SET NULL"), nullable=True, index=True)
    date = Column(DateTime, nullable=False, index=True)
    origin = Column(String(256), nullable=False)
    destination = Column(String(256), nullable=False)
    kilometers = Column(Integer, nullable=False)
    fuel_cost = Column(Numeric(10, 2), nullable=False)
    parking_cost = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))
    toll_cost = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))
    other_cost = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))
    total_cost = Column(Numeric(10, 2), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
