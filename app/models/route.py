"""Saved route model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.database import Base, utcnow


class Route(Base):
    """Frequently travelled origin/destination pair."""

    __tablename__ = "routes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    origin = Column(String(256), nullable=False)
    destination = Column(String(256), nullable=False)
    kilometers = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
