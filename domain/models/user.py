"""
User database model.
"""

from sqlalchemy import Column, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class User(Base):
    """Person whose meals are tracked"""

    __tablename__ = "users"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    # No cascade; users are never deleted by this service
    meals = relationship("Meal", back_populates="user")
