"""
Meal database model.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Meal(Base):
    """A meal logged by a user, flagged as inside or outside their diet"""

    __tablename__ = "meals"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    # Caller-supplied point in time, stored as given
    datetime = Column(Text, nullable=False)
    inside_diet = Column(Boolean, nullable=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    user_id = Column(Text, ForeignKey("users.id"), nullable=False)

    # Relationships
    user = relationship("User", back_populates="meals")
