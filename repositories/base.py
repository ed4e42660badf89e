"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, TypeVar, Optional, List, Type
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    Every mapped model here uses a text ``id`` primary key.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """
        Get entity by ID.

        Args:
            entity_id: Entity id as stored (UUID text)

        Returns:
            Entity or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def get_all(self) -> List[ModelType]:
        """Get all entities in storage order"""
        return self.db.query(self.model).all()

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: str) -> bool:
        """Delete entity by ID"""
        count = self.db.query(self.model).filter(self.model.id == entity_id).delete()
        self.db.commit()
        return count > 0
