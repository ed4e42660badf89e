"""
Meal Repository - Data access layer for meal operations
"""

from typing import List, Optional
from uuid import uuid4
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Meal


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def list_meals(self, user_id: Optional[str] = None) -> List[Meal]:
        """List meals of one user, or of every user when user_id is None"""
        query = self.db.query(Meal)
        if user_id is not None:
            query = query.filter(Meal.user_id == user_id)
        return query.all()

    def create_meal(
        self,
        user_id: str,
        name: str,
        description: str,
        datetime: str,
        inside_diet: bool,
    ) -> Meal:
        """Insert a meal owned by user_id under a generated id"""
        meal = Meal(
            id=str(uuid4()),
            name=name,
            description=description,
            datetime=datetime,
            inside_diet=inside_diet,
            user_id=user_id,
        )
        return self.create(meal)

    def replace_meal(
        self,
        meal_id: str,
        user_id: str,
        name: str,
        description: str,
        datetime: str,
        inside_diet: bool,
    ) -> int:
        """Overwrite every mutable column of a meal; returns rows affected"""
        count = (
            self.db.query(Meal)
            .filter(Meal.id == meal_id)
            .update(
                {
                    Meal.name: name,
                    Meal.description: description,
                    Meal.datetime: datetime,
                    Meal.inside_diet: inside_diet,
                    Meal.user_id: user_id,
                },
                synchronize_session=False,
            )
        )
        self.db.commit()
        return count

    def count_by_diet(self, user_id: str, inside_diet: bool) -> int:
        """Count a user's meals with the given inside_diet flag"""
        return (
            self.db.query(func.count(Meal.id))
            .filter(Meal.user_id == user_id, Meal.inside_diet == inside_diet)
            .scalar()
        )
