from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import Meal
from domain.schemas import MealWrite, MealMetrics
from repositories import MealRepository
from app.exceptions import UnauthorizedError

logger = logging.getLogger("dailydiet.meals")


class MealService:
    """Business logic for meal tracking"""

    @staticmethod
    def list_meals(db: Session, caller_id: Optional[str] = None) -> List[Meal]:
        """
        List the caller's meals.

        Without a caller identity every user's meals are returned.
        """
        return MealRepository(db).list_meals(user_id=caller_id)

    @staticmethod
    def get_owned_meal(db: Session, meal_id: str, caller_id: str) -> Meal:
        """
        Load a meal and verify it belongs to the caller.

        A missing meal and a meal owned by someone else are rejected the same
        way.

        Raises:
            UnauthorizedError: meal not found or owned by another user
        """
        meal = MealRepository(db).get_by_id(meal_id)
        owner = meal.user_id if meal is not None else None

        if owner is None or str(owner) != str(caller_id):
            logger.warning(
                f"meal_access_denied meal_id={meal_id} caller_id={caller_id} found={meal is not None}"
            )
            raise UnauthorizedError(details={"meal_id": meal_id})

        return meal

    @staticmethod
    def get_metrics(db: Session, caller_id: str) -> MealMetrics:
        repo = MealRepository(db)
        inside = repo.count_by_diet(caller_id, inside_diet=True)
        outside = repo.count_by_diet(caller_id, inside_diet=False)
        return MealMetrics(
            totalMeals=inside + outside, inside_diet=inside, outside_diet=outside
        )

    @staticmethod
    def create_meal(db: Session, caller_id: str, data: MealWrite) -> Meal:
        meal = MealRepository(db).create_meal(
            user_id=caller_id,
            name=data.name,
            description=data.description,
            datetime=data.datetime,
            inside_diet=data.inside_diet,
        )
        logger.info(f"meal_created meal_id={meal.id} user_id={caller_id}")
        return meal

    @staticmethod
    def update_meal(
        db: Session, meal_id: str, caller_id: str, data: MealWrite
    ) -> None:
        """Replace every mutable field of an owned meal."""
        MealService.get_owned_meal(db, meal_id, caller_id)

        # Owner is re-asserted from the caller, which already passed the check
        MealRepository(db).replace_meal(
            meal_id,
            user_id=caller_id,
            name=data.name,
            description=data.description,
            datetime=data.datetime,
            inside_diet=data.inside_diet,
        )
        logger.info(f"meal_updated meal_id={meal_id} user_id={caller_id}")

    @staticmethod
    def delete_meal(db: Session, meal_id: str, caller_id: str) -> None:
        MealService.get_owned_meal(db, meal_id, caller_id)
        MealRepository(db).delete(meal_id)
        logger.info(f"meal_deleted meal_id={meal_id} user_id={caller_id}")
