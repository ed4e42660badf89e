"""Meal tracking routes"""

from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from api.dependencies import UUIDPath, get_db_session
from api.identity import get_caller_identity, require_caller_identity
from domain.schemas import (
    MealWrite,
    MealListResponse,
    MealDetailResponse,
    MealMetricsResponse,
)
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])


@router.get("", response_model=MealListResponse)
def list_meals(
    caller_id: Optional[str] = Depends(get_caller_identity),
    db: Session = Depends(get_db_session),
):
    """List the caller's meals, or every meal when no identity is sent."""
    return {"meals": MealService.list_meals(db, caller_id)}


# Declared before /{meal_id} so "metrics" is not parsed as an id
@router.get("/metrics", response_model=MealMetricsResponse)
def get_metrics(
    caller_id: str = Depends(require_caller_identity),
    db: Session = Depends(get_db_session),
):
    """Count the caller's meals inside and outside the diet."""
    return {"metrics": MealService.get_metrics(db, caller_id)}


@router.get("/{meal_id}", response_model=MealDetailResponse)
def get_meal(
    meal_id: UUIDPath,
    caller_id: str = Depends(require_caller_identity),
    db: Session = Depends(get_db_session),
):
    return {"meal": MealService.get_owned_meal(db, meal_id, caller_id)}


@router.put("/{meal_id}", status_code=status.HTTP_200_OK, response_class=Response)
def update_meal(
    meal_id: UUIDPath,
    meal: MealWrite,
    caller_id: str = Depends(require_caller_identity),
    db: Session = Depends(get_db_session),
):
    """Replace all mutable fields of one of the caller's meals."""
    MealService.update_meal(db, meal_id, caller_id, meal)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_meal(
    meal_id: UUIDPath,
    caller_id: str = Depends(require_caller_identity),
    db: Session = Depends(get_db_session),
):
    MealService.delete_meal(db, meal_id, caller_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    meal: MealWrite,
    caller_id: str = Depends(require_caller_identity),
    db: Session = Depends(get_db_session),
):
    """Log a new meal owned by the caller."""
    MealService.create_meal(db, caller_id, meal)
    return Response(status_code=status.HTTP_201_CREATED)
