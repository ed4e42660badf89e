"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import (
    UserCreate,
    UserResponse,
    UserListResponse,
    UserDetailResponse,
)
from domain.schemas.meal_schemas import (
    MealWrite,
    MealResponse,
    MealListResponse,
    MealDetailResponse,
    MealMetrics,
    MealMetricsResponse,
)

__all__ = [
    # User schemas
    "UserCreate",
    "UserResponse",
    "UserListResponse",
    "UserDetailResponse",
    # Meal schemas
    "MealWrite",
    "MealResponse",
    "MealListResponse",
    "MealDetailResponse",
    "MealMetrics",
    "MealMetricsResponse",
]
