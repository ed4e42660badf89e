"""
Meal request/response schemas.

Request bodies use the camelCase ``insideDiet`` key; responses expose the
stored column names.
"""

import datetime as dt
from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class MealWrite(BaseModel):
    """Body of POST /meals and PUT /meals/{id}. Every field is required."""

    name: StrictStr
    description: StrictStr
    datetime: StrictStr = Field(
        ..., description="Point in time of the meal, stored as given"
    )
    # Only the camelCase key is accepted on input
    inside_diet: StrictBool = Field(..., alias="insideDiet")


class MealResponse(BaseModel):
    id: str
    name: str
    description: str
    datetime: str
    inside_diet: bool
    created_at: dt.datetime
    user_id: str

    model_config = ConfigDict(from_attributes=True)


class MealListResponse(BaseModel):
    meals: List[MealResponse]


class MealDetailResponse(BaseModel):
    meal: MealResponse


class MealMetrics(BaseModel):
    totalMeals: int = Field(..., description="inside_diet + outside_diet")
    inside_diet: int
    outside_diet: int


class MealMetricsResponse(BaseModel):
    metrics: MealMetrics
