"""
User request/response schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class UserCreate(BaseModel):
    """Body of POST /users"""

    name: StrictStr = Field(..., description="Display name")
    email: StrictStr = Field(..., description="Contact email, not checked for uniqueness")


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    users: List[UserResponse]


class UserDetailResponse(BaseModel):
    """Lookup result; ``user`` is null when no row matches"""

    user: Optional[UserResponse] = None
