"""User management routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from api.dependencies import UUIDPath, get_db_session
from domain.schemas import UserCreate, UserListResponse, UserDetailResponse
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=UserListResponse)
def list_users(db: Session = Depends(get_db_session)):
    """Return all users."""
    return {"users": UserService.list_users(db)}


@router.get("/{user_id}", response_model=UserDetailResponse)
def get_user(user_id: UUIDPath, db: Session = Depends(get_db_session)):
    """Get one user; ``user`` is null when the id is unknown."""
    return {"user": UserService.get_user(db, user_id)}


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(user: UserCreate, db: Session = Depends(get_db_session)):
    """Create a new user from JSON body"""
    UserService.create_user(db, name=user.name, email=user.email)
    return Response(status_code=status.HTTP_201_CREATED)
