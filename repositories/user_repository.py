"""
User Repository - Data access layer for user-related operations
"""

from uuid import uuid4
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import User


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def create_user(self, name: str, email: str) -> User:
        """Create a new user with a generated id; email is not deduplicated"""
        user = User(id=str(uuid4()), name=name, email=email)
        return self.create(user)
