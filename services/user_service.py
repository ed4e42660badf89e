from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import User
from repositories import UserRepository

logger = logging.getLogger("dailydiet.users")


class UserService:
    """Business logic for user management"""

    @staticmethod
    def list_users(db: Session) -> List[User]:
        """Return all users (no pagination)."""
        return UserRepository(db).get_all()

    @staticmethod
    def get_user(db: Session, user_id: str) -> Optional[User]:
        """Look a user up by id; a miss is not an error."""
        user = UserRepository(db).get_by_id(user_id)

        if user:
            logger.info(f"user_fetched user_id={user_id}")
        else:
            logger.info(f"user_not_found user_id={user_id}")

        return user

    @staticmethod
    def create_user(db: Session, name: str, email: str) -> User:
        user = UserRepository(db).create_user(name=name, email=email)
        logger.info(f"user_created user_id={user.id}")
        return user
