"""
API dependencies for dependency injection
"""

from typing import Annotated, Generator
from fastapi import Path, Request
from sqlalchemy.orm import Session

from domain.models import Database

# Canonical 8-4-4-4-12 form only; hyphenless, braced and urn: forms are rejected
UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

UUIDPath = Annotated[str, Path(pattern=UUID_PATTERN, description="Resource id (UUID)")]


def get_database(request: Request) -> Database:
    """Store opened by the application lifespan."""
    return request.app.state.database


def get_db_session(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db_session)):
            # Use db session here
            pass
    """
    yield from get_database(request).session()
