"""
Database configuration and session management.
"""

import logging
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("dailydiet.database")

# Create SQLAlchemy Base
Base = declarative_base()


class Database:
    """
    Owns the engine and session factory for one relational store.

    Built once at application startup and disposed at shutdown; request
    handlers receive sessions through the ``get_db_session`` dependency.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        engine_kwargs = {"echo": echo, "future": True}
        if url.startswith("sqlite"):
            # Single shared connection so in-memory databases survive across sessions
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            engine_kwargs["poolclass"] = StaticPool
        self.engine: Engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(
            bind=self.engine, future=True, expire_on_commit=False
        )

    def create_schema(self) -> None:
        """Create the users and meals tables if they do not exist"""
        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def session(self) -> Generator[Session, None, None]:
        """Yield a session and make sure it is closed afterwards"""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")
