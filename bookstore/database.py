"""
Database Configuration Module

SQLAlchemy 2.0 setup for the BookStore API.

Session Management Pattern
==========================
"Session per request":
1. Request arrives → create a new session
2. Repositories use that session for every store call in the request
3. Repositories commit on success, roll back on failure
4. Session is closed when the request ends

Route handlers are synchronous. FastAPI runs them in its thread pool,
so blocking database calls never stall the event loop.
"""

from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookstore.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# SQLite (local development) rejects pool sizing arguments and needs
# check_same_thread=False because sessions cross thread-pool workers.

if settings.is_sqlite:
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
        echo=settings.debug,
    )
else:
    engine = create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )


SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic reads Base.metadata to autogenerate migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields a fresh session and closes it when the request ends,
    even if the handler raised.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """
    Create all database tables.

    Development and tests only. Production schemas are managed by Alembic.
    """
    Base.metadata.create_all(bind=engine)


def ping() -> bool:
    """Return True if the database answers a trivial query."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False
