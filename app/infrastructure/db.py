"""Database infrastructure setup for the hosted listings database."""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.infrastructure.config.settings import settings

# Created on first use so csv/in-memory modes never need DATABASE_URL
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    Raises:
        ValueError: If DATABASE_URL is not configured
    """
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required for database operations")
        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,
            echo=settings.debug_mode,
        )
    return _engine


def get_db_session() -> Session:
    """
    Get a database session.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal()


def dispose_engine() -> None:
    """Close pooled connections, if an engine was ever created."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
