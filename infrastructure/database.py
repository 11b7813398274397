import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from .config import DATABASE_URL, DATABASE_ECHO
from .orm import Base

logger = logging.getLogger(__name__)


def get_engine(database_url: str = DATABASE_URL, echo: bool = DATABASE_ECHO):
    """Create database engine."""
    return create_engine(database_url, echo=echo)


def get_session_factory(engine):
    """Create session factory."""
    return sessionmaker(bind=engine)


def init_db(database_url: str = DATABASE_URL, echo: bool = DATABASE_ECHO):
    """Initialize database and create tables for all entities."""
    engine = get_engine(database_url, echo=echo)
    Base.metadata.create_all(engine)
    logger.info(f"Initialized database at {engine.url!r}")
    return engine
