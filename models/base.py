import logging

from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from settings.config import get_settings

# Alembic-friendly naming convention to ensure stable constraint names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=naming_convention)
Base = declarative_base(metadata=metadata)

logger = logging.getLogger(__name__)


def _make_engine():
    """
    Create the async engine the team and user lookups run on.
    """
    settings = get_settings()
    engine = create_async_engine(settings.build_database_url(), pool_pre_ping=True)
    logger.info("SQLAlchemy async engine created for %s", settings.DB_NAME)
    return engine


engine = _make_engine()
# One session per lookup: concurrent lookups must never share a session
SessionLocal = async_sessionmaker(bind=engine, autoflush=False, class_=AsyncSession, expire_on_commit=False)

