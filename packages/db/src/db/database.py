# This project was developed with assistance from AI tools.
"""Async engine, session factory, and declarative base."""

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from .config import db_settings

engine = create_async_engine(db_settings.DATABASE_URL, echo=db_settings.SQL_ECHO)
SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db() -> AsyncIterator[AsyncSession]:
    """Yield a session that is closed when the caller is done with it."""
    async with SessionLocal() as session:
        yield session
