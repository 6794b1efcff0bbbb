from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import settings

engine: AsyncEngine = create_async_engine(settings.ADS_DB_URL, echo=False, future=True)

# Canonical async session factory
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
