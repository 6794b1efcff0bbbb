# app/entrypoints/fastapi_app.py
from __future__ import annotations

import logging

from fastapi import FastAPI

from ..adapters.ingestion.seed_json import load_catalogue
from ..adapters.repos.ads import SqlAlchemyAdRepository
from ..adapters.repos.base import AdRepository
from ..adapters.repos.memory import InMemoryAdRepository
from ..config import settings
from ..db import async_session_maker, engine
from ..models import Base
from ..service_layer.demo_seed import seed_ads
from .api.routers import health, listings

log = logging.getLogger(__name__)


async def build_repository() -> AdRepository:
    if settings.ADS_REPOSITORY == "memory":
        return InMemoryAdRepository.from_seed_file(settings.ADS_SEED_FILE)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.ADS_SEED_ON_STARTUP:
        catalogue = load_catalogue(settings.ADS_SEED_FILE)
        async with async_session_maker() as session:
            result = await seed_ads(session, catalogue)
            await session.commit()
        log.info("seeded ads database: %s", result)

    return SqlAlchemyAdRepository(async_session_maker)


def create_app(repository: AdRepository | None = None) -> FastAPI:
    app = FastAPI(title="Ad Quality - Listings")

    @app.on_event("startup")
    async def _startup() -> None:
        # Single place where the ads source is built; every request reuses it.
        app.state.repository = repository if repository is not None else await build_repository()
        log.info("ads repository ready: %s", type(app.state.repository).__name__)

    # Routers
    app.include_router(health.router)
    app.include_router(listings.router)

    return app
