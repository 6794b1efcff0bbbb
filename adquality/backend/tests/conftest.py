# tests/conftest.py
import pytest
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.adapters.ingestion.seed_json import load_catalogue
from app.adapters.repos.ads import SqlAlchemyAdRepository
from app.adapters.repos.memory import InMemoryAdRepository
from app.domain.types import RawAd, Typology
from app.models import Base
from app.service_layer.demo_seed import seed_ads


def words(n: int, word: str = "palabra") -> str:
    return " ".join([word] * n)


def make_ad(**kw) -> RawAd:
    kw.setdefault("id", 1)
    kw.setdefault("typology", Typology.FLAT)
    return RawAd(**kw)


@pytest.fixture
async def engine():
    """
    Fresh in-memory DB per test. StaticPool makes all connections share the same
    in-memory database for the lifetime of this engine fixture.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def async_session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=True)


@pytest.fixture
def catalogue():
    return load_catalogue()


@pytest.fixture
def memory_repository(catalogue):
    return InMemoryAdRepository(catalogue=catalogue)


@pytest.fixture
async def sql_repository(async_session_maker, catalogue):
    async with async_session_maker() as session:
        await seed_ads(session, catalogue)
        await session.commit()
    return SqlAlchemyAdRepository(async_session_maker)
