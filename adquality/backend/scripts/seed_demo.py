from __future__ import annotations

import argparse
import asyncio

from app.adapters.ingestion.seed_json import load_catalogue
from app.db import async_session_maker, engine
from app.models import Base
from app.service_layer.demo_seed import seed_ads


async def _ensure_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", default=None, help="Seed catalogue (defaults to the bundled app/data/ads.json)")
    args = parser.parse_args()

    await _ensure_schema()

    catalogue = load_catalogue(args.file)
    async with async_session_maker() as session:
        result = await seed_ads(session, catalogue)
        await session.commit()

    print(f"Seeded ads database. {result}")


if __name__ == "__main__":
    asyncio.run(main())
