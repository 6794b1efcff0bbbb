import asyncio

from app.adapters.repos.ads import SqlAlchemyAdRepository
from app.db import async_session_maker
from app.service_layer.listings import public_listing, quality_listing


async def main():
    repo = SqlAlchemyAdRepository(async_session_maker)

    for q in await quality_listing(repo):
        print(q.id, q.typology.value, q.score, q.irrelevant_since)

    print("public:", [p.id for p in await public_listing(repo)])


if __name__ == "__main__":
    asyncio.run(main())
